"""
Pydantic schemas for schedule endpoints.
"""

from __future__ import annotations

import re

from core.errors import ValidationError
from core.schemas import CamelModel

TIME_PATTERN = r"^\d{1,2}:\d{2}\s(AM|PM)$"
_TIME_RE = re.compile(TIME_PATTERN)

DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
TIME_COLUMNS = tuple(f"{day}_{edge}" for day in DAYS for edge in ("start", "end"))


class ScheduleRequest(CamelModel):
    walk_in: bool | None = None
    monday_start: str | None = None
    monday_end: str | None = None
    tuesday_start: str | None = None
    tuesday_end: str | None = None
    wednesday_start: str | None = None
    wednesday_end: str | None = None
    thursday_start: str | None = None
    thursday_end: str | None = None
    friday_start: str | None = None
    friday_end: str | None = None
    saturday_start: str | None = None
    saturday_end: str | None = None
    sunday_start: str | None = None
    sunday_end: str | None = None

    def check_times(self) -> None:
        """Every time that is sent must look like `8:30 AM`."""
        for column in TIME_COLUMNS:
            value = getattr(self, column)
            if value is not None and not _TIME_RE.match(value):
                raise ValidationError(
                    f"{value} does not match regex: time does not match the following regex: {TIME_PATTERN}"
                )


class ScheduleResponse(ScheduleRequest):
    id: str
    daycare_id: str
    walk_in: bool = False

    @classmethod
    def from_row(cls, row: dict) -> "ScheduleResponse":
        return cls(
            id=str(row["schedule_id"]),
            daycare_id=str(row["daycare_id"]),
            walk_in=bool(row.get("walk_in")),
            **{column: row.get(column) for column in TIME_COLUMNS},
        )
