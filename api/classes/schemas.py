"""
Pydantic schemas for class endpoints.
"""

from __future__ import annotations

from pydantic import Field

from ageranges.schemas import AgeRangeRef, AgeRangeResponse
from core.schemas import CamelModel


class AddClassRequest(CamelModel):
    daycare_id: str | None = None
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    age_range: AgeRangeRef | None = None


class UpdateClassRequest(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    age_range: AgeRangeRef | None = None


class ClassResponse(CamelModel):
    id: str
    daycare_id: str
    name: str
    description: str | None = None
    age_range: AgeRangeResponse

    @classmethod
    def from_row(cls, row: dict) -> "ClassResponse":
        return cls(
            id=str(row["class_id"]),
            daycare_id=str(row["daycare_id"]),
            name=str(row["name"]),
            description=row.get("description"),
            age_range=AgeRangeResponse.from_row(row),
        )
