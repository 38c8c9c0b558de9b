"""
Pydantic schemas for age range endpoints.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from core.schemas import CamelModel

# Weeks, months, years.
AgeUnit = Literal["W", "M", "Y"]

_DAYS_PER_UNIT = {"W": 7, "M": 30, "Y": 365}


def span_in_days(value: int, unit: str) -> int:
    return value * _DAYS_PER_UNIT[unit]


MIN_ABOVE_MAX = "age range min must not be greater than max"


def bounds_ok(min_value: int, min_unit: str, max_value: int, max_unit: str) -> bool:
    return span_in_days(min_value, min_unit) <= span_in_days(max_value, max_unit)


def _check_bounds(model) -> None:
    if not bounds_ok(model.min, model.min_unit, model.max, model.max_unit):
        raise ValueError(MIN_ABOVE_MAX)


class AgeRangeFields(CamelModel):
    min: int | None = Field(default=None, ge=0)
    min_unit: AgeUnit | None = None
    max: int | None = Field(default=None, ge=0)
    max_unit: AgeUnit | None = None


class AddAgeRangeRequest(AgeRangeFields):
    daycare_id: str | None = None
    stage: str = Field(..., min_length=1, max_length=100)
    min: int = Field(default=0, ge=0)
    min_unit: AgeUnit = "M"
    max: int = Field(default=0, ge=0)
    max_unit: AgeUnit = "M"

    @model_validator(mode="after")
    def _min_not_above_max(self) -> "AddAgeRangeRequest":
        _check_bounds(self)
        return self


class UpdateAgeRangeRequest(AgeRangeFields):
    stage: str | None = Field(default=None, min_length=1, max_length=100)


class AgeRangeRef(CamelModel):
    """
    Age range as embedded in a class payload: either an existing `id` or the
    fields of a new range.
    """

    id: str | None = None
    stage: str | None = Field(default=None, max_length=100)
    min: int = Field(default=0, ge=0)
    min_unit: AgeUnit = "M"
    max: int = Field(default=0, ge=0)
    max_unit: AgeUnit = "M"

    @model_validator(mode="after")
    def _min_not_above_max(self) -> "AgeRangeRef":
        if not self.id:
            _check_bounds(self)
        return self

    def is_empty(self) -> bool:
        return not self.id and not self.stage


class AgeRangeResponse(CamelModel):
    id: str
    daycare_id: str
    stage: str
    min: int
    min_unit: str
    max: int
    max_unit: str

    @classmethod
    def from_row(cls, row: dict) -> "AgeRangeResponse":
        return cls(
            id=str(row["age_range_id"]),
            daycare_id=str(row["daycare_id"]),
            stage=str(row["stage"]),
            min=int(row["min"]),
            min_unit=str(row["min_unit"]),
            max=int(row["max"]),
            max_unit=str(row["max_unit"]),
        )
