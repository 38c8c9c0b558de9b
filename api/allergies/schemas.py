"""
Pydantic schemas for allergy endpoints.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import CamelModel


class AllergyRequest(CamelModel):
    allergy: str = Field(..., min_length=1, max_length=200)
    instruction: str | None = Field(default=None, max_length=2000)


class AllergyResponse(CamelModel):
    id: str
    allergy: str
    instruction: str | None = None

    @classmethod
    def from_row(cls, row: dict) -> "AllergyResponse":
        return cls(id=str(row["allergy_id"]), allergy=str(row["allergy"]), instruction=row.get("instruction"))
