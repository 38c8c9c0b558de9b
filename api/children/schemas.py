"""
Pydantic schemas for child endpoints.

Dates travel as free-form strings on the way in and are parsed by the
service; responses carry ISO dates.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from allergies.schemas import AllergyRequest, AllergyResponse
from core.schemas import CamelModel
from special_instructions.schemas import SpecialInstructionRequest, SpecialInstructionResponse


class AddChildRequest(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=200)
    last_name: str = Field(..., min_length=1, max_length=200)
    birth_date: str = Field(..., max_length=100)
    gender: str | None = Field(default=None, max_length=50)
    start_date: str | None = Field(default=None, max_length=100)
    notes: str | None = Field(default=None, max_length=5000)
    class_id: str | None = None
    daycare_id: str | None = None
    responsible_id: str | None = None
    relationship: str | None = None
    allergies: list[AllergyRequest] = Field(default_factory=list)
    special_instructions: list[SpecialInstructionRequest] = Field(default_factory=list)


class UpdateChildRequest(CamelModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=200)
    last_name: str | None = Field(default=None, min_length=1, max_length=200)
    birth_date: str | None = Field(default=None, max_length=100)
    gender: str | None = Field(default=None, max_length=50)
    start_date: str | None = Field(default=None, max_length=100)
    notes: str | None = Field(default=None, max_length=5000)
    class_id: str | None = None
    daycare_id: str | None = None
    allergies: list[AllergyRequest] | None = None
    special_instructions: list[SpecialInstructionRequest] | None = None


class SetResponsibleRequest(CamelModel):
    responsible_id: str = Field(..., min_length=1)
    relationship: str


class ResponsibleLink(CamelModel):
    responsible_id: str
    relationship: str
    first_name: str | None = None
    last_name: str | None = None


class ChildResponse(CamelModel):
    id: str
    daycare_id: str
    class_id: str | None = None
    schedule_id: str | None = None
    first_name: str
    last_name: str
    birth_date: date
    gender: str | None = None
    start_date: date | None = None
    notes: str | None = None
    allergies: list[AllergyResponse] = Field(default_factory=list)
    special_instructions: list[SpecialInstructionResponse] = Field(default_factory=list)
    responsibles: list[ResponsibleLink] = Field(default_factory=list)

    @classmethod
    def from_row(
        cls,
        row: dict,
        *,
        allergies: list[dict] | None = None,
        special_instructions: list[dict] | None = None,
        responsibles: list[dict] | None = None,
    ) -> "ChildResponse":
        return cls(
            id=str(row["child_id"]),
            daycare_id=str(row["daycare_id"]),
            class_id=(str(row["class_id"]) if row.get("class_id") else None),
            schedule_id=(str(row["schedule_id"]) if row.get("schedule_id") else None),
            first_name=str(row["first_name"]),
            last_name=str(row["last_name"]),
            birth_date=row["birth_date"],
            gender=row.get("gender"),
            start_date=row.get("start_date"),
            notes=row.get("notes"),
            allergies=[AllergyResponse.from_row(a) for a in allergies or []],
            special_instructions=[SpecialInstructionResponse.from_row(s) for s in special_instructions or []],
            responsibles=[
                ResponsibleLink(
                    responsible_id=str(r["responsible_id"]),
                    relationship=str(r["relationship"]),
                    first_name=r.get("first_name"),
                    last_name=r.get("last_name"),
                )
                for r in responsibles or []
            ],
        )
