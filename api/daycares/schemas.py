"""
Pydantic schemas for daycare endpoints.
"""

from __future__ import annotations

from pydantic import Field

from core.schemas import CamelModel


class DaycareFields(CamelModel):
    address_1: str | None = Field(default=None, alias="address_1", max_length=200)
    address_2: str | None = Field(default=None, alias="address_2", max_length=200)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    zip: str | None = Field(default=None, max_length=20)


class AddDaycareRequest(DaycareFields):
    name: str = Field(..., min_length=1, max_length=200)


class UpdateDaycareRequest(DaycareFields):
    name: str | None = Field(default=None, min_length=1, max_length=200)


class DaycareResponse(DaycareFields):
    id: str
    name: str

    @classmethod
    def from_row(cls, row: dict) -> "DaycareResponse":
        return cls(
            id=str(row["daycare_id"]),
            name=str(row["name"]),
            address_1=row.get("address_1"),
            address_2=row.get("address_2"),
            city=row.get("city"),
            state=row.get("state"),
            zip=row.get("zip"),
        )
