"""
Pydantic schemas for office manager endpoints.
"""

from __future__ import annotations

from pydantic import EmailStr, Field

from core.schemas import CamelModel


class OfficeManagerProfile(CamelModel):
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=40)


class AddOfficeManagerRequest(OfficeManagerProfile):
    email: EmailStr
    password: str = Field(..., max_length=128)
    daycare_id: str = Field(..., min_length=1)


class UpdateOfficeManagerRequest(OfficeManagerProfile):
    email: EmailStr | None = None
    daycare_id: str | None = Field(default=None, min_length=1)


class OfficeManagerResponse(OfficeManagerProfile):
    id: str
    email: str
    daycare_id: str

    @classmethod
    def from_row(cls, row: dict) -> "OfficeManagerResponse":
        return cls(
            id=str(row["office_manager_id"]),
            email=str(row["email"]),
            daycare_id=str(row["daycare_id"]),
            first_name=row.get("first_name"),
            last_name=row.get("last_name"),
            phone=row.get("phone"),
        )
