"""
Pydantic schemas for adult responsible endpoints.
"""

from __future__ import annotations

from pydantic import EmailStr, Field

from core.schemas import CamelModel


class AdultProfile(CamelModel):
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    gender: str | None = Field(default=None, max_length=20)
    phone: str | None = Field(default=None, max_length=40)
    address_1: str | None = Field(default=None, alias="address_1", max_length=200)
    address_2: str | None = Field(default=None, alias="address_2", max_length=200)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    zip: str | None = Field(default=None, max_length=20)


class AddAdultRequest(AdultProfile):
    email: EmailStr
    password: str = Field(..., max_length=128)
    daycare_id: str | None = None


class UpdateAdultRequest(AdultProfile):
    email: EmailStr | None = None


class AdultResponse(AdultProfile):
    id: str
    email: str
    daycare_id: str

    @classmethod
    def from_row(cls, row: dict) -> "AdultResponse":
        return cls(
            id=str(row["responsible_id"]),
            email=str(row["email"]),
            daycare_id=str(row["daycare_id"]),
            **{k: row.get(k) for k in AdultProfile.model_fields},
        )
