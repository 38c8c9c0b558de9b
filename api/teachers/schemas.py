"""
Pydantic schemas for teacher endpoints.
"""

from __future__ import annotations

from pydantic import EmailStr, Field

from core.schemas import CamelModel


class TeacherProfile(CamelModel):
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    gender: str | None = Field(default=None, max_length=20)
    phone: str | None = Field(default=None, max_length=40)


class AddTeacherRequest(TeacherProfile):
    email: EmailStr
    password: str = Field(..., max_length=128)
    daycare_id: str | None = None


class UpdateTeacherRequest(TeacherProfile):
    email: EmailStr | None = None


class SetTeacherClassRequest(CamelModel):
    class_id: str = Field(..., min_length=1)


class TeacherResponse(TeacherProfile):
    id: str
    email: str
    daycare_id: str
    schedule_id: str | None = None
    class_ids: list[str] = Field(default_factory=list)

    @classmethod
    def from_row(cls, row: dict, *, class_ids: list[str] | None = None) -> "TeacherResponse":
        return cls(
            id=str(row["teacher_id"]),
            email=str(row["email"]),
            daycare_id=str(row["daycare_id"]),
            schedule_id=(str(row["schedule_id"]) if row.get("schedule_id") else None),
            class_ids=list(class_ids or []),
            **{k: row.get(k) for k in TeacherProfile.model_fields},
        )
