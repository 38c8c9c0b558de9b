"""
Caller identity extracted from the access token, and tenancy helpers.

Every resource is owned by a daycare. Admins work across daycares; every
other role is pinned to the daycare carried by its token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from core.errors import ForbiddenError, ValidationError

ROLE_ADMIN = "admin"
ROLE_TEACHER = "teacher"
ROLE_ADULT = "adult"
ROLE_OFFICE_MANAGER = "officemanager"

ALL_ROLES = (ROLE_ADMIN, ROLE_TEACHER, ROLE_ADULT, ROLE_OFFICE_MANAGER)


def is_role_valid(role: str) -> bool:
    return role in ALL_ROLES


def has_any_role(granted: Iterable[str], allowed: Iterable[str]) -> bool:
    return bool(set(granted) & set(allowed))


@dataclass(frozen=True)
class SearchOptions:
    daycare_id: str | None = None
    responsible_id: str | None = None
    teacher_id: str | None = None


@dataclass(frozen=True)
class Claims:
    user_id: str
    email: str
    roles: tuple[str, ...] = field(default_factory=tuple)
    daycare_id: str | None = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Claims":
        return cls(
            user_id=str(payload["userId"]),
            email=str(payload.get("email") or ""),
            roles=tuple(str(r) for r in payload.get("roles") or []),
            daycare_id=(str(payload["daycareId"]) if payload.get("daycareId") else None),
        )

    @property
    def is_admin(self) -> bool:
        return ROLE_ADMIN in self.roles

    @property
    def is_office_manager(self) -> bool:
        return ROLE_OFFICE_MANAGER in self.roles

    @property
    def is_adult(self) -> bool:
        return ROLE_ADULT in self.roles

    @property
    def is_teacher(self) -> bool:
        return ROLE_TEACHER in self.roles

    def has_any_role(self, allowed: Iterable[str]) -> bool:
        return has_any_role(self.roles, allowed)

    def search_options(self) -> SearchOptions:
        """
        Default scoping for reads issued on behalf of this caller.
        """
        if self.is_admin:
            return SearchOptions()
        return SearchOptions(
            daycare_id=self.daycare_id or "",
            responsible_id=self.user_id if self.is_adult and not self.is_office_manager else None,
            teacher_id=self.user_id if self.is_teacher and not self.is_office_manager else None,
        )

    def resolve_daycare_id(self, requested: str | None, *, message: str) -> str:
        """
        Pick the daycare a new resource is created in.

        Admins must name one. Everybody else defaults to their own daycare
        and may not target another one.
        """
        requested = (requested or "").strip()
        if self.is_admin:
            if not requested:
                raise ValidationError("as an admin, you must specify a daycareId")
            return requested

        own = (self.daycare_id or "").strip()
        if not own:
            raise ForbiddenError("user is not attached to a daycare")
        if requested and requested != own:
            raise ForbiddenError(message)
        return own
