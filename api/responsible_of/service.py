"""
Relationship rules between a child and the adults responsible for it.
"""

from __future__ import annotations

import logging
from typing import Any

from adults import repository as adult_repository
from core.errors import ConflictError, NotFoundError, ValidationError

from . import repository

logger = logging.getLogger(__name__)

FATHER = "father"
MOTHER = "mother"
GRANDFATHER = "grandfather"
GRANDMOTHER = "grandmother"
GUARDIAN = "guardian"

RELATIONSHIPS = (FATHER, MOTHER, GRANDFATHER, GRANDMOTHER, GUARDIAN)


def is_relationship_valid(relationship: str | None) -> bool:
    return relationship in RELATIONSHIPS


def validate_relationship(relationship: str | None) -> str:
    if not is_relationship_valid(relationship):
        raise ValidationError(
            "relationship is not valid, it should be one of [" + " ".join(RELATIONSHIPS) + "]"
        )
    return str(relationship)


async def link_responsible(
    *,
    child_id: str,
    child_daycare_id: str,
    responsible_id: str,
    relationship: str,
    conn: Any,
) -> None:
    """
    Attach an adult to a child. Both must live in the same daycare.
    """
    adult = await adult_repository.get_adult(responsible_id, conn=conn)
    if adult is None:
        raise NotFoundError("responsible not found")
    if str(adult["daycare_id"]) != child_daycare_id:
        raise ValidationError("responsible and child must belong to the same daycare")
    if await repository.get_link(responsible_id, child_id, conn=conn) is not None:
        raise ConflictError("responsible is already linked to this child")

    await repository.add_link(
        responsible_id=responsible_id,
        child_id=child_id,
        relationship=relationship,
        conn=conn,
    )
    logger.info(
        "responsible_linked child_id=%s responsible_id=%s relationship=%s",
        child_id,
        responsible_id,
        relationship,
    )
