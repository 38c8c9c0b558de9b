"""
Relationship enumeration and free-form date parsing.
"""

from datetime import date

import pytest

from children import dates
from core.errors import ValidationError
from responsible_of import service as responsible_service


@pytest.mark.parametrize("relationship", ["father", "mother", "grandfather", "grandmother", "guardian"])
def test_known_relationships_are_valid(relationship):
    assert responsible_service.is_relationship_valid(relationship)
    assert responsible_service.validate_relationship(relationship) == relationship


@pytest.mark.parametrize("relationship", ["", None, "uncle", "Father"])
def test_unknown_relationships_are_rejected(relationship):
    assert not responsible_service.is_relationship_valid(relationship)
    with pytest.raises(ValidationError) as excinfo:
        responsible_service.validate_relationship(relationship)
    assert str(excinfo.value) == (
        "relationship is not valid, it should be one of [father mother grandfather grandmother guardian]"
    )


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2019-03-14", date(2019, 3, 14)),
        ("03/04/2019", date(2019, 3, 4)),
        ("March 14, 2019", date(2019, 3, 14)),
        ("2019-03-14T08:30:00Z", date(2019, 3, 14)),
    ],
)
def test_parse_date_accepts_common_formats(raw, expected):
    assert dates.parse_date(raw, label="birth date") == expected


def test_parse_date_rejects_garbage():
    with pytest.raises(ValidationError, match="invalid birth date: banana"):
        dates.parse_date("banana", label="birth date")


def test_parse_date_rejects_empty():
    with pytest.raises(ValidationError, match="invalid birth date"):
        dates.parse_date("  ", label="birth date")


def test_optional_date():
    assert dates.parse_optional_date(None, label="start date") is None
    assert dates.parse_optional_date("", label="start date") is None
    assert dates.parse_optional_date("2020-09-01", label="start date") == date(2020, 9, 1)
