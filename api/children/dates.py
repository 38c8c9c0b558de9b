"""
Free-form date parsing for child payloads.

Clients send dates the way people type them ("2019-03-14", "03/14/2019",
"March 14 2019", ...). Ambiguous numeric dates are read month first.
"""

from __future__ import annotations

from datetime import date

from dateutil import parser as date_parser

from core.errors import ValidationError


def parse_date(value: str | None, *, label: str) -> date:
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"invalid {label}: {value!r}")
    try:
        return date_parser.parse(text, dayfirst=False).date()
    except (ValueError, OverflowError) as exc:
        raise ValidationError(f"invalid {label}: {text}") from exc


def parse_optional_date(value: str | None, *, label: str) -> date | None:
    if value is None or not value.strip():
        return None
    return parse_date(value, label=label)
