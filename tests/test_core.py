"""
SQL helpers, error wrapping and configuration parsing.
"""

import asyncpg
import pytest
from fastapi import HTTPException

from core import config, db, errors


def test_set_clause_keeps_whitelisted_columns_in_order():
    assignments, args = db.set_clause(
        {"last_name": "Lopez", "email": "x@y.z", "first_name": "Mia"},
        ("first_name", "last_name"),
    )
    assert assignments == "first_name = $2, last_name = $3"
    assert args == ["Mia", "Lopez"]


def test_set_clause_empty():
    assert db.set_clause({"other": 1}, ("first_name",)) == ("", [])


@pytest.mark.parametrize("status, expected", [("DELETE 1", 1), ("UPDATE 0", 0), ("INSERT 0 3", 3), ("", 0)])
def test_affected_rows(status, expected):
    assert db.affected_rows(status) == expected


def test_sanitize_database_url_drops_sslmode():
    url = db._sanitize_database_url("postgresql://u:p@h:5432/d?sslmode=disable&application_name=tc")
    assert "sslmode" not in url
    assert "application_name=tc" in url


def test_pool_must_be_initialized(monkeypatch):
    monkeypatch.setattr(db, "_pool", None)
    with pytest.raises(RuntimeError):
        db.pool()
    assert not db.is_ready()


def test_wrap_keeps_domain_status():
    wrapped = errors.wrap(errors.NotFoundError("daycare not found"), "failed to add adult")
    assert isinstance(wrapped, HTTPException)
    assert wrapped.status_code == 404
    assert wrapped.detail == "failed to add adult: daycare not found"


def test_wrap_http_exception():
    wrapped = errors.wrap(HTTPException(status_code=409, detail="taken"), "failed to add class")
    assert wrapped.status_code == 409
    assert wrapped.detail == "failed to add class: taken"


def test_wrap_unique_violation_is_conflict():
    wrapped = errors.wrap(asyncpg.UniqueViolationError("duplicate key"), "failed to add office manager")
    assert wrapped.status_code == 409


def test_wrap_unknown_error_is_500():
    wrapped = errors.wrap(RuntimeError("boom"), "failed to add child")
    assert wrapped.status_code == 500
    assert wrapped.detail == "failed to add child: boom"


def test_env_int_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "lots")
    assert config.env_int("DB_POOL_MAX_SIZE", 5) == 5


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example ,")
    assert config.cors_origins() == ["https://a.example", "https://b.example"]


def test_bootstrap_admin_needs_both_values(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAIL", "root@example.com")
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)
    assert config.bootstrap_admin() is None
    monkeypatch.setenv("ADMIN_PASSWORD", "secret1")
    assert config.bootstrap_admin() == ("root@example.com", "secret1")
