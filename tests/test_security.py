"""
Password hashing and access token tests.
"""

import jwt
import pytest

from auth import security


def test_hash_and_verify_password():
    hashed = security.hash_password("s3cret!")
    assert hashed != "s3cret!"
    assert security.verify_password("s3cret!", hashed)
    assert not security.verify_password("wrong", hashed)


def test_verify_password_rejects_garbage_hash():
    assert not security.verify_password("s3cret!", "not-a-bcrypt-hash")
    assert not security.verify_password("", "")


def test_hash_password_rejects_empty():
    with pytest.raises(security.AuthSecurityError):
        security.hash_password("")


def test_access_token_round_trip():
    token = security.build_access_token(
        user_id="u-1",
        email="a@example.com",
        roles=["adult", "officemanager", "adult"],
        daycare_id="dc-1",
    )
    payload = security.decode_access_token(token)
    assert payload["userId"] == "u-1"
    assert payload["email"] == "a@example.com"
    assert payload["roles"] == ["adult", "officemanager"]
    assert payload["daycareId"] == "dc-1"
    assert payload["exp"] - payload["iat"] == 360 * 60


def test_admin_token_has_no_daycare():
    token = security.build_access_token(user_id="u-1", email="a@example.com", roles=["admin"])
    assert "daycareId" not in security.decode_access_token(token)


def test_expired_token_is_rejected(monkeypatch):
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MIN", "-5")
    token = security.build_access_token(user_id="u-1", email="a@example.com", roles=["admin"])
    with pytest.raises(security.AuthSecurityError, match="expired"):
        security.decode_access_token(token)


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"userId": "u-1", "roles": ["admin"]}, "another-secret", algorithm="HS256")
    with pytest.raises(security.AuthSecurityError, match="Invalid"):
        security.decode_access_token(token)


def test_token_without_roles_is_rejected():
    token = jwt.encode({"userId": "u-1"}, security.jwt_secret(), algorithm="HS256")
    with pytest.raises(security.AuthSecurityError, match="roles"):
        security.decode_access_token(token)
