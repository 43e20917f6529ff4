"""
Security tests: tokens, password hashing, the role policy.
"""

from core.authorization import Role, is_allowed, is_owner_or_admin
from core.security import create_access_token, hash_password, is_safe_for_log, verify_password, verify_token


def test_jwt_create_and_verify() -> None:
    token = create_access_token("user-123", email="a@example.com", role="USER")
    payload = verify_token(token)
    assert payload is not None
    assert payload["sub"] == "user-123"
    assert payload["role"] == "USER"
    assert payload["email"] == "a@example.com"
    assert "exp" in payload


def test_jwt_invalid_returns_none() -> None:
    assert verify_token("invalid") is None
    assert verify_token("") is None
    assert verify_token("eyJhbGciOiJIUzI1NiJ9.e30.wrong") is None


def test_password_hash_roundtrip() -> None:
    hashed = hash_password("analytical-engine")
    assert hashed != "analytical-engine"
    assert verify_password("analytical-engine", hashed)
    assert not verify_password("difference-engine", hashed)


def test_is_allowed() -> None:
    assert is_allowed([Role.ADMIN], "ADMIN")
    assert is_allowed([Role.USER, Role.ADMIN], Role.USER)
    assert not is_allowed([Role.ADMIN], "USER")
    assert not is_allowed([Role.USER], "GUEST")
    assert not is_allowed([Role.USER], None)
    assert not is_allowed([], "USER")


def test_is_owner_or_admin() -> None:
    assert is_owner_or_admin({"sub": "abc", "role": "USER"}, "abc")
    assert not is_owner_or_admin({"sub": "abc", "role": "USER"}, "def")
    assert is_owner_or_admin({"sub": "abc", "role": "ADMIN"}, "def")


def test_is_safe_for_log() -> None:
    assert is_safe_for_log("ada@example.com") == "ada@example.com"
    assert is_safe_for_log("x" * 500) == "(redacted)"
    assert is_safe_for_log("") == ""
