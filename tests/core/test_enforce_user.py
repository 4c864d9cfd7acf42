"""User Rules — username/password length and uniqueness, in that order."""

import pytest

from app.core.enforce_user import validate_registration
from app.core.errors import ValidationError


def test_valid_registration_returns_storable_fields():
    fields = validate_registration(
        {"username": "root", "name": "Superuser", "password": "admin"},
        username_taken=False,
    )
    assert fields == {"username": "root", "name": "Superuser"}
    assert "password" not in fields


@pytest.mark.parametrize("username", [None, "", "no"])
def test_short_or_missing_username_fails(username):
    with pytest.raises(ValidationError, match="username is too short or missing"):
        validate_registration(
            {"username": username, "password": "validpassword"}, username_taken=False,
        )


def test_taken_username_fails():
    with pytest.raises(ValidationError, match="username must be unique"):
        validate_registration(
            {"username": "DragonSlayerxx", "password": "admin"}, username_taken=True,
        )


@pytest.mark.parametrize("password", [None, "no"])
def test_short_or_missing_password_fails(password):
    with pytest.raises(ValidationError, match="password is too short or missing"):
        validate_registration(
            {"username": "validUsername", "password": password}, username_taken=False,
        )


def test_username_length_checked_before_uniqueness():
    with pytest.raises(ValidationError, match="too short"):
        validate_registration({"username": "ab", "password": "x"}, username_taken=True)


def test_empty_name_stored_as_none():
    fields = validate_registration(
        {"username": "abc", "name": "", "password": "abc"}, username_taken=False,
    )
    assert fields["name"] is None
