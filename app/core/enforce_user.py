"""User Rules — registration checks for username and password.

Invariants:
    - Check order: username length, username uniqueness, password length
    - Uniqueness is case-sensitive exact match (caller supplies the lookup result)
    - The plaintext password is never part of the returned fields

Design Decisions:
    - username_taken passed in as bool: the store lookup stays in the shell
"""

from collections.abc import Mapping

from app.core.errors import ValidationError

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3


def validate_registration(fields: Mapping, username_taken: bool) -> dict:
    """Validate registration input. Returns {username, name} to persist."""
    username = fields.get("username")
    if not isinstance(username, str) or len(username) < MIN_USERNAME_LENGTH:
        raise ValidationError(
            "username is too short or missing", field="username",
        )
    if username_taken:
        raise ValidationError("username must be unique", field="username")

    password = fields.get("password")
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            "password is too short or missing", field="password",
        )

    name = fields.get("name")
    return {"username": username, "name": name or None}
