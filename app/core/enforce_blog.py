"""Blog Rules — field validation for blog creation and update.

Invariants:
    - title and url are required and non-empty on create; non-empty when given on update
    - likes absent → 0, never an error
    - likes, when given, is a non-negative int (bool rejected)
    - Returns a fresh dict of storable fields; input mapping never mutated

Design Decisions:
    - Pure functions returning cleaned fields: the shell persists whatever comes back
    - First failing field wins: one message per response
"""

from collections.abc import Mapping

from app.core.errors import ValidationError

UPDATABLE_BLOG_FIELDS = ("title", "author", "url", "likes")


def validate_new_blog(fields: Mapping) -> dict:
    """Validate and normalize fields for a new blog post."""
    title = _require_text(fields, "title")
    url = _require_text(fields, "url")
    likes = fields.get("likes")
    return {
        "title": title,
        "author": _optional_text(fields.get("author")),
        "url": url,
        "likes": 0 if likes is None else _check_likes(likes),
    }


def validate_blog_update(fields: Mapping) -> dict:
    """Validate a partial update. Unknown fields are dropped."""
    changes: dict = {}
    for key in UPDATABLE_BLOG_FIELDS:
        if key not in fields:
            continue
        value = fields[key]
        if key in ("title", "url"):
            changes[key] = _require_text(fields, key)
        elif key == "likes":
            changes[key] = 0 if value is None else _check_likes(value)
        else:
            changes[key] = _optional_text(value)
    if not changes:
        raise ValidationError("no updatable fields provided")
    return changes


def _require_text(fields: Mapping, key: str) -> str:
    value = fields.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{key} is required", field=key)
    return value.strip()


def _optional_text(value) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _check_likes(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(
            "likes must be a non-negative integer", field="likes",
        )
    return value
