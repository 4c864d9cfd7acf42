"""Comment Rules — a comment is a single non-empty text field."""

from collections.abc import Mapping

from app.core.errors import ValidationError


def validate_new_comment(fields: Mapping) -> dict:
    text = fields.get("text")
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("text is required", field="text")
    return {"text": text.strip()}
