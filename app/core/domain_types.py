"""Domain Types — entity kinds and public id parsing.

Invariants:
    - EntityKind is the closed set of persisted record types
    - parse_identifier is the only place a client-supplied id string becomes a UUID

Design Decisions:
    - str Enum: entity kinds serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from uuid import UUID

from app.core.errors import InvalidIdentifierError


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Persisted record types handled by the document store."""
    BLOG = "blog"
    USER = "user"
    COMMENT = "comment"


def parse_identifier(raw: str | UUID) -> UUID:
    """Parse a public id. Raises InvalidIdentifierError on malformed input."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        raise InvalidIdentifierError(str(raw))
