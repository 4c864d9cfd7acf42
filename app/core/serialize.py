"""Serialization Boundary — stored document → public representation.

Invariants:
    - Internal "_id" becomes public "id" (always a str)
    - "_version" and "password_hash" never leave this function
    - UUID values become str, datetimes become ISO-8601 strings
    - Input document is never mutated

Design Decisions:
    - Explicit mapping function applied by services, not a hook on the ORM model
"""

from collections.abc import Mapping
from datetime import datetime
from uuid import UUID

HIDDEN_FIELDS = frozenset({"_version", "password_hash"})


def to_public(document: Mapping) -> dict:
    """Map a stored document to its client-facing form."""
    public: dict = {}
    if "_id" in document:
        public["id"] = str(document["_id"])
    for key, value in document.items():
        if key == "_id" or key in HIDDEN_FIELDS:
            continue
        public[key] = _plain(value)
    return public


def to_public_list(documents) -> list[dict]:
    return [to_public(doc) for doc in documents]


def _plain(value):
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value
