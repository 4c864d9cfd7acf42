"""User Service — registration and user listing with blog back-references.

Invariants:
    - Checks run in order: username length, uniqueness (store lookup), password length
    - password_hash is computed off the event loop and never returned
    - Listed users carry their blogs as {id, title, author, url, likes}
"""

import logging
from collections.abc import Mapping

from fastapi.concurrency import run_in_threadpool

from app.core.domain_types import EntityKind
from app.core.enforce_user import validate_registration
from app.core.repository_protocols import EntityStore
from app.core.serialize import to_public
from app.infrastructure.security import hash_password

logger = logging.getLogger(__name__)

_BLOG_SUMMARY_FIELDS = ("id", "title", "author", "url", "likes")


class UserService:
    """User operations over an injected store."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def register_user(self, fields: Mapping) -> dict:
        username = fields.get("username")
        existing = (
            await self.store.find_one(EntityKind.USER, username=username)
            if isinstance(username, str) else None
        )
        clean = validate_registration(fields, username_taken=existing is not None)
        password_hash = await run_in_threadpool(hash_password, fields["password"])
        doc = await self.store.create(
            EntityKind.USER, {**clean, "password_hash": password_hash},
        )
        logger.info(
            f"User registered: {doc['username']}",
            extra={"entity_kind": "user", "entity_id": str(doc["_id"])},
        )
        return present_user(doc, [])

    async def list_users(self) -> list[dict]:
        users = await self.store.find_all(EntityKind.USER)
        blogs_by_creator: dict = {}
        for blog in await self.store.find_all(EntityKind.BLOG):
            blogs_by_creator.setdefault(blog["creator_id"], []).append(blog)
        return [
            present_user(doc, blogs_by_creator.get(doc["_id"], []))
            for doc in users
        ]


def present_user(doc: Mapping, blogs: list) -> dict:
    public = to_public(doc)
    public["blogs"] = [
        {key: value for key, value in to_public(blog).items() if key in _BLOG_SUMMARY_FIELDS}
        for blog in blogs
    ]
    return public
