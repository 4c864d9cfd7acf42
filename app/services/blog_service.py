"""Blog Service — create, list, update, delete blogs and compute list stats.

Invariants:
    - Every blog returned has a public "id" and a populated "creator" (or None)
    - create requires an authenticated user id, which becomes the creator
    - delete is idempotent: absent blog → False, no error
    - delete of a blog with a creator requires the caller to be that creator (403 otherwise)
    - update never touches creator

Design Decisions:
    - Store injected (EntityStore protocol): route handlers build it from the request session
    - Creator population reads all users once per listing, not one query per blog
"""

import logging
from collections.abc import Mapping

from app.core.blog_stats import favorite_blog, most_blogs, most_likes, total_likes
from app.core.domain_types import EntityKind, parse_identifier
from app.core.enforce_blog import validate_blog_update, validate_new_blog
from app.core.errors import AuthorizationError, ErrorContext
from app.core.repository_protocols import EntityStore
from app.core.serialize import to_public

logger = logging.getLogger(__name__)


class BlogService:
    """Blog operations over an injected store."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def list_blogs(self) -> list[dict]:
        blogs = await self.store.find_all(EntityKind.BLOG)
        users = {
            doc["_id"]: doc for doc in await self.store.find_all(EntityKind.USER)
        }
        return [present_blog(doc, users.get(doc["creator_id"])) for doc in blogs]

    async def get_blog(self, blog_id: str) -> dict:
        doc = await self.store.find_by_id(EntityKind.BLOG, blog_id)
        return await self._with_creator(doc)

    async def create_blog(self, fields: Mapping, user_id: str) -> dict:
        clean = validate_new_blog(fields)
        creator = await self.store.find_by_id(EntityKind.USER, user_id)
        doc = await self.store.create(
            EntityKind.BLOG, {**clean, "creator_id": creator["_id"]},
        )
        logger.info(
            f"Blog created: {doc['title']}",
            extra={"user_id": user_id, "entity_kind": "blog", "entity_id": str(doc["_id"])},
        )
        return present_blog(doc, creator)

    async def update_blog(self, blog_id: str, fields: Mapping) -> dict:
        changes = validate_blog_update(fields)
        doc = await self.store.update_by_id(EntityKind.BLOG, blog_id, changes)
        return await self._with_creator(doc)

    async def delete_blog(self, blog_id: str, user_id: str) -> bool:
        """Delete a blog owned by user_id. Returns False when nothing was there."""
        uid = parse_identifier(blog_id)
        doc = await self.store.find_one(EntityKind.BLOG, id=uid)
        if doc is None:
            return False
        creator_id = doc["creator_id"]
        if creator_id is not None and str(creator_id) != user_id:
            raise AuthorizationError(
                "only the creator can delete a blog", http_status=403,
                context=ErrorContext(
                    user_id=user_id, entity_kind="blog", entity_id=str(uid),
                ),
            )
        removed = await self.store.delete_by_id(EntityKind.BLOG, uid)
        logger.info(
            f"Blog deleted: {uid}",
            extra={"user_id": user_id, "entity_kind": "blog", "entity_id": str(uid)},
        )
        return removed

    async def blog_stats(self) -> dict:
        blogs = await self.store.find_all(EntityKind.BLOG)
        return {
            "total_likes": total_likes(blogs),
            "favorite_blog": favorite_blog(blogs),
            "most_blogs": most_blogs(blogs),
            "most_likes": most_likes(blogs),
        }

    async def _with_creator(self, doc: dict) -> dict:
        creator = None
        if doc["creator_id"] is not None:
            creator = await self.store.find_one(EntityKind.USER, id=doc["creator_id"])
        return present_blog(doc, creator)


def present_blog(doc: Mapping, creator: Mapping | None) -> dict:
    """Public blog with creator_id swapped for a {id, username, name} summary."""
    public = to_public(doc)
    public.pop("creator_id", None)
    public["creator"] = (
        {
            "id": str(creator["_id"]),
            "username": creator["username"],
            "name": creator["name"],
        }
        if creator is not None else None
    )
    return public
