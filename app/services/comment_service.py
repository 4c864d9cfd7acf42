"""Comment Service — flat create/list/get/delete of comments."""

import logging
from collections.abc import Mapping

from app.core.domain_types import EntityKind
from app.core.enforce_comment import validate_new_comment
from app.core.repository_protocols import EntityStore
from app.core.serialize import to_public, to_public_list

logger = logging.getLogger(__name__)


class CommentService:

    def __init__(self, store: EntityStore):
        self.store = store

    async def list_comments(self) -> list[dict]:
        return to_public_list(await self.store.find_all(EntityKind.COMMENT))

    async def get_comment(self, comment_id: str) -> dict:
        return to_public(await self.store.find_by_id(EntityKind.COMMENT, comment_id))

    async def create_comment(self, fields: Mapping) -> dict:
        doc = await self.store.create(EntityKind.COMMENT, validate_new_comment(fields))
        logger.info(
            "Comment created",
            extra={"entity_kind": "comment", "entity_id": str(doc["_id"])},
        )
        return to_public(doc)

    async def delete_comment(self, comment_id: str) -> bool:
        return await self.store.delete_by_id(EntityKind.COMMENT, comment_id)
