"""Document Store — collection-style CRUD over the ORM for blogs, users, comments.

Invariants:
    - Every mutating call commits immediately (no batching across calls)
    - Results are documents: dict of column values, id under "_id", version under "_version"
    - Malformed ids raise InvalidIdentifierError before any query runs
    - find_by_id / update_by_id raise ResourceNotFoundError; delete_by_id never does
    - Constraint violations on write → rollback + ValidationError with a per-kind message
    - update_by_id / delete_by_id are single statements: concurrent writers never
      conflict, the last write wins and version still counts every update

Design Decisions:
    - One store for all entity kinds, dispatched through an explicit kind → model dict
    - Filters are exact-match on column names; unknown columns are a programming error (KeyError)
    - find_all ordered by created_at so listings are stable across calls
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EntityKind, parse_identifier
from app.core.errors import ErrorContext, ResourceNotFoundError, ValidationError
from app.db.base import Base
from app.models.blog import Blog
from app.models.comment import Comment
from app.models.user import User

logger = logging.getLogger(__name__)

_MODELS: dict[EntityKind, type[Base]] = {
    EntityKind.BLOG: Blog,
    EntityKind.USER: User,
    EntityKind.COMMENT: Comment,
}

_RENAMED_COLUMNS = {"id": "_id", "version": "_version"}

# (message, field) reported when a write trips a unique or foreign-key constraint
_CONSTRAINT_ERRORS: dict[EntityKind, tuple[str, str | None]] = {
    EntityKind.USER: ("username must be unique", "username"),
    EntityKind.BLOG: ("blog violates a storage constraint", None),
    EntityKind.COMMENT: ("comment violates a storage constraint", None),
}


def to_document(row: Base) -> dict:
    """Column values of an ORM row, with internal names for id and version."""
    return {
        _RENAMED_COLUMNS.get(col.key, col.key): getattr(row, col.key)
        for col in row.__table__.columns
    }


class DocumentStore:
    """Document-style persistence adapter bound to one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, kind: EntityKind, fields: dict) -> dict:
        row = _MODELS[kind](**fields)
        self.db.add(row)
        await self._commit(kind)
        await self.db.refresh(row)
        logger.debug(
            f"Created {kind.value} {row.id}",
            extra={"entity_kind": kind.value, "entity_id": str(row.id)},
        )
        return to_document(row)

    async def find_all(self, kind: EntityKind, **filters: Any) -> list[dict]:
        model = _MODELS[kind]
        query = self._filtered(model, filters).order_by(model.created_at)
        result = await self.db.execute(query)
        return [to_document(row) for row in result.scalars().all()]

    async def find_one(self, kind: EntityKind, **filters: Any) -> dict | None:
        model = _MODELS[kind]
        result = await self.db.execute(self._filtered(model, filters).limit(1))
        row = result.scalar_one_or_none()
        return to_document(row) if row is not None else None

    async def find_by_id(self, kind: EntityKind, entity_id: str | UUID) -> dict:
        row = await self._get_or_404(kind, entity_id)
        return to_document(row)

    async def update_by_id(
        self, kind: EntityKind, entity_id: str | UUID, fields: dict,
    ) -> dict:
        uid = parse_identifier(entity_id)
        model = _MODELS[kind]
        result = await self.db.execute(
            update(model)
            .where(model.id == uid)
            .values(**fields, version=model.version + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise _not_found(kind, uid)
        await self._commit(kind)
        row = await self.db.get(model, uid, populate_existing=True)
        if row is None:
            raise _not_found(kind, uid)
        return to_document(row)

    async def delete_by_id(self, kind: EntityKind, entity_id: str | UUID) -> bool:
        """Delete if present. Returns False (not an error) when already absent."""
        uid = parse_identifier(entity_id)
        model = _MODELS[kind]
        result = await self.db.execute(delete(model).where(model.id == uid))
        await self._commit(kind)
        return result.rowcount > 0

    # ─── helpers ─────────────────────────────────────────────────

    async def _get_or_404(self, kind: EntityKind, entity_id: str | UUID) -> Base:
        uid = parse_identifier(entity_id)
        row = await self.db.get(_MODELS[kind], uid)
        if row is None:
            raise _not_found(kind, uid)
        return row

    async def _commit(self, kind: EntityKind) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Constraint violated writing {kind.value}: {e.orig}",
                extra={"entity_kind": kind.value},
            )
            message, field = _CONSTRAINT_ERRORS[kind]
            raise ValidationError(
                message, field=field,
                context=ErrorContext(entity_kind=kind.value),
            )

    @staticmethod
    def _filtered(model: type[Base], filters: dict):
        query = select(model)
        for column, value in filters.items():
            query = query.where(model.__table__.c[column] == value)
        return query


def _not_found(kind: EntityKind, uid: UUID) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        kind.value, str(uid),
        context=ErrorContext(entity_kind=kind.value, entity_id=str(uid)),
    )
