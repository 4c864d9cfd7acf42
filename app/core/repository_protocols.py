"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Documents are plain dicts with the internal id under "_id"
    - Async in Protocol: implementations do IO; the pure rules that consume
      their results are never async themselves
"""

from typing import Any, Protocol
from uuid import UUID

from app.core.domain_types import EntityKind


class EntityStore(Protocol):
    """Contract for document persistence — implemented by shell."""
    async def create(self, kind: EntityKind, fields: dict) -> dict: ...
    async def find_all(self, kind: EntityKind, **filters: Any) -> list[dict]: ...
    async def find_one(self, kind: EntityKind, **filters: Any) -> dict | None: ...
    async def find_by_id(self, kind: EntityKind, entity_id: str | UUID) -> dict: ...
    async def update_by_id(
        self, kind: EntityKind, entity_id: str | UUID, fields: dict,
    ) -> dict: ...
    async def delete_by_id(self, kind: EntityKind, entity_id: str | UUID) -> bool: ...
