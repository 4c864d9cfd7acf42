"""Schema Helpers — create/drop all tables outside of Alembic.

Invariants:
    - Meant for dev databases and test fixtures; production schema is owned by Alembic
    - Importing this module registers every model on Base.metadata
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from app.db.base import Base
import app.models  # noqa: F401  (populates Base.metadata)


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables for the registered models."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
