"""Blog ORM — a link post with like counter.

Invariants:
    - title and url are non-nullable
    - likes defaults to 0
    - creator_id references users.id; nullable (seeded blogs have no creator)
    - deleting a user leaves its blogs in place (ON DELETE SET NULL)

Design Decisions:
    - No relationship() attributes: the document store reads columns only,
      and services populate creator/blogs explicitly
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Blog(Base):
    """Blog post entity."""
    __tablename__ = "blogs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    author: Mapped[str | None] = mapped_column(String(200), nullable=True)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    creator_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
