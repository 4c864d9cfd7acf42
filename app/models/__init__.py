"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model has a UUID id, a version counter and created_at

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from app.models.user import User  # noqa: F401
from app.models.blog import Blog  # noqa: F401
from app.models.comment import Comment  # noqa: F401
