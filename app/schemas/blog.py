"""Blog Schemas — request bodies and response shapes for /api/blogs.

Invariants:
    - Request bodies only type-check; required/non-empty rules live in core/enforce_blog.py
    - Unknown request fields are ignored (clients PUT back whole blogs)
    - Responses expose "id", never the internal identifier or version
"""

from pydantic import BaseModel


class BlogFields(BaseModel):
    """Blog fields as submitted. On update only the fields actually sent apply."""
    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = None


class CreatorSummary(BaseModel):
    id: str
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    id: str
    title: str
    author: str | None = None
    url: str
    likes: int
    creator: CreatorSummary | None = None


class FavoriteBlog(BaseModel):
    title: str
    author: str | None = None
    likes: int


class AuthorBlogCount(BaseModel):
    author: str | None = None
    blogs: int


class AuthorLikeCount(BaseModel):
    author: str | None = None
    likes: int


class BlogStatsResponse(BaseModel):
    total_likes: int
    favorite_blog: FavoriteBlog | None = None
    most_blogs: AuthorBlogCount | None = None
    most_likes: AuthorLikeCount | None = None
