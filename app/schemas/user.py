"""User & Login Schemas — registration, login and public user shapes.

Invariants:
    - Password appears only in request bodies, never in a response model
    - Length/uniqueness rules live in core/enforce_user.py so the messages stay exact
"""

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    username: str | None = None
    name: str | None = None
    password: str | None = None


class BlogSummary(BaseModel):
    id: str
    title: str
    author: str | None = None
    url: str
    likes: int


class UserResponse(BaseModel):
    id: str
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = []


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    token: str
    username: str
    name: str | None = None


class AuthUser(BaseModel):
    """Identity resolved from a verified bearer token."""
    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    name: str | None = None
