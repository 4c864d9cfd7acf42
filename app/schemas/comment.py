"""Comment Schemas."""

from pydantic import BaseModel


class CommentCreate(BaseModel):
    text: str | None = None


class CommentResponse(BaseModel):
    id: str
    text: str
