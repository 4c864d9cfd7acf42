"""Comment Routes — flat comment collection at /api/comments.

Invariants:
    - Comments are public; no token required
    - DELETE answers 204 whether or not the comment existed
"""

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_store
from app.infrastructure.document_store import DocumentStore
from app.schemas.comment import CommentCreate, CommentResponse
from app.services.comment_service import CommentService

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
async def list_comments(store: DocumentStore = Depends(get_store)):
    return await CommentService(store).list_comments()


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: str, store: DocumentStore = Depends(get_store)):
    return await CommentService(store).get_comment(comment_id)


@router.post(
    "", response_model=CommentResponse, status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    body: CommentCreate, store: DocumentStore = Depends(get_store),
):
    return await CommentService(store).create_comment(body.model_dump())


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str, store: DocumentStore = Depends(get_store),
):
    await CommentService(store).delete_comment(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
