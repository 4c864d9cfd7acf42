"""Blog Routes — CRUD and stats for /api/blogs.

Invariants:
    - GET endpoints are public; POST/PUT/DELETE require a bearer token
    - /stats is registered before /{blog_id} so it is never parsed as an id
    - DELETE answers 204 whether or not the blog existed
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_current_user, get_store
from app.infrastructure.document_store import DocumentStore
from app.schemas.blog import BlogFields, BlogResponse, BlogStatsResponse
from app.schemas.user import AuthUser
from app.services.blog_service import BlogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", response_model=list[BlogResponse])
async def list_blogs(store: DocumentStore = Depends(get_store)):
    """List all blogs with their creators."""
    return await BlogService(store).list_blogs()


@router.get("/stats", response_model=BlogStatsResponse)
async def blog_stats(store: DocumentStore = Depends(get_store)):
    """Like totals, favorite blog, most prolific and most liked authors."""
    return await BlogService(store).blog_stats()


@router.get("/{blog_id}", response_model=BlogResponse)
async def get_blog(blog_id: str, store: DocumentStore = Depends(get_store)):
    return await BlogService(store).get_blog(blog_id)


@router.post(
    "", response_model=BlogResponse, status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    body: BlogFields,
    user: AuthUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
):
    """Create a blog owned by the authenticated user."""
    return await BlogService(store).create_blog(body.model_dump(), user.id)


@router.put("/{blog_id}", response_model=BlogResponse)
async def update_blog(
    blog_id: str,
    body: BlogFields,
    user: AuthUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
):
    """Apply the fields present in the body; anything else is ignored."""
    return await BlogService(store).update_blog(
        blog_id, body.model_dump(exclude_unset=True),
    )


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(
    blog_id: str,
    user: AuthUser = Depends(get_current_user),
    store: DocumentStore = Depends(get_store),
):
    """Delete a blog. Only its creator may delete it."""
    await BlogService(store).delete_blog(blog_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
