"""User Routes — registration and listing."""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_store
from app.infrastructure.document_store import DocumentStore
from app.schemas.user import UserCreate, UserResponse
from app.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def register_user(
    body: UserCreate, store: DocumentStore = Depends(get_store),
):
    """Register a new user. The password is hashed, never stored or echoed."""
    return await UserService(store).register_user(body.model_dump())


@router.get("", response_model=list[UserResponse])
async def list_users(store: DocumentStore = Depends(get_store)):
    """List users with the blogs each one created."""
    return await UserService(store).list_users()
