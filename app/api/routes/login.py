"""Login Route — exchanges username + password for a bearer token."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_store
from app.infrastructure.document_store import DocumentStore
from app.schemas.user import LoginRequest, TokenResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/api/login", tags=["auth"])


@router.post("", response_model=TokenResponse)
async def login(body: LoginRequest, store: DocumentStore = Depends(get_store)):
    return await AuthService(store).login(body.username, body.password)
