"""Request Dependencies — per-request store and bearer-token authentication.

Invariants:
    - Each request gets its own DocumentStore over its own AsyncSession (get_db)
    - get_current_user raises AuthorizationError (401) for missing/invalid/expired tokens
    - The Authorization scheme is matched case-insensitively ("bearer" or "Bearer")

Design Decisions:
    - HTTPBearer(auto_error=False): missing credentials become our own error shape,
      not FastAPI's default 403
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AuthorizationError
from app.infrastructure.database import get_db
from app.infrastructure.document_store import DocumentStore
from app.schemas.user import AuthUser
from app.services.auth_service import AuthService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_store(db: AsyncSession = Depends(get_db)) -> DocumentStore:
    return DocumentStore(db)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    store: DocumentStore = Depends(get_store),
) -> AuthUser:
    """Resolve the authenticated user from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthorizationError("token missing")
    return await AuthService(store).resolve_user(credentials.credentials)
