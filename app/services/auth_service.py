"""Auth Service — login and bearer-token resolution.

Invariants:
    - Unknown username and wrong password produce the same AuthenticationError
    - A bearer token resolves only if its signature, expiry and user all check out
    - bcrypt work runs in the thread pool

Design Decisions:
    - Unknown usernames still pay for one (dummy) bcrypt verify
"""

import logging

from fastapi.concurrency import run_in_threadpool

from app.core.domain_types import EntityKind, parse_identifier
from app.core.errors import AuthenticationError, AuthorizationError, InvalidIdentifierError
from app.core.repository_protocols import EntityStore
from app.infrastructure.security import (
    create_access_token, decode_access_token, dummy_verify, verify_password,
)
from app.schemas.user import AuthUser

logger = logging.getLogger(__name__)


class AuthService:
    """Credential checks over an injected store."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def login(self, username: str, password: str) -> dict:
        """Verify credentials and issue a token. Returns {token, username, name}."""
        user = await self.store.find_one(EntityKind.USER, username=username)
        if user is None:
            await run_in_threadpool(dummy_verify)
            logger.warning(f"Login failed for unknown user '{username}'")
            raise AuthenticationError()

        valid = await run_in_threadpool(
            verify_password, password, user["password_hash"],
        )
        if not valid:
            logger.warning(
                f"Login failed for '{username}'",
                extra={"user_id": str(user["_id"])},
            )
            raise AuthenticationError()

        token = create_access_token(str(user["_id"]), user["username"])
        logger.info(
            f"User logged in: {username}", extra={"user_id": str(user["_id"])},
        )
        return {"token": token, "username": user["username"], "name": user["name"]}

    async def resolve_user(self, token: str) -> AuthUser:
        """Verify a bearer token and load the user it names."""
        payload = decode_access_token(token)
        try:
            user_id = parse_identifier(payload.sub)
        except InvalidIdentifierError:
            raise AuthorizationError("token invalid")
        user = await self.store.find_one(EntityKind.USER, id=user_id)
        if user is None:
            logger.warning(
                "Token names a user that no longer exists",
                extra={"user_id": payload.sub},
            )
            raise AuthorizationError("token invalid")
        return AuthUser(id=str(user["_id"]), username=user["username"], name=user["name"])
