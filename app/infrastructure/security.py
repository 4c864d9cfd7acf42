"""Security Primitives — bcrypt password hashing and signed JWT bearer tokens.

Invariants:
    - Plaintext passwords are only ever passed to hash_password / verify_password
    - Tokens carry sub (user id), username and exp; signed with settings.secret_key
    - decode_access_token raises AuthorizationError; never returns a partial payload

Design Decisions:
    - passlib CryptContext with bcrypt; rounds from settings (tests use the minimum)
    - python-jose for JWT encode/decode, HS256 by default
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from app.config import get_settings
from app.core.errors import AuthorizationError

logger = logging.getLogger(__name__)


class TokenPayload(BaseModel):
    """Decoded bearer token claims."""
    sub: str
    username: str
    exp: int


@lru_cache
def _crypt_context(rounds: int) -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds,
    )


def hash_password(password: str) -> str:
    return _crypt_context(get_settings().bcrypt_rounds).hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return _crypt_context(get_settings().bcrypt_rounds).verify(
        plain_password, password_hash,
    )


def create_access_token(
    user_id: str, username: str, expires_delta: timedelta | None = None,
) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    claims = {"sub": user_id, "username": username, "exp": expire}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> TokenPayload:
    """Verify signature and expiry, return the claims."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.secret_key, algorithms=[settings.jwt_algorithm],
        )
    except ExpiredSignatureError:
        logger.warning("Bearer token has expired")
        raise AuthorizationError("token expired")
    except JWTError as e:
        logger.warning(f"Bearer token rejected: {e}")
        raise AuthorizationError("token invalid")

    if not all(payload.get(claim) for claim in ("sub", "username", "exp")):
        logger.warning("Bearer token missing a required claim")
        raise AuthorizationError("token invalid")
    return TokenPayload(
        sub=payload["sub"], username=payload["username"], exp=payload["exp"],
    )


def dummy_verify() -> None:
    """Spend one verify's worth of time when the username is unknown."""
    _crypt_context(get_settings().bcrypt_rounds).dummy_verify()
