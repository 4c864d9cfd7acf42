"""Database Session Manager — rollback and error mapping around a session.

Tests:
    - Domain errors raised inside a session pass through unchanged
    - OperationalError becomes DatabaseError("connect"), other SQLAlchemy errors "query"
    - health_check reports a reachable in-memory database
"""

import pytest
from sqlalchemy.exc import OperationalError, ProgrammingError

from app.core.errors import DatabaseError, ValidationError
from app.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    mgr = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield mgr
    await mgr.close()


async def test_domain_error_passes_through(manager):
    with pytest.raises(ValidationError) as exc:
        async with manager.session():
            raise ValidationError("username must be unique", field="username")
    assert exc.value.message == "username must be unique"


async def test_operational_error_maps_to_connect_failure(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session():
            raise OperationalError("SELECT 1", {}, Exception("gone away"))
    assert exc.value.operation == "connect"
    assert exc.value.http_status == 503


async def test_other_sqlalchemy_error_maps_to_query_failure(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session():
            raise ProgrammingError("SELECT nope", {}, Exception("syntax"))
    assert exc.value.operation == "query"


async def test_health_check_on_reachable_database(manager):
    assert await manager.health_check() is True
