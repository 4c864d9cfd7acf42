"""Service test fixtures — async DB, document store, FastAPI test client, auth.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use a session from the test engine
    - Seeding and assertions use short-lived sessions, closed before the next request

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - INITIAL_BLOGS mirrors a small seeded collection with no creator
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.core.domain_types import EntityKind
from app.db.session import create_schema, drop_schema
from app.infrastructure.database import get_db
from app.infrastructure.document_store import DocumentStore
from app.infrastructure.security import hash_password
from app.main import app

INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]

ROOT_USER = {"username": "root", "name": "Superuser", "password": "admin"}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    await create_schema(engine)
    yield engine
    await drop_schema(engine)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def store(test_session_factory):
    """DocumentStore over a dedicated session (for store-level tests)."""
    async with test_session_factory() as session:
        yield DocumentStore(session)


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def docs_in_db(test_session_factory):
    """Read current documents of a kind through a fresh session."""
    async def _read(kind: EntityKind) -> list[dict]:
        async with test_session_factory() as session:
            return await DocumentStore(session).find_all(kind)
    return _read


@pytest.fixture
async def seed_blogs(test_session_factory):
    async with test_session_factory() as session:
        store = DocumentStore(session)
        return [await store.create(EntityKind.BLOG, dict(b)) for b in INITIAL_BLOGS]


@pytest.fixture
async def root_user(test_session_factory):
    async with test_session_factory() as session:
        return await DocumentStore(session).create(
            EntityKind.USER,
            {
                "username": ROOT_USER["username"],
                "name": ROOT_USER["name"],
                "password_hash": hash_password(ROOT_USER["password"]),
            },
        )


@pytest.fixture
async def auth_headers(client, root_user):
    res = await client.post(
        "/api/login",
        json={"username": ROOT_USER["username"], "password": ROOT_USER["password"]},
    )
    assert res.status_code == 200
    return {"Authorization": f"bearer {res.json()['token']}"}


@pytest.fixture
async def other_headers(client, test_session_factory):
    """Bearer headers for a second user, distinct from root."""
    async with test_session_factory() as session:
        await DocumentStore(session).create(
            EntityKind.USER,
            {"username": "mallory", "name": None, "password_hash": hash_password("secret")},
        )
    res = await client.post(
        "/api/login", json={"username": "mallory", "password": "secret"},
    )
    return {"Authorization": f"bearer {res.json()['token']}"}
