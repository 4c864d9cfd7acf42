"""Users API — registration rules and listing with blog back-references.

Invariants:
    - Invalid registrations answer 400 with the rule's message and add no user
    - Password hashes never appear in any response
"""

import asyncio

from app.core.domain_types import EntityKind
from app.infrastructure.security import verify_password


async def test_register_user(client, docs_in_db):
    res = await client.post(
        "/api/users", json={"username": "mluukkai", "name": "Matti", "password": "salainen"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "mluukkai"
    assert body["id"]
    assert body["blogs"] == []
    assert "password" not in body and "password_hash" not in body

    users = await docs_in_db(EntityKind.USER)
    assert [u["username"] for u in users] == ["mluukkai"]
    assert verify_password("salainen", users[0]["password_hash"])


async def test_duplicate_username_rejected(client, root_user, docs_in_db):
    users_at_start = await docs_in_db(EntityKind.USER)

    res = await client.post(
        "/api/users", json={"username": "root", "name": "Luke Artas", "password": "admin"},
    )

    assert res.status_code == 400
    assert res.headers["content-type"].startswith("application/json")
    assert "username must be unique" in res.json()["error"]
    assert len(await docs_in_db(EntityKind.USER)) == len(users_at_start)


async def test_simultaneous_registrations_of_one_username(client, docs_in_db):
    payload = {"username": "racer", "name": "Racer", "password": "salainen"}

    responses = await asyncio.gather(
        client.post("/api/users", json=payload),
        client.post("/api/users", json=payload),
    )

    assert sorted(r.status_code for r in responses) == [201, 400]
    rejected = next(r for r in responses if r.status_code == 400)
    assert rejected.json()["error"] == "username must be unique"
    users = await docs_in_db(EntityKind.USER)
    assert [u["username"] for u in users] == ["racer"]


async def test_short_username_rejected(client, docs_in_db):
    res = await client.post(
        "/api/users", json={"username": "no", "name": "no", "password": "validpassword"},
    )
    assert res.status_code == 400
    assert "username is too short or missing" in res.json()["error"]
    assert await docs_in_db(EntityKind.USER) == []


async def test_short_password_rejected(client, docs_in_db):
    res = await client.post(
        "/api/users", json={"username": "validUsername", "name": "Lotion", "password": "no"},
    )
    assert res.status_code == 400
    assert "password is too short or missing" in res.json()["error"]
    assert await docs_in_db(EntityKind.USER) == []


async def test_username_uniqueness_is_case_sensitive(client, root_user):
    res = await client.post(
        "/api/users", json={"username": "ROOT", "password": "admin"},
    )
    assert res.status_code == 201


async def test_list_users_includes_created_blogs(client, auth_headers, seed_blogs):
    await client.post(
        "/api/blogs", json={"title": "Mine", "url": "http://mine", "likes": 2},
        headers=auth_headers,
    )

    res = await client.get("/api/users")

    assert res.status_code == 200
    users = res.json()
    assert len(users) == 1
    assert users[0]["username"] == "root"
    assert [b["title"] for b in users[0]["blogs"]] == ["Mine"]
    assert set(users[0]["blogs"][0]) == {"id", "title", "author", "url", "likes"}
    assert "password_hash" not in users[0]
