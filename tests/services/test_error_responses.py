"""Error envelope — every error response carries an "error" message."""


async def test_unknown_endpoint_is_404_with_error_field(client):
    res = await client.get("/api/nope")
    assert res.status_code == 404
    assert res.json()["error"] == "unknown endpoint"


async def test_wrong_method_keeps_status(client):
    res = await client.patch("/api/users")
    assert res.status_code == 405
    assert res.json()["code"] == "HTTP_ERROR"


async def test_unauthorized_response_advertises_bearer(client):
    res = await client.post("/api/blogs", json={"title": "T", "url": "http://x"})
    assert res.status_code == 401
    assert res.headers["www-authenticate"] == "Bearer"


async def test_body_validation_error_lists_fields(client):
    res = await client.post("/api/login", json={"username": "root"})
    body = res.json()
    assert res.status_code == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("password") for d in body["details"])
