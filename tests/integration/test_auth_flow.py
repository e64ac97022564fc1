"""Register, login, use and revoke a token through the HTTP API."""

import postbook.security.jwt as jwt_module


class InMemoryBlacklist:
    def __init__(self):
        self.entries = {}

    async def add_to_blacklist(self, jti, expire):
        self.entries[jti] = expire
        return True

    async def is_token_blacklisted(self, jti):
        return jti in self.entries


REGISTER = {
    "username": "jane_doe",
    "password": "Password123!",
    "confirm_password": "Password123!",
    "full_name": "Jane Doe",
}


async def _login(client):
    resp = await client.post(
        "/api/auth/login", json={"username": REGISTER["username"], "password": REGISTER["password"]}
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


async def test_register_login_and_me(async_client):
    resp = await async_client.post("/api/auth/register", json=REGISTER)
    assert resp.status_code == 201
    user = resp.json()
    assert user["username"] == "jane_doe"
    assert "password_hash" not in user

    token = await _login(async_client)
    assert token["token_type"] == "bearer"
    assert token["user"]["id"] == user["id"]

    headers = {"Authorization": f"Bearer {token['access_token']}"}
    me = await async_client.get("/api/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["full_name"] == "Jane Doe"

    created = await async_client.post(
        "/api/posts", json={"title": "First", "content": "hello"}, headers=headers
    )
    assert created.status_code == 201
    assert created.json()["owner_id"] == user["id"]


async def test_duplicate_username_and_bad_login(async_client):
    assert (await async_client.post("/api/auth/register", json=REGISTER)).status_code == 201
    assert (await async_client.post("/api/auth/register", json=REGISTER)).status_code == 400

    resp = await async_client.post(
        "/api/auth/login", json={"username": REGISTER["username"], "password": "WrongPassword!"}
    )
    assert resp.status_code == 401


async def test_logout_revokes_token(async_client, monkeypatch):
    blacklist = InMemoryBlacklist()
    monkeypatch.setattr(jwt_module, "get_redis_client", lambda: blacklist)

    await async_client.post("/api/auth/register", json=REGISTER)
    token = await _login(async_client)
    headers = {"Authorization": f"Bearer {token['access_token']}"}

    resp = await async_client.post("/api/auth/logout", headers=headers)
    assert resp.status_code == 200
    assert len(blacklist.entries) == 1

    assert (await async_client.get("/api/auth/me", headers=headers)).status_code == 403


async def test_logout_without_redis_still_succeeds(async_client):
    await async_client.post("/api/auth/register", json=REGISTER)
    token = await _login(async_client)
    headers = {"Authorization": f"Bearer {token['access_token']}"}

    resp = await async_client.post("/api/auth/logout", headers=headers)
    assert resp.status_code == 200


async def test_health_reports_components(async_client):
    resp = await async_client.get("/api/health/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["checks"]["database"]["connected"] is True
    assert "response_cache" in body["checks"]
