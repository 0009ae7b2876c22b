from screenlist.services.identity import verify_token


async def test_register_returns_user_and_token(client):
    resp = await client.post(
        "/api/auth/register",
        json={"username": "neo", "email": "neo@example.com", "password": "trinity"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["user"]["username"] == "neo"
    assert body["user"]["email"] == "neo@example.com"
    assert "password_hash" not in body["user"]
    assert verify_token(body["token"]) == body["user"]["id"]


async def test_register_duplicate_email_is_409(client):
    payload = {"username": "neo", "email": "neo@example.com", "password": "trinity"}
    assert (await client.post("/api/auth/register", json=payload)).status_code == 201

    resp = await client.post(
        "/api/auth/register",
        json={"username": "other", "email": "neo@example.com", "password": "x"},
    )
    assert resp.status_code == 409
    assert resp.json()["code"] == "conflict"


async def test_register_missing_field_is_400(client):
    resp = await client.post("/api/auth/register", json={"username": "neo", "email": "neo@example.com"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "password is required"


async def test_login_with_valid_credentials(client):
    await client.post(
        "/api/auth/register",
        json={"username": "neo", "email": "neo@example.com", "password": "trinity"},
    )
    resp = await client.post("/api/auth/login", json={"email": "neo@example.com", "password": "trinity"})
    assert resp.status_code == 200
    assert resp.json()["user"]["username"] == "neo"


async def test_login_failures_are_indistinguishable(client):
    await client.post(
        "/api/auth/register",
        json={"username": "neo", "email": "neo@example.com", "password": "trinity"},
    )
    wrong_password = await client.post("/api/auth/login", json={"email": "neo@example.com", "password": "smith"})
    unknown_email = await client.post("/api/auth/login", json={"email": "who@example.com", "password": "trinity"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


async def test_token_from_login_opens_protected_routes(client):
    await client.post(
        "/api/auth/register",
        json={"username": "neo", "email": "neo@example.com", "password": "trinity"},
    )
    login = await client.post("/api/auth/login", json={"email": "neo@example.com", "password": "trinity"})
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    resp = await client.get("/api/watchlist", headers=headers)
    assert resp.status_code == 200
    assert resp.json() == []
