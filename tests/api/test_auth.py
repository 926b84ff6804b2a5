def test_register_and_me(client):
    res = client.post(
        "/api/auth/register",
        json={"name": "Carol", "email": "carol@example.com", "password": "hunter22"},
    )
    assert res.status_code == 201
    token = res.json()["access_token"]

    res = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200
    assert res.json()["data"]["email"] == "carol@example.com"


def test_duplicate_email_rejected(client, register):
    register("dup@example.com")
    res = client.post(
        "/api/auth/register",
        json={"name": "Again", "email": "dup@example.com", "password": "secret123"},
    )
    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Email already registered"}


def test_login(client, register):
    register("dave@example.com", password="correct-horse")

    ok = client.post("/api/auth/login", json={"email": "dave@example.com", "password": "correct-horse"})
    assert ok.status_code == 200
    assert ok.json()["token_type"] == "bearer"

    bad = client.post("/api/auth/login", json={"email": "dave@example.com", "password": "wrong"})
    assert bad.status_code == 401


def test_garbage_token(client):
    res = client.get("/api/projects", headers={"Authorization": "Bearer not.a.jwt"})
    assert res.status_code == 401


def test_health(client):
    assert client.get("/api/health").json() == {"success": True, "message": "API is running"}
