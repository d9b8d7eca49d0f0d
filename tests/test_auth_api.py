def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client, email="a@x.com", password="secret1", name="Ann"):
    body = {"email": email, "password": password}
    if name is not None:
        body["name"] = name
    return client.post("/api/auth/register", json=body)


def test_register_returns_201_with_token_and_user(client):
    response = register(client)

    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Registered successfully"
    assert data["token"] == f"token-{data['user']['id']}"
    assert data["user"] == {"id": data["user"]["id"], "email": "a@x.com", "name": "Ann"}


def test_register_without_body_is_a_400(client):
    response = client.post("/api/auth/register")

    assert response.status_code == 400
    assert response.json()["message"] == "Email and password required"


def test_register_short_password_and_duplicate_are_400(client):
    short = register(client, password="123")
    assert short.status_code == 400
    assert short.json()["message"] == "Password must be 6+ characters"

    assert register(client).status_code == 201
    duplicate = register(client, name="Other")
    assert duplicate.status_code == 400
    assert duplicate.json() == {
        "success": False,
        "message": "User already exists",
        "code": "CONFLICT",
        "details": None,
    }


def test_login_success_and_failures(client):
    token = register(client).json()["token"]

    ok = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert ok.status_code == 200
    assert ok.json()["token"] == token
    assert ok.json()["message"] == "Login successful"

    wrong_password = client.post("/api/auth/login", json={"email": "a@x.com", "password": "nope123"})
    unknown_email = client.post("/api/auth/login", json={"email": "b@x.com", "password": "secret1"})
    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()

    missing = client.post("/api/auth/login", json={"email": "a@x.com"})
    assert missing.status_code == 400


def test_profile_requires_token(client):
    response = client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["message"] == "No token provided"


def test_profile_unknown_token_is_404(client):
    response = client.get("/api/auth/profile", headers=bearer("token-424242"))

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_profile_defaults(client):
    token = register(client).json()["token"]

    for path in ("/api/auth/me", "/api/auth/profile"):
        response = client.get(path, headers=bearer(token))
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["name"] == "Ann"
        assert user["mobileNumber"] == ""
        assert user["alternativeNumber"] == ""
        assert user["aadharNumber"] == ""
        assert user["avatar"] is None


def test_update_profile_requires_token(client):
    response = client.post("/api/auth/update-profile", json={"name": "X"})

    assert response.status_code == 401


def test_update_profile_explicit_null_clears_field(client):
    token = register(client).json()["token"]
    client.post("/api/auth/update-profile", json={"avatar": "data:image/png;base64,AAA"}, headers=bearer(token))

    response = client.post("/api/auth/update-profile", json={"avatar": None}, headers=bearer(token))

    assert response.status_code == 200
    assert response.json()["message"] == "Profile updated successfully"
    assert response.json()["user"]["avatar"] is None


def test_update_profile_accepts_numeric_phone_and_aadhar(client):
    token = register(client).json()["token"]

    response = client.post(
        "/api/auth/update-profile",
        json={"mobileNumber": 9999999999, "aadharNumber": 123412341234},
        headers=bearer(token),
    )

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["mobileNumber"] == "9999999999"
    assert user["aadharNumber"] == "123412341234"
    profile = client.get("/api/auth/me", headers=bearer(token)).json()["user"]
    assert profile["mobileNumber"] == "9999999999"


def test_update_profile_email_conflict_is_400_and_changes_nothing(client):
    token = register(client).json()["token"]
    register(client, email="b@x.com", name="Bob")

    response = client.post(
        "/api/auth/update-profile",
        json={"email": "b@x.com", "name": "Changed"},
        headers=bearer(token),
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Email already in use"
    profile = client.get("/api/auth/me", headers=bearer(token)).json()["user"]
    assert profile["email"] == "a@x.com"
    assert profile["name"] == "Ann"


def test_scenario_rename_before_register(client):
    registered = register(client)
    assert registered.status_code == 201
    token = registered.json()["token"]
    user_id = registered.json()["user"]["id"]
    assert token == f"token-{user_id}"

    login = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert login.json()["token"] == token

    profile = client.get("/api/auth/me", headers=bearer(token)).json()["user"]
    assert profile["name"] == "Ann"
    assert profile["mobileNumber"] == ""

    client.post("/api/auth/update-profile", json={"mobileNumber": "999"}, headers=bearer(token))
    assert client.get("/api/auth/me", headers=bearer(token)).json()["user"]["mobileNumber"] == "999"

    renamed = client.post("/api/auth/update-profile", json={"email": "b@x.com"}, headers=bearer(token))
    assert renamed.status_code == 200
    profile = client.get("/api/auth/me", headers=bearer(token)).json()["user"]
    assert profile["email"] == "b@x.com"
    assert profile["id"] == user_id
    assert profile["mobileNumber"] == "999"

    # b@x.com is taken now, a@x.com is free again
    assert register(client, email="b@x.com").status_code == 400
    assert register(client, email="a@x.com").status_code == 201


def test_scenario_register_before_rename(client):
    token = register(client).json()["token"]
    assert register(client, email="b@x.com", name="Bob").status_code == 201

    renamed = client.post("/api/auth/update-profile", json={"email": "b@x.com"}, headers=bearer(token))

    assert renamed.status_code == 400
    assert client.get("/api/auth/me", headers=bearer(token)).json()["user"]["email"] == "a@x.com"


def test_forgot_password(client):
    register(client)

    ok = client.post("/api/auth/forgot-password", json={"email": "a@x.com"})
    assert ok.status_code == 200
    assert ok.json() == {"success": True, "message": "Password reset email sent (demo mode)"}

    assert client.post("/api/auth/forgot-password", json={}).status_code == 400
    assert client.post("/api/auth/forgot-password", json={"email": "z@x.com"}).status_code == 404


def test_logout_is_stateless(client):
    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Logged out successfully"}
