import pytest


# =============================================================================
# /api/login
# =============================================================================


def test_login_returns_placeholder_identity(client):
    res = client.post("/api/login", json={"email": "asha@example.com", "password": "whatever"})

    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "message": "Login successful",
        "data": {
            "userId": "user_123",
            "email": "asha@example.com",
            "token": "jwt_token_placeholder",
        },
    }


@pytest.mark.parametrize("body", [{}, {"email": "asha@example.com"}, {"password": "x"},
                                  {"email": "", "password": "x"}])
def test_login_requires_email_and_password(client, body):
    res = client.post("/api/login", json=body)

    assert res.status_code == 400
    assert res.json() == {
        "success": False,
        "message": "Validation failed",
        "error": "Email and password are required",
    }


def test_login_rejects_malformed_email(client):
    res = client.post("/api/login", json={"email": "asha", "password": "x"})
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid email format"


def test_login_wrong_method(client):
    res = client.get("/api/login")
    assert res.status_code == 405
    assert res.json()["error"] == "Only POST requests are accepted"


# =============================================================================
# /api/register
# =============================================================================


def test_register_creates_placeholder_user(client, registration):
    res = client.post("/api/register", json=registration)

    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    assert body["message"] == "Registration successful"
    data = body["data"]
    assert data["userId"].startswith("user_")
    assert data["fullName"] == "Asha Rao"
    assert data["email"] == "asha@example.com"
    assert data["role"] == "student"
    assert "password" not in data
    assert "confirmPassword" not in data


def test_register_keeps_given_role(client, registration):
    registration["role"] = "architect"
    res = client.post("/api/register", json=registration)
    assert res.json()["data"]["role"] == "architect"


def test_register_password_mismatch(client, registration):
    registration["confirmPassword"] = "secret2"
    res = client.post("/api/register", json=registration)

    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Validation failed", "error": "Passwords do not match"}


def test_register_missing_field(client, registration):
    registration.pop("email")
    res = client.post("/api/register", json=registration)
    assert res.status_code == 400
    assert res.json()["error"] == "All required fields must be provided"


def test_register_bad_email(client, registration):
    registration["email"] = "asha.example.com"
    res = client.post("/api/register", json=registration)
    assert res.status_code == 400
    assert res.json()["error"] == "Invalid email format"


def test_register_does_not_check_duplicates(client, registration):
    first = client.post("/api/register", json=registration)
    second = client.post("/api/register", json=registration)
    assert first.status_code == second.status_code == 201


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_register_wrong_method(client, method):
    res = client.request(method.upper(), "/api/register")
    assert res.status_code == 405
    assert res.json()["message"] == "Method not allowed"
