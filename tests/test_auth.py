from datetime import timedelta

from clubhub.cryptography import create_token, verify_password
from clubhub.models.user_model import User


def _signup(client, email="new@club.test", **extra):
    body = {"name": "New Member", "email": email, "password": "hunter22", **extra}
    return client.post("/api/auth/signup", json=body)


def test_signup_issues_token_and_hashes_password(client, db):
    response = _signup(client, registrationNumber="12100001")
    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["user"]["email"] == "new@club.test"
    assert body["user"]["isAdmin"] is False

    user = db.query(User).filter(User.email == "new@club.test").first()
    assert user.password != "hunter22"
    assert verify_password("hunter22", user.password)
    assert user.registration_number == "12100001"


def test_signup_cannot_grant_admin(client, db):
    response = _signup(client, role="admin", isAdmin=True)
    assert response.status_code == 201
    assert response.json()["user"]["isAdmin"] is False


def test_duplicate_email_rejected(client):
    assert _signup(client).status_code == 201
    response = _signup(client, email="NEW@club.test")
    assert response.status_code == 400
    assert response.json()["error"] == "DUPLICATE_EMAIL"


def test_signup_lists_invalid_fields(client):
    response = client.post("/api/auth/signup", json={"email": "not-an-email"})
    assert response.status_code == 400
    fields = response.json()["fields"]
    assert "email" in fields and "name" in fields and "password" in fields


def test_login_and_me(client):
    _signup(client)
    response = client.post("/api/auth/login", json={"email": "new@club.test", "password": "hunter22"})
    assert response.status_code == 200
    token = response.json()["token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "new@club.test"
    assert "password" not in me.json()


def test_login_with_wrong_password(client):
    _signup(client)
    response = client.post("/api/auth/login", json={"email": "new@club.test", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_me_requires_token(client):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers={"Authorization": "Token abc"}).status_code == 401


def test_malformed_token_on_admin_route_is_401(client):
    response = client.post("/api/events", json={"title": "X"}, headers={"Authorization": "Bearer not.a.jwt"})
    assert response.status_code == 401


def test_expired_token_on_admin_route_is_401(client, store):
    session = store.session()
    admin = User(name="Old", email="old@club.test", password="x", role="admin", is_admin=True)
    session.add(admin)
    session.commit()
    token = create_token(admin.id, admin.email, expires_in=timedelta(seconds=-30))
    session.close()

    response = client.post("/api/events", json={"title": "X"}, headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_for_deleted_user_is_401(client, store):
    session = store.session()
    user = User(name="Gone", email="gone@club.test", password="x")
    session.add(user)
    session.commit()
    token = create_token(user.id, user.email)
    session.delete(user)
    session.commit()
    session.close()

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "User not found"


def test_non_admin_gets_403_on_admin_route(client, user_headers):
    response = client.post("/api/events", json={"title": "X"}, headers=user_headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Admin access required"


def test_profile_update_leaves_email_alone(client, user_headers):
    response = client.put(
        "/api/auth/profile",
        json={"name": "Renamed", "phone": "999", "email": "hijack@club.test"},
        headers=user_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Renamed"
    assert body["phone"] == "999"
    assert body["email"] == "student@club.test"


def test_profile_name_cannot_be_nulled(client, user_headers):
    response = client.put("/api/auth/profile", json={"name": None}, headers=user_headers)
    assert response.status_code == 400
    assert response.json()["fields"] == ["name"]
    assert client.get("/api/auth/me", headers=user_headers).json()["name"] == "Test User"
