# tests/test_auth.py — Login/logout tests
from taskboard.services import auth_service
from tests.conftest import PASSWORD

FAILURE_DETAIL = "Invalid username or password, or account is inactive"


def test_login_returns_profile_and_empty_token(client, employee_user):
    resp = client.post("/api/auth/login", json={"username": "bob", "password": PASSWORD})
    assert resp.status_code == 200
    data = resp.json()
    assert data["token"] == ""
    assert data["user"]["id"] == employee_user.id
    assert data["user"]["username"] == "bob"
    assert data["user"]["status"] == "ACTIVE"
    assert "password_hash" not in data["user"]


def test_login_wrong_password(client, employee_user):
    resp = client.post("/api/auth/login", json={"username": "bob", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == FAILURE_DETAIL


def test_login_unknown_user(client):
    resp = client.post("/api/auth/login", json={"username": "nobody", "password": PASSWORD})
    assert resp.status_code == 401
    assert resp.json()["detail"] == FAILURE_DETAIL


def test_login_inactive_account_is_indistinguishable(client, inactive_user):
    resp = client.post("/api/auth/login", json={"username": "dave", "password": PASSWORD})
    assert resp.status_code == 401
    assert resp.json()["detail"] == FAILURE_DETAIL


def test_login_blank_password(client, employee_user):
    resp = client.post("/api/auth/login", json={"username": "bob", "password": "   "})
    assert resp.status_code == 401


def test_login_missing_password_field(client, employee_user):
    resp = client.post("/api/auth/login", json={"username": "bob"})
    assert resp.status_code == 401


def test_login_null_password(client, employee_user):
    resp = client.post("/api/auth/login", json={"username": "bob", "password": None})
    assert resp.status_code == 401
    assert resp.json()["detail"] == FAILURE_DETAIL


def test_login_null_username(client, employee_user):
    resp = client.post("/api/auth/login", json={"username": None, "password": PASSWORD})
    assert resp.status_code == 401
    assert resp.json()["detail"] == FAILURE_DETAIL


def test_login_after_reactivation(client, inactive_user):
    assert client.put(f"/api/users/{inactive_user.id}/activate").status_code == 200
    resp = client.post("/api/auth/login", json={"username": "dave", "password": PASSWORD})
    assert resp.status_code == 200


def test_logout_acknowledges(client):
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Logged out successfully"


def test_authenticate_service(db_session, employee_user, inactive_user):
    assert auth_service.authenticate(db_session, "bob", PASSWORD).user.username == "bob"
    assert auth_service.authenticate(db_session, "bob", "") is None
    assert auth_service.authenticate(db_session, "bob", None) is None
    assert auth_service.authenticate(db_session, "dave", PASSWORD) is None
    assert auth_service.authenticate(db_session, "ghost", PASSWORD) is None
    assert auth_service.authenticate(db_session, None, PASSWORD) is None
