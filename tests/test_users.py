# tests/test_users.py — User management tests
from taskboard.models import User
from taskboard.services.user_service import DEFAULT_AVATAR_COLORS
from tests.conftest import PASSWORD


def _signup(client, **overrides):
    payload = {
        "username": "erin",
        "email": "erin@example.com",
        "password": "hunter22",
        "full_name": "Erin Example",
    }
    payload.update(overrides)
    return client.post("/api/users", json=payload)


def test_create_user_defaults(client):
    resp = _signup(client)
    assert resp.status_code == 200
    data = resp.json()
    assert data["username"] == "erin"
    assert data["status"] == "ACTIVE"
    assert data["role"] == "EMPLOYEE"
    assert data["avatar_color"] in DEFAULT_AVATAR_COLORS
    assert "password" not in data and "password_hash" not in data


def test_create_user_keeps_requested_avatar_and_role(client):
    resp = _signup(client, avatar_color="#123456", role="ADMIN")
    assert resp.json()["avatar_color"] == "#123456"
    assert resp.json()["role"] == "ADMIN"


def test_created_user_can_log_in(client):
    _signup(client)
    resp = client.post("/api/auth/login", json={"username": "erin", "password": "hunter22"})
    assert resp.status_code == 200


def test_duplicate_username_rejected(client, db_session, employee_user):
    before = db_session.query(User).count()
    resp = _signup(client, username="bob", email="fresh@example.com")
    assert resp.status_code == 400
    assert db_session.query(User).count() == before


def test_duplicate_email_rejected(client, db_session, employee_user):
    before = db_session.query(User).count()
    resp = _signup(client, username="fresh", email="bob@example.com")
    assert resp.status_code == 400
    assert db_session.query(User).count() == before


def test_unknown_role_rejected(client):
    assert _signup(client, role="OWNER").status_code == 400


def test_invalid_signup_payload(client):
    assert _signup(client, email="not-an-email").status_code == 422
    assert _signup(client, password=" ").status_code == 422


def test_list_and_get_users(client, admin_user, employee_user):
    users = client.get("/api/users").json()
    assert [u["username"] for u in users] == ["alice", "bob"]
    assert client.get(f"/api/users/{employee_user.id}").json()["full_name"] == "Bob Builder"
    assert client.get("/api/users/999").status_code == 404


def test_partial_update(client, employee_user):
    resp = client.put(f"/api/users/{employee_user.id}", json={"full_name": "Robert Builder"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["full_name"] == "Robert Builder"
    assert data["username"] == "bob"
    assert data["email"] == "bob@example.com"


def test_update_to_taken_username_rejected(client, employee_user, other_employee):
    resp = client.put(f"/api/users/{employee_user.id}", json={"username": "carol"})
    assert resp.status_code == 400
    assert client.get(f"/api/users/{employee_user.id}").json()["username"] == "bob"


def test_update_to_taken_email_rejected(client, employee_user, other_employee):
    resp = client.put(f"/api/users/{employee_user.id}", json={"email": "carol@example.com"})
    assert resp.status_code == 400


def test_update_keeping_own_username_and_email(client, employee_user):
    resp = client.put(
        f"/api/users/{employee_user.id}",
        json={"username": "bob", "email": "bob@example.com", "avatar_color": "#000000"},
    )
    assert resp.status_code == 200
    assert resp.json()["avatar_color"] == "#000000"


def test_update_password_changes_login(client, employee_user):
    client.put(f"/api/users/{employee_user.id}", json={"password": "newpass99"})
    assert client.post("/api/auth/login", json={"username": "bob", "password": PASSWORD}).status_code == 401
    assert client.post("/api/auth/login", json={"username": "bob", "password": "newpass99"}).status_code == 200


def test_update_empty_password_keeps_old(client, employee_user):
    client.put(f"/api/users/{employee_user.id}", json={"password": ""})
    assert client.post("/api/auth/login", json={"username": "bob", "password": PASSWORD}).status_code == 200


def test_update_role_and_status(client, employee_user):
    resp = client.put(f"/api/users/{employee_user.id}", json={"role": "ADMIN", "status": "INACTIVE"})
    assert resp.json()["role"] == "ADMIN"
    assert resp.json()["status"] == "INACTIVE"
    assert client.put(f"/api/users/{employee_user.id}", json={"status": "GONE"}).status_code == 400


def test_update_not_found(client):
    assert client.put("/api/users/999", json={"full_name": "x"}).status_code == 404


def test_delete_deactivates_without_removing(client, employee_user):
    assert client.delete(f"/api/users/{employee_user.id}").status_code == 200
    resp = client.get(f"/api/users/{employee_user.id}")
    assert resp.status_code == 200
    assert resp.json()["status"] == "INACTIVE"


def test_deactivate_and_activate(client, employee_user):
    resp = client.put(f"/api/users/{employee_user.id}/deactivate")
    assert resp.json()["status"] == "INACTIVE"
    resp = client.put(f"/api/users/{employee_user.id}/activate")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ACTIVE"


def test_status_changes_not_found(client):
    assert client.delete("/api/users/999").status_code == 404
    assert client.put("/api/users/999/activate").status_code == 404
    assert client.put("/api/users/999/deactivate").status_code == 404
