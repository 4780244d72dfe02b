# tests/test_comments.py — Comment creation and listing
from taskboard.models import Comment


def _task(client, user):
    return client.post("/api/tasks", json={"title": "Discuss me", "created_by_id": user.id}).json()


def test_comment_logs_activity(client, admin_user, employee_user):
    task = _task(client, admin_user)
    resp = client.post(
        "/api/comments",
        json={"task_id": task["id"], "user_id": employee_user.id, "text": "On it", "category": "Started"},
    )
    assert resp.status_code == 200
    comment = resp.json()
    assert comment["username"] == "bob"
    assert comment["user_full_name"] == "Bob Builder"
    assert comment["category"] == "Started"

    latest = client.get(f"/api/activities/task/{task['id']}").json()[0]
    assert latest["action_type"] == "UPDATED"
    assert latest["user_id"] == employee_user.id
    assert latest["description"] == "Commented on Discuss me"
    assert latest["new_value"] == "Started"


def test_comment_without_category_uses_default_value(client, admin_user):
    task = _task(client, admin_user)
    client.post("/api/comments", json={"task_id": task["id"], "user_id": admin_user.id, "text": "hi"})
    latest = client.get(f"/api/activities/task/{task['id']}").json()[0]
    assert latest["new_value"] == "Commented"


def test_comment_on_unknown_task_is_saved_without_activity(client, db_session, employee_user):
    resp = client.post("/api/comments", json={"task_id": 999, "user_id": employee_user.id, "text": "lost"})
    assert resp.status_code == 200
    assert resp.json()["task_id"] is None
    assert db_session.query(Comment).count() == 1
    assert client.get("/api/activities/recent").json() == []


def test_comment_by_unknown_user_is_saved_without_activity(client, admin_user):
    task = _task(client, admin_user)
    resp = client.post("/api/comments", json={"task_id": task["id"], "user_id": 999, "text": "anon"})
    assert resp.status_code == 200
    assert resp.json()["username"] is None
    actions = [a["action_type"] for a in client.get(f"/api/activities/task/{task['id']}").json()]
    assert actions == ["CREATED"]


def test_blank_comment_rejected(client, admin_user):
    task = _task(client, admin_user)
    resp = client.post("/api/comments", json={"task_id": task["id"], "user_id": admin_user.id, "text": " "})
    assert resp.status_code == 422


def test_list_comments_oldest_first_and_top_level_filter(client, admin_user, employee_user):
    task = _task(client, admin_user)
    first = client.post(
        "/api/comments", json={"task_id": task["id"], "user_id": admin_user.id, "text": "question"}
    ).json()
    client.post(
        "/api/comments",
        json={
            "task_id": task["id"],
            "user_id": employee_user.id,
            "text": "answer",
            "parent_comment_id": first["id"],
        },
    )

    texts = [c["text"] for c in client.get(f"/api/comments/task/{task['id']}").json()]
    assert texts == ["question", "answer"]

    top = client.get(f"/api/comments/task/{task['id']}", params={"top_level_only": True}).json()
    assert [c["text"] for c in top] == ["question"]
