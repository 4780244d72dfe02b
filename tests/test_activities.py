# tests/test_activities.py — Activity feed
import pytest

from taskboard.models import ActionType
from taskboard.services.activity_service import parse_action_type


def _make_tasks(client, user, count):
    return [
        client.post("/api/tasks", json={"title": f"Task {i}", "created_by_id": user.id}).json()
        for i in range(count)
    ]


def test_recent_newest_first_with_limit(client, admin_user):
    tasks = _make_tasks(client, admin_user, 4)
    recent = client.get("/api/activities/recent", params={"limit": 2}).json()
    assert [a["task_id"] for a in recent] == [tasks[3]["id"], tasks[2]["id"]]
    assert recent[0]["task_title"] == "Task 3"
    assert recent[0]["user_full_name"] == "Alice Admin"


def test_recent_default_limit(client, admin_user):
    _make_tasks(client, admin_user, 12)
    assert len(client.get("/api/activities/recent").json()) == 10


def test_recent_rejects_non_positive_limit(client):
    assert client.get("/api/activities/recent", params={"limit": 0}).status_code == 422


def test_task_activities_only_for_that_task(client, admin_user):
    first, second = _make_tasks(client, admin_user, 2)
    client.put(f"/api/tasks/{first['id']}", json={"status": "DONE"})
    rows = client.get(f"/api/activities/task/{first['id']}").json()
    assert {r["task_id"] for r in rows} == {first["id"]}
    assert [r["action_type"] for r in rows] == ["STATUS_CHANGED", "CREATED"]
    assert client.get("/api/activities/task/999").json() == []


def test_manual_entry_unknown_action_type_falls_back(client, admin_user):
    task = _make_tasks(client, admin_user, 1)[0]
    resp = client.post(
        "/api/activities",
        json={"task_id": task["id"], "user_id": admin_user.id, "action_type": "ARCHIVED", "description": "x"},
    )
    assert resp.status_code == 200
    assert resp.json()["action_type"] == "UPDATED"


def test_manual_entry_with_unknown_references(client):
    resp = client.post("/api/activities", json={"task_id": 5, "user_id": 6, "action_type": "RESTORED"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["action_type"] == "RESTORED"
    assert body["task_id"] is None
    assert body["user_id"] is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("CREATED", ActionType.CREATED),
        ("STATUS_CHANGED", ActionType.STATUS_CHANGED),
        ("created", ActionType.UPDATED),
        ("", ActionType.UPDATED),
        (None, ActionType.UPDATED),
    ],
)
def test_parse_action_type(raw, expected):
    assert parse_action_type(raw) == expected
