from datetime import datetime

import pytest

from event_hub_api.app.core.db import TASKS


def test_assign_task(client, db):
    resp = client.post("/assign_task", json={"email": "ada@example.com", "taskName": "Prepare the venue"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "Task assigned successfully"
    assert body["task"]["email"] == "ada@example.com"
    assert body["task"]["taskName"] == "Prepare the venue"
    assert db[TASKS].count_documents({"email": "ada@example.com"}) == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "ada@example.com"},
        {"taskName": "Prepare the venue"},
        {"email": "", "taskName": "Prepare the venue"},
        {"email": "ada@example.com", "taskName": ""},
        {"email": "   ", "taskName": "Prepare the venue"},
        {"email": "ada@example.com", "taskName": "   "},
    ],
)
def test_missing_email_or_task_is_bad_request(client, db, payload):
    resp = client.post("/assign_task", json=payload)
    assert resp.status_code == 400
    assert db[TASKS].count_documents({}) == 0


def test_same_task_can_be_assigned_twice(client, db):
    body = {"email": "ada@example.com", "taskName": "Prepare the venue"}
    assert client.post("/assign_task", json=body).status_code == 201
    assert client.post("/assign_task", json=body).status_code == 201
    assert db[TASKS].count_documents({}) == 2


def test_my_tasks_newest_first_and_filtered_by_email(client, db):
    db[TASKS].insert_many(
        [
            {"email": "ada@example.com", "taskName": "old", "createdAt": datetime(2025, 1, 1)},
            {"email": "ada@example.com", "taskName": "newest", "createdAt": datetime(2025, 3, 1)},
            {"email": "bob@example.com", "taskName": "not mine", "createdAt": datetime(2025, 4, 1)},
            {"email": "ada@example.com", "taskName": "middle", "createdAt": datetime(2025, 2, 1)},
        ]
    )

    resp = client.get("/my_tasks/ada@example.com")
    assert resp.status_code == 200
    assert [task["taskName"] for task in resp.json()] == ["newest", "middle", "old"]


def test_my_tasks_for_unknown_email_is_empty(client):
    resp = client.get("/my_tasks/nobody@example.com")
    assert resp.status_code == 200
    assert resp.json() == []


def test_surrounding_whitespace_is_stripped(client, db):
    resp = client.post("/assign_task", json={"email": " ada@example.com ", "taskName": "  Prepare the venue\n"})
    assert resp.status_code == 201
    assert db[TASKS].find_one()["email"] == "ada@example.com"
    assert resp.json()["task"]["taskName"] == "Prepare the venue"
