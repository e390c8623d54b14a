from datetime import datetime

from bson import ObjectId

from event_hub_api.app.core.db import ADMIN_TASKS


def create_task(client, **fields):
    body = {"taskName": "Book the hall"}
    body.update(fields)
    resp = client.post("/admin/tasks", json=body)
    assert resp.status_code == 201
    return resp.json()["task"]


class TestCreate:
    def test_create_returns_task(self, client, db):
        resp = client.post(
            "/admin/tasks",
            json={"taskName": "Book the hall", "description": "Before Friday", "deadline": "2025-09-01T18:00:00Z"},
        )
        assert resp.status_code == 201
        body = resp.json()
        assert body["message"] == "Admin task created successfully"
        task = body["task"]
        assert task["taskName"] == "Book the hall"
        assert task["description"] == "Before Friday"
        assert task["deadline"] == "2025-09-01T18:00:00"
        assert task["createdAt"] is not None
        assert db[ADMIN_TASKS].count_documents({}) == 1

    def test_optional_fields_may_be_omitted(self, client):
        task = create_task(client)
        assert task["description"] is None
        assert task["deadline"] is None

    def test_task_name_is_required(self, client, db):
        resp = client.post("/admin/tasks", json={"description": "no name"})
        assert resp.status_code == 400
        assert db[ADMIN_TASKS].count_documents({}) == 0

    def test_blank_task_name_is_bad_request(self, client, db):
        resp = client.post("/admin/tasks", json={"taskName": "   "})
        assert resp.status_code == 400
        assert db[ADMIN_TASKS].count_documents({}) == 0

    def test_invalid_deadline_is_bad_request(self, client):
        resp = client.post("/admin/tasks", json={"taskName": "X", "deadline": "soon"})
        assert resp.status_code == 400


def test_list_newest_first(client, db):
    db[ADMIN_TASKS].insert_many(
        [
            {"taskName": "first", "createdAt": datetime(2025, 1, 1)},
            {"taskName": "third", "createdAt": datetime(2025, 3, 1)},
            {"taskName": "second", "createdAt": datetime(2025, 2, 1)},
        ]
    )
    resp = client.get("/admin/tasks")
    assert resp.status_code == 200
    assert [task["taskName"] for task in resp.json()] == ["third", "second", "first"]


class TestUpdate:
    def test_partial_update_keeps_other_fields(self, client):
        task = create_task(client, description="Before Friday", deadline="2025-09-01")

        resp = client.put(f"/admin/tasks/{task['id']}", json={"description": "Before Thursday"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Admin task updated successfully"
        assert body["task"]["description"] == "Before Thursday"
        assert body["task"]["taskName"] == "Book the hall"
        assert body["task"]["deadline"] == "2025-09-01T00:00:00"

    def test_update_task_name_and_deadline(self, client, db):
        task = create_task(client)
        resp = client.put(
            f"/admin/tasks/{task['id']}",
            json={"taskName": "Book the big hall", "deadline": "2025-10-01T09:00:00"},
        )
        assert resp.json()["task"]["taskName"] == "Book the big hall"
        stored = db[ADMIN_TASKS].find_one({"_id": ObjectId(task["id"])})
        assert stored["deadline"] == datetime(2025, 10, 1, 9, 0)

    def test_empty_update_returns_task_unchanged(self, client):
        task = create_task(client)
        resp = client.put(f"/admin/tasks/{task['id']}", json={})
        assert resp.status_code == 200
        assert resp.json()["task"]["taskName"] == "Book the hall"

    def test_blank_task_name_is_rejected(self, client, db):
        task = create_task(client)
        resp = client.put(f"/admin/tasks/{task['id']}", json={"taskName": " "})
        assert resp.status_code == 400
        assert db[ADMIN_TASKS].find_one()["taskName"] == "Book the hall"

    def test_unknown_id_is_not_found(self, client):
        resp = client.put(f"/admin/tasks/{ObjectId()}", json={"taskName": "X"})
        assert resp.status_code == 404
        assert resp.json() == {"message": "Task not found"}

    def test_malformed_id_is_not_found(self, client):
        resp = client.put("/admin/tasks/123", json={"taskName": "X"})
        assert resp.status_code == 404


class TestDelete:
    def test_delete_removes_task(self, client, db):
        task = create_task(client)
        resp = client.delete(f"/admin/tasks/{task['id']}")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Admin task deleted successfully"}
        assert db[ADMIN_TASKS].count_documents({}) == 0

    def test_second_delete_is_not_found(self, client):
        task = create_task(client)
        client.delete(f"/admin/tasks/{task['id']}")
        assert client.delete(f"/admin/tasks/{task['id']}").status_code == 404

    def test_unknown_and_malformed_ids_are_not_found(self, client):
        assert client.delete(f"/admin/tasks/{ObjectId()}").status_code == 404
        assert client.delete("/admin/tasks/not-an-id").status_code == 404
