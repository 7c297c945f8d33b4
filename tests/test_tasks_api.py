"""HTTP tests for /api/tasks, including partial updates."""

import pytest


def create(client, **fields):
    response = client.post("/api/tasks", json=fields)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def titles(response):
    return [task["title"] for task in response.json()["data"]]


def test_create_patch_scenario(client):
    create(client, title="Existing")
    task = create(client, title="A", priority="high")
    assert task["id"] == 2
    assert task["status"] == "pending"
    assert task["priority"] == "high"
    assert task["description"] == ""
    assert task["dueDate"] is None
    assert task["createdAt"] == task["updatedAt"]

    response = client.patch(f"/api/tasks/{task['id']}", json={"status": "completed"})
    body = response.json()
    assert response.status_code == 200
    assert body["message"] == "Task updated successfully"
    assert body["data"]["status"] == "completed"
    assert body["data"]["title"] == "A"
    assert body["data"]["updatedAt"] != task["updatedAt"]
    assert body["data"]["createdAt"] == task["createdAt"]


def test_create_fetch_round_trip(client):
    fields = {
        "title": "Write docs",
        "description": "API reference",
        "status": "in-progress",
        "priority": "low",
        "dueDate": "2024-06-30",
    }
    created = create(client, **fields)
    fetched = client.get(f"/api/tasks/{created['id']}").json()["data"]
    for key, value in fields.items():
        assert fetched[key] == value
    assert set(fetched) == set(fields) | {"id", "createdAt", "updatedAt"}


def test_patch_without_known_field_leaves_task_unchanged(client):
    task = create(client, title="Keep")
    response = client.patch(f"/api/tasks/{task['id']}", json={"colour": "blue"})
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "At least one field is required for update"
    assert client.get(f"/api/tasks/{task['id']}").json()["data"] == task


def test_patch_can_clear_due_date(client):
    task = create(client, title="Dated", dueDate="2024-05-01")
    body = client.patch(f"/api/tasks/{task['id']}", json={"dueDate": None}).json()
    assert body["data"]["dueDate"] is None


def test_put_requires_title_status_and_priority(client):
    task = create(client, title="T")
    response = client.put(f"/api/tasks/{task['id']}", json={"title": "T2", "status": "pending"})
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Priority is required and must be one of: low, medium, high"


def test_put_replaces_fields(client):
    task = create(client, title="T", description="old", dueDate="2024-01-02")
    response = client.put(
        f"/api/tasks/{task['id']}",
        json={"title": "T2", "status": "completed", "priority": "high"},
    )
    data = response.json()["data"]
    assert response.status_code == 200
    assert data["title"] == "T2"
    assert data["description"] == ""
    assert data["dueDate"] is None
    assert data["updatedAt"] != task["updatedAt"]


def test_invalid_status_on_create(client):
    response = client.post("/api/tasks", json={"title": "A", "status": "done"})
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid status. Must be one of: pending, in-progress, completed"


@pytest.mark.parametrize("due_date", ["12/31/2024", "2024-01-01\n", "٢٠٢٤-٠١-٠١"])
def test_invalid_date_on_create(client, due_date):
    response = client.post("/api/tasks", json={"title": "A", "dueDate": due_date})
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid date format. Use YYYY-MM-DD"
    assert client.get("/api/tasks").json()["count"] == 0


def test_priority_sort_ignores_insertion_order(client):
    for title, priority in (("h1", "high"), ("l1", "low"), ("m1", "medium"), ("l2", "low"), ("h2", "high")):
        create(client, title=title, priority=priority)
    response = client.get("/api/tasks", params={"sortBy": "priority", "order": "asc"})
    assert [task["priority"] for task in response.json()["data"]] == ["low", "low", "medium", "high", "high"]


def test_due_date_sort_is_chronological(client):
    create(client, title="dec", dueDate="2024-12-01")
    create(client, title="feb", dueDate="2024-02-15")
    create(client, title="none")
    create(client, title="nov", dueDate="2023-11-30")
    response = client.get("/api/tasks", params={"sortBy": "dueDate"})
    assert titles(response) == ["none", "nov", "feb", "dec"]


def test_seeded_task_filters(seeded_client):
    response = seeded_client.get("/api/tasks", params={"status": "pending", "priority": "high"})
    assert titles(response) == ["Complete project documentation"]
    response = seeded_client.get("/api/tasks", params={"status": "unknown"})
    assert response.json()["count"] == 3


@pytest.mark.parametrize("method", ["get", "delete"])
def test_non_numeric_task_id(client, method):
    response = getattr(client, method)("/api/tasks/one")
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid task ID"


def test_delete_missing_task(client):
    create(client, title="Only")
    response = client.delete("/api/tasks/7")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Task with ID 7 not found"
    assert client.get("/api/tasks").json()["count"] == 1


def test_ids_continue_after_deleting_last(client):
    first = create(client, title="one")
    second = create(client, title="two")
    client.delete(f"/api/tasks/{first['id']}")
    third = create(client, title="three")
    assert third["id"] == second["id"] + 1
