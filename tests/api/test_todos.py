"""Todo endpoints."""

import pytest


@pytest.fixture
def task(alice, make_project, make_task):
    return make_task(alice, make_project(alice)["id"], name="Docs", moduleName="writing")


def test_create_todo_has_task_summary(client, alice, task):
    res = client.post(
        "/api/todos",
        json={"title": "Outline", "dueDate": "2030-01-05", "task": task["id"], "estimatedTime": 1.5},
        headers=alice,
    )
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["task"] == {"id": task["id"], "name": "Docs", "moduleName": "writing"}
    assert data["estimatedTime"] == 1.5
    assert data["priority"] == "medium"
    assert data["completed"] is False


def test_negative_estimate_rejected(client, alice, task):
    res = client.post(
        "/api/todos",
        json={"title": "Bad", "dueDate": "2030-01-05", "task": task["id"], "estimatedTime": -1},
        headers=alice,
    )
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "estimatedTime"


def test_non_finite_estimate_rejected(client, alice, task):
    body = (
        '{"title": "Forever", "dueDate": "2030-01-05", "task": ' + str(task["id"])
        + ', "estimatedTime": Infinity}'
    )
    res = client.post(
        "/api/todos", content=body, headers={**alice, "Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "estimatedTime"

    data = client.get(f"/api/tasks/{task['id']}", headers=alice).json()["data"]
    assert data["totalTodos"] == 0
    assert data["totalEstimatedTime"] == 0


def test_create_todo_in_foreign_task_is_forbidden(client, bob, task):
    res = client.post(
        "/api/todos", json={"title": "Nope", "dueDate": "2030-01-05", "task": task["id"]}, headers=bob,
    )
    assert res.status_code == 403
    assert res.json()["message"] == "Not authorized to add todos to this task"


def test_filter_completed_and_priority(client, alice, task, make_todo):
    make_todo(alice, task["id"], title="both", completed=True, priority="high")
    make_todo(alice, task["id"], title="only high", priority="high")
    make_todo(alice, task["id"], title="only done", completed=True, priority="low")

    res = client.get("/api/todos", params={"completed": "true", "priority": "high"}, headers=alice)
    body = res.json()
    assert body["count"] == 1
    assert body["data"][0]["title"] == "both"


def test_filter_due_date_range(client, alice, task, make_todo):
    make_todo(alice, task["id"], title="december", dueDate="2023-12-31T23:59:59")
    make_todo(alice, task["id"], title="first", dueDate="2024-01-01")
    make_todo(alice, task["id"], title="last", dueDate="2024-01-31")
    make_todo(alice, task["id"], title="february", dueDate="2024-02-01")

    res = client.get(
        "/api/todos", params={"startDate": "2024-01-01", "endDate": "2024-01-31"}, headers=alice,
    )
    assert [t["title"] for t in res.json()["data"]] == ["first", "last"]


def test_filter_by_task(client, alice, task, make_project, make_task, make_todo):
    other = make_task(alice, make_project(alice)["id"])
    make_todo(alice, task["id"], title="mine")
    make_todo(alice, other["id"], title="elsewhere")

    res = client.get("/api/todos", params={"task": task["id"]}, headers=alice)
    assert [t["title"] for t in res.json()["data"]] == ["mine"]


def test_toggle_twice_restores_value(client, alice, task, make_todo):
    todo = make_todo(alice, task["id"])
    url = f"/api/todos/{todo['id']}/toggle"

    assert client.patch(url, headers=alice).json()["data"]["completed"] is True
    assert client.patch(url, headers=alice).json()["data"]["completed"] is False


def test_update_todo(client, alice, task, make_todo):
    todo = make_todo(alice, task["id"], title="Draft")
    res = client.put(f"/api/todos/{todo['id']}", json={"priority": "low", "estimatedTime": 3}, headers=alice)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["priority"] == "low"
    assert data["estimatedTime"] == 3
    assert data["title"] == "Draft"

    res = client.put(f"/api/todos/{todo['id']}", json={"priority": "urgent"}, headers=alice)
    assert res.status_code == 400


def test_other_user_cannot_touch_todo(client, alice, bob, task, make_todo):
    todo = make_todo(alice, task["id"], title="Hidden")
    url = f"/api/todos/{todo['id']}"

    res = client.get(url, headers=bob)
    assert res.status_code == 403
    assert "Hidden" not in res.text
    assert client.put(url, json={"title": "x"}, headers=bob).status_code == 403
    assert client.patch(f"{url}/toggle", headers=bob).status_code == 403
    assert client.delete(url, headers=bob).status_code == 403


def test_delete_todo(client, alice, task, make_todo):
    todo = make_todo(alice, task["id"])
    res = client.delete(f"/api/todos/{todo['id']}", headers=alice)
    assert res.json() == {"success": True, "data": {}}
    assert client.get(f"/api/todos/{todo['id']}", headers=alice).status_code == 404
