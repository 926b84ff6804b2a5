"""Dashboard statistics endpoint."""


def test_empty_dashboard(client, alice):
    res = client.get("/api/stats", headers=alice)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["projects"]["total"] == 0
    assert data["completionRate"] == {"tasks": 0, "todos": 0}
    assert data["recentActivity"] == {"projects": 0, "tasks": 0, "todos": 0}


def test_dashboard_counts(client, alice, bob, make_project, make_task, make_todo):
    active = make_project(alice)
    make_project(alice, status="on-hold")
    make_project(bob)

    overdue = make_task(alice, active["id"], dueDate="2020-01-01", priority="high")
    make_task(alice, active["id"], dueDate="2020-01-01", completed=True)
    make_todo(alice, overdue["id"], dueDate="2020-01-01")
    make_todo(alice, overdue["id"], completed=True, priority="low")

    data = client.get("/api/stats", headers=alice).json()["data"]

    assert data["projects"]["total"] == 2
    assert data["projects"]["active"] == 1
    assert data["projects"]["statusDistribution"] == {"active": 1, "completed": 0, "onHold": 1}

    assert data["tasks"]["total"] == 2
    assert data["tasks"]["completed"] == 1
    assert data["tasks"]["pending"] == 1
    assert data["tasks"]["overdue"] == 1
    assert data["tasks"]["priorityDistribution"] == {"high": 1, "medium": 1, "low": 0}

    assert data["todos"]["overdue"] == 1
    assert data["todos"]["priorityDistribution"] == {"high": 0, "medium": 1, "low": 1}

    assert data["recentActivity"] == {"projects": 2, "tasks": 2, "todos": 2}
    assert data["completionRate"] == {"tasks": 50, "todos": 50}


def test_completing_overdue_task_clears_it(client, alice, make_project, make_task):
    task = make_task(alice, make_project(alice)["id"], dueDate="2020-01-01")
    assert client.get("/api/stats", headers=alice).json()["data"]["tasks"]["overdue"] == 1

    client.patch(f"/api/tasks/{task['id']}/toggle", headers=alice)
    assert client.get("/api/stats", headers=alice).json()["data"]["tasks"]["overdue"] == 0
