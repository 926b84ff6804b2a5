"""
Read-time statistics over child entities.

Nothing here is persisted: callers load the children and compute these on every
read so the numbers never go stale.
"""

from datetime import timedelta

from app.core.clock import utcnow

RECENT_WINDOW = timedelta(days=7)

PRIORITIES = ("high", "medium", "low")


def completion_percentage(completed: int, total: int) -> int:
    """round(100 * completed / total), half rounding up; 0 when there is nothing to complete."""
    if total <= 0:
        return 0
    # integer form of floor(100 * completed / total + 0.5)
    return (200 * completed + total) // (2 * total)


def project_stats(tasks) -> dict:
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    return {
        "total_tasks": total,
        "completed_tasks": completed,
        "completion_percentage": completion_percentage(completed, total),
    }


def task_stats(todos) -> dict:
    return {
        "total_todos": len(todos),
        "completed_todos": sum(1 for t in todos if t.completed),
        "total_estimated_time": sum((t.estimated_time or 0) for t in todos),
    }


def empty_project_stats() -> dict:
    return project_stats([])


def empty_task_stats() -> dict:
    return task_stats([])


def is_overdue(item, now) -> bool:
    return not item.completed and item.due_date < now


def is_recent(item, since) -> bool:
    return item.created_at >= since


def _priority_distribution(items) -> dict:
    dist = {p: 0 for p in PRIORITIES}
    for item in items:
        if item.priority in dist:
            dist[item.priority] += 1
    return dist


def _completion_block(items, now) -> dict:
    completed = sum(1 for i in items if i.completed)
    return {
        "total": len(items),
        "completed": completed,
        "pending": len(items) - completed,
        "overdue": sum(1 for i in items if is_overdue(i, now)),
        "priority_distribution": _priority_distribution(items),
    }


def dashboard_stats(projects, tasks, todos, now=None) -> dict:
    """Per-user dashboard numbers across all projects, tasks and todos.

    ``now`` defaults to the current wall-clock time; the recent-activity window
    is the 7 days before it, compared as instants with an inclusive lower bound.
    """
    now = now or utcnow()
    since = now - RECENT_WINDOW

    status_distribution = {"active": 0, "completed": 0, "on_hold": 0}
    for project in projects:
        key = project.status.replace("-", "_")
        if key in status_distribution:
            status_distribution[key] += 1

    task_block = _completion_block(tasks, now)
    todo_block = _completion_block(todos, now)

    return {
        "projects": {
            "total": len(projects),
            "active": status_distribution["active"],
            "completed": status_distribution["completed"],
            "status_distribution": status_distribution,
        },
        "tasks": task_block,
        "todos": todo_block,
        "recent_activity": {
            "projects": sum(1 for p in projects if is_recent(p, since)),
            "tasks": sum(1 for t in tasks if is_recent(t, since)),
            "todos": sum(1 for t in todos if is_recent(t, since)),
        },
        "completion_rate": {
            "tasks": completion_percentage(task_block["completed"], task_block["total"]),
            "todos": completion_percentage(todo_block["completed"], todo_block["total"]),
        },
    }
