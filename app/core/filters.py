"""
Translate listing query parameters into store predicates.

Parameters arrive as raw strings (the request's query string). Every result is
restricted to the requester's own rows before any optional filter is applied.
"""

from datetime import datetime
from typing import Mapping, Optional

from app.core.clock import to_naive_utc
from app.core.errors import ValidationFailure
from app.db.models.todo import Project, Task, Todo
from app.db.store import MAX_ID


def parse_completed(value: Optional[str]) -> Optional[bool]:
    """'true' / 'false' become booleans; anything else means no filter."""
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def parse_instant(value: str, param: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationFailure(f"Invalid date for {param}: {value}", field=param)
    return to_naive_utc(parsed)


def parse_id(value: str, param: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise ValidationFailure(f"Invalid {param} id: {value}", field=param)
    if not 0 < parsed <= MAX_ID:
        raise ValidationFailure(f"Invalid {param} id: {value}", field=param)
    return parsed


def _range(column, params, lower: str, upper: str) -> list:
    criteria = []
    if params.get(lower):
        criteria.append(column >= parse_instant(params[lower], lower))
    if params.get(upper):
        criteria.append(column <= parse_instant(params[upper], upper))
    return criteria


def _common(model, params: Mapping[str, str], requester_id) -> list:
    criteria = [model.owner_id == requester_id]
    criteria += _range(model.due_date, params, "startDate", "endDate")

    completed = parse_completed(params.get("completed"))
    if completed is not None:
        criteria.append(model.completed == completed)

    if params.get("priority"):
        criteria.append(model.priority == params["priority"])
    return criteria


def task_filters(params: Mapping[str, str], requester_id):
    """Predicates and ordering for a task listing.

    Supports project, startDate/endDate (on dueDate), completed and priority.
    """
    criteria = _common(Task, params, requester_id)
    if params.get("project"):
        criteria.append(Task.project_id == parse_id(params["project"], "project"))
    return criteria, (Task.due_date.asc(), Task.created_at.desc(), Task.id.desc())


def todo_filters(params: Mapping[str, str], requester_id):
    """Predicates and ordering for a todo listing.

    Same as tasks with ``task`` in place of ``project``, plus a createdFrom/createdTo
    range on createdAt that is independent of the dueDate range.
    """
    criteria = _common(Todo, params, requester_id)
    if params.get("task"):
        criteria.append(Todo.task_id == parse_id(params["task"], "task"))
    criteria += _range(Todo.created_at, params, "createdFrom", "createdTo")
    return criteria, (Todo.due_date.asc(), Todo.created_at.desc(), Todo.id.desc())


def project_filters(requester_id):
    return [Project.owner_id == requester_id], (Project.created_at.desc(), Project.id.desc())
