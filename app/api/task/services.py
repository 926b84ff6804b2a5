import logging
from collections import defaultdict
from typing import Mapping

from sqlalchemy.orm import Session

from app.core import cascade, stats
from app.core.errors import NotFound
from app.core.filters import task_filters
from app.core.ownership import ensure_access
from app.db.models.todo import Project, Task, Todo
from app.db.store import EntityStore
from . import schemas

logger = logging.getLogger(__name__)


def _stats_by_task(db: Session, task_ids):
    grouped = defaultdict(list)
    if task_ids:
        for todo in EntityStore(db, Todo).find([Todo.task_id.in_(task_ids)]):
            grouped[todo.task_id].append(todo)
    return {tid: stats.task_stats(grouped[tid]) for tid in task_ids}


def _with_stats(db: Session, task: Task):
    return {**task.to_dict(), **_stats_by_task(db, [task.id])[task.id]}


def get_tasks(db: Session, params: Mapping[str, str], user_id: int):
    criteria, order_by = task_filters(params, user_id)
    tasks = EntityStore(db, Task).find(criteria, order_by)
    by_task = _stats_by_task(db, [t.id for t in tasks])
    return [{**t.to_dict(), **by_task[t.id]} for t in tasks]


def get_task(db: Session, task_id: int, user_id: int):
    task = ensure_access(EntityStore(db, Task).find_by_id(task_id), user_id, "Task")
    return _with_stats(db, task)


def create_task(db: Session, task: schemas.TaskCreate, user_id: int):
    project = EntityStore(db, Project).find_by_id(task.project)
    ensure_access(project, user_id, "Project", "add tasks to")

    values = task.model_dump(exclude={"project"})
    db_task = EntityStore(db, Task).insert({**values, "project_id": project.id, "owner_id": user_id})
    logger.info("Created task %s in project %s for user %s", db_task.id, project.id, user_id)
    return {**db_task.to_dict(), **stats.empty_task_stats()}


def update_task(db: Session, task_id: int, task: schemas.TaskUpdate, user_id: int):
    store = EntityStore(db, Task)
    ensure_access(store.find_by_id(task_id), user_id, "Task", "update")
    db_task = store.update_by_id(task_id, task.model_dump(exclude_unset=True))
    if db_task is None:
        raise NotFound("Task not found")
    logger.info("Updated task %s for user %s", task_id, user_id)
    return _with_stats(db, db_task)


def toggle_task(db: Session, task_id: int, user_id: int):
    store = EntityStore(db, Task)
    current = ensure_access(store.find_by_id(task_id), user_id, "Task", "update")
    db_task = store.update_by_id(task_id, {"completed": not current.completed})
    if db_task is None:
        raise NotFound("Task not found")
    logger.info("Toggled task %s to completed=%s", task_id, db_task.completed)
    return _with_stats(db, db_task)


def delete_task(db: Session, task_id: int, user_id: int):
    cascade.delete_task(db, task_id, user_id)
