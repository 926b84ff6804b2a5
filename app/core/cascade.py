"""
Cascade deletes for projects and tasks.

Children are removed before their parent (todos, then tasks, then the project)
and every step runs in the request's session with a single commit at the end,
so a failing step rolls the whole cascade back instead of leaving a partial
delete behind.
"""

import logging

from sqlalchemy.orm import Session

from app.core.ownership import ensure_access
from app.db.models.todo import Project, Task, Todo
from app.db.store import EntityStore

logger = logging.getLogger(__name__)


def delete_project(db: Session, project_id: int, user_id: int):
    projects = EntityStore(db, Project)
    tasks = EntityStore(db, Task)
    todos = EntityStore(db, Todo)

    ensure_access(projects.find_by_id(project_id), user_id, "Project", "delete")

    task_ids = [t.id for t in tasks.find([Task.project_id == project_id])]
    removed_todos = 0
    if task_ids:
        removed_todos = todos.delete_many([Todo.task_id.in_(task_ids)], commit=False)
    removed_tasks = tasks.delete_many([Task.project_id == project_id], commit=False)
    projects.delete_by_id(project_id, commit=False)
    projects.commit()

    logger.info(
        "Deleted project %s for user %s (%d tasks, %d todos)",
        project_id, user_id, removed_tasks, removed_todos,
    )


def delete_task(db: Session, task_id: int, user_id: int):
    tasks = EntityStore(db, Task)
    todos = EntityStore(db, Todo)

    ensure_access(tasks.find_by_id(task_id), user_id, "Task", "delete")

    removed_todos = todos.delete_many([Todo.task_id == task_id], commit=False)
    tasks.delete_by_id(task_id, commit=False)
    tasks.commit()

    logger.info("Deleted task %s for user %s (%d todos)", task_id, user_id, removed_todos)
