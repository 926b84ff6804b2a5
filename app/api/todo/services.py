import logging
from typing import Mapping

from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.core.filters import todo_filters
from app.core.ownership import ensure_access
from app.db.models.todo import Task, Todo
from app.db.store import EntityStore
from app.api.todo import schemas

logger = logging.getLogger(__name__)


def get_todos(db: Session, params: Mapping[str, str], user_id: int):
    criteria, order_by = todo_filters(params, user_id)
    return [t.to_dict() for t in EntityStore(db, Todo).find(criteria, order_by)]


def get_todo(db: Session, todo_id: int, user_id: int):
    return ensure_access(EntityStore(db, Todo).find_by_id(todo_id), user_id, "Todo").to_dict()


def create_todo(db: Session, todo: schemas.ToDoCreate, user_id: int):
    task = EntityStore(db, Task).find_by_id(todo.task)
    ensure_access(task, user_id, "Task", "add todos to")

    values = todo.model_dump(exclude={"task"})
    db_todo = EntityStore(db, Todo).insert({**values, "task_id": task.id, "owner_id": user_id})
    logger.info("Created todo %s in task %s for user %s", db_todo.id, task.id, user_id)
    return db_todo.to_dict()


def update_todo(db: Session, todo_id: int, todo: schemas.ToDoUpdate, user_id: int):
    store = EntityStore(db, Todo)
    ensure_access(store.find_by_id(todo_id), user_id, "Todo", "update")
    db_todo = store.update_by_id(todo_id, todo.model_dump(exclude_unset=True))
    if db_todo is None:
        raise NotFound("Todo not found")
    logger.info("Updated todo %s for user %s", todo_id, user_id)
    return db_todo.to_dict()


def toggle_todo(db: Session, todo_id: int, user_id: int):
    store = EntityStore(db, Todo)
    current = ensure_access(store.find_by_id(todo_id), user_id, "Todo", "update")
    db_todo = store.update_by_id(todo_id, {"completed": not current.completed})
    if db_todo is None:
        raise NotFound("Todo not found")
    logger.info("Toggled todo %s to completed=%s", todo_id, db_todo.completed)
    return db_todo.to_dict()


def delete_todo(db: Session, todo_id: int, user_id: int):
    store = EntityStore(db, Todo)
    ensure_access(store.find_by_id(todo_id), user_id, "Todo", "delete")
    store.delete_by_id(todo_id)
    logger.info("Deleted todo %s for user %s", todo_id, user_id)
