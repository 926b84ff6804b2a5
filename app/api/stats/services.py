from sqlalchemy.orm import Session

from app.core import stats
from app.core.clock import utcnow
from app.db.models.todo import Project, Task, Todo
from app.db.store import EntityStore


def get_dashboard(db: Session, user_id: int):
    projects = EntityStore(db, Project).find([Project.owner_id == user_id])
    tasks = EntityStore(db, Task).find([Task.owner_id == user_id])
    todos = EntityStore(db, Todo).find([Todo.owner_id == user_id])
    return stats.dashboard_stats(projects, tasks, todos, now=utcnow())
