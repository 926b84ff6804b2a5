import logging
from collections import defaultdict

from sqlalchemy.orm import Session

from app.core import cascade, stats
from app.core.errors import NotFound
from app.core.filters import project_filters
from app.core.ownership import ensure_access
from app.db.models.todo import Project, Task
from app.db.store import EntityStore
from . import schemas

logger = logging.getLogger(__name__)


def _stats_by_project(db: Session, project_ids):
    grouped = defaultdict(list)
    if project_ids:
        for task in EntityStore(db, Task).find([Task.project_id.in_(project_ids)]):
            grouped[task.project_id].append(task)
    return {pid: stats.project_stats(grouped[pid]) for pid in project_ids}


def _with_stats(db: Session, project: Project):
    return {**project.to_dict(), **_stats_by_project(db, [project.id])[project.id]}


def get_projects(db: Session, user_id: int):
    criteria, order_by = project_filters(user_id)
    projects = EntityStore(db, Project).find(criteria, order_by)
    by_project = _stats_by_project(db, [p.id for p in projects])
    return [{**p.to_dict(), **by_project[p.id]} for p in projects]


def get_project(db: Session, project_id: int, user_id: int):
    project = ensure_access(EntityStore(db, Project).find_by_id(project_id), user_id, "Project")
    return _with_stats(db, project)


def create_project(db: Session, project: schemas.ProjectCreate, user_id: int):
    db_project = EntityStore(db, Project).insert({**project.model_dump(), "owner_id": user_id})
    logger.info("Created project %s for user %s", db_project.id, user_id)
    return {**db_project.to_dict(), **stats.empty_project_stats()}


def update_project(db: Session, project_id: int, project: schemas.ProjectUpdate, user_id: int):
    store = EntityStore(db, Project)
    ensure_access(store.find_by_id(project_id), user_id, "Project", "update")
    db_project = store.update_by_id(project_id, project.model_dump(exclude_unset=True))
    if db_project is None:
        raise NotFound("Project not found")
    logger.info("Updated project %s for user %s", project_id, user_id)
    return _with_stats(db, db_project)


def delete_project(db: Session, project_id: int, user_id: int):
    cascade.delete_project(db, project_id, user_id)
