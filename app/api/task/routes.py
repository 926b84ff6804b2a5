from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.api.schemas import DeletedResponse
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.get("", response_model=schemas.TaskListResponse)
def read_tasks(
    project: Optional[str] = None,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    completed: Optional[str] = None,
    priority: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    params = {
        "project": project,
        "startDate": start_date,
        "endDate": end_date,
        "completed": completed,
        "priority": priority,
    }
    tasks = services.get_tasks(db, params, current_user.id)
    return {"count": len(tasks), "data": tasks}

@router.post("", response_model=schemas.TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task: schemas.TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.create_task(db, task, current_user.id)}

@router.get("/{task_id}", response_model=schemas.TaskResponse)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.get_task(db, task_id, current_user.id)}

@router.put("/{task_id}", response_model=schemas.TaskResponse)
def update_task(
    task_id: int,
    task: schemas.TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.update_task(db, task_id, task, current_user.id)}

@router.patch("/{task_id}/toggle", response_model=schemas.TaskResponse)
def toggle_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.toggle_task(db, task_id, current_user.id)}

@router.delete("/{task_id}", response_model=DeletedResponse)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_task(db, task_id, current_user.id)
    return {"data": {}}
