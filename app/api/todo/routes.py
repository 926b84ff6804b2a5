from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.api.schemas import DeletedResponse
from app.api.todo import schemas, services
from app.core.security import get_current_user
from app.db.models.user import User
from app.db.session import get_db

router = APIRouter()

@router.get("", response_model=schemas.ToDoListResponse)
def list_todos(
    task: Optional[str] = None,
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    created_from: Optional[str] = Query(None, alias="createdFrom"),
    created_to: Optional[str] = Query(None, alias="createdTo"),
    completed: Optional[str] = None,
    priority: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    params = {
        "task": task,
        "startDate": start_date,
        "endDate": end_date,
        "createdFrom": created_from,
        "createdTo": created_to,
        "completed": completed,
        "priority": priority,
    }
    todos = services.get_todos(db, params, current_user.id)
    return {"count": len(todos), "data": todos}

@router.post("", response_model=schemas.ToDoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo: schemas.ToDoCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.create_todo(db, todo, current_user.id)}

@router.get("/{todo_id}", response_model=schemas.ToDoResponse)
def get_todo(
    todo_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.get_todo(db, todo_id, current_user.id)}

@router.put("/{todo_id}", response_model=schemas.ToDoResponse)
def update_todo(
    todo_id: int,
    todo: schemas.ToDoUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.update_todo(db, todo_id, todo, current_user.id)}

@router.patch("/{todo_id}/toggle", response_model=schemas.ToDoResponse)
def toggle_todo(
    todo_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.toggle_todo(db, todo_id, current_user.id)}

@router.delete("/{todo_id}", response_model=DeletedResponse)
def delete_todo(
    todo_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_todo(db, todo_id, current_user.id)
    return {"data": {}}
