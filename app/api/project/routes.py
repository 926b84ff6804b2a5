from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.api.schemas import DeletedResponse
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.get("", response_model=schemas.ProjectListResponse)
def read_projects(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    projects = services.get_projects(db, current_user.id)
    return {"count": len(projects), "data": projects}

@router.post("", response_model=schemas.ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    project: schemas.ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.create_project(db, project, current_user.id)}

@router.get("/{project_id}", response_model=schemas.ProjectResponse)
def read_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.get_project(db, project_id, current_user.id)}

@router.put("/{project_id}", response_model=schemas.ProjectResponse)
def update_project(
    project_id: int,
    project: schemas.ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {"data": services.update_project(db, project_id, project, current_user.id)}

@router.delete("/{project_id}", response_model=DeletedResponse)
def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.delete_project(db, project_id, current_user.id)
    return {"data": {}}
