from typing import Optional
from fastapi import APIRouter, Depends, status
from ...core.security import get_current_user, get_optional_user
from ...models import User
from ...schemas import (
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectDetailResponse,
    ProjectListResponse,
    PublicProjectListResponse,
    MessageResponse,
)
from ...services import ProjectService
from ..dependencies import get_project_service

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=ProjectListResponse)
def list_projects(
    current_user: User = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """List all projects for the current user"""
    return {"projects": project_service.list_projects(current_user.id)}


@router.get("/public", response_model=PublicProjectListResponse)
def list_public_projects(
    current_user: Optional[User] = Depends(get_optional_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """List the most viewed public projects"""
    return {"projects": project_service.list_public_projects()}


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    project_data: ProjectCreate,
    current_user: User = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """Create a new project"""
    return {"project": project_service.create_project(current_user.id, project_data)}


@router.get("/{project_id}", response_model=ProjectDetailResponse)
def get_project(
    project_id: int,
    current_user: Optional[User] = Depends(get_optional_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """Get a project; public ones are readable without signing in"""
    viewer_id = current_user.id if current_user else None
    return {"project": project_service.get_project(project_id, viewer_id)}


@router.patch("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    current_user: User = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """Update a project"""
    return {"project": project_service.update_project(current_user.id, project_id, project_data)}


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(
    project_id: int,
    current_user: User = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """Permanently delete a project"""
    project_service.delete_project(current_user.id, project_id)
    return {"message": "Project deleted successfully"}
