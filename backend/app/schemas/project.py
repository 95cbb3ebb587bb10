from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any
from datetime import datetime
from ..models.project import ProjectStatus


def _strip(value):
    return value.strip() if isinstance(value, str) else value


class ProjectOwner(BaseModel):
    """Minimal public view of a project's owner"""
    id: int
    name: Optional[str] = None
    avatar_url: Optional[str] = None

    class Config:
        from_attributes = True


class ProjectBase(BaseModel):
    name: str
    description: Optional[str] = None
    thumbnail_url: Optional[str] = None
    data: Dict[str, Any] = {}


class ProjectCreate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        return _strip(value)


class ProjectUpdate(BaseModel):
    """Partial update; only fields present in the payload are applied"""
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    status: Optional[ProjectStatus] = None
    is_public: Optional[bool] = None
    thumbnail_url: Optional[str] = Field(default=None, max_length=500)
    duration_seconds: Optional[int] = Field(default=None, ge=0)

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, value):
        return _strip(value)

    @field_validator("name", "data", "status", "is_public")
    @classmethod
    def reject_null(cls, value, info):
        # Only runs for values present in the payload
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class Project(ProjectBase):
    id: int
    user_id: int
    status: ProjectStatus
    is_public: bool
    views_count: int
    tokens_used: int
    duration_seconds: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProjectWithOwner(Project):
    owner: Optional[ProjectOwner] = None


class ProjectResponse(BaseModel):
    project: Project


class ProjectDetailResponse(BaseModel):
    project: ProjectWithOwner


class ProjectListResponse(BaseModel):
    projects: List[Project]


class PublicProjectListResponse(BaseModel):
    projects: List[ProjectWithOwner]
