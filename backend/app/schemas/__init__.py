from .auth import UserRegister, UserLogin, AuthResponse
from .user import User, UserBase, UserUpdate, PasswordChange, UserResponse, UserListResponse
from .project import (
    Project,
    ProjectBase,
    ProjectOwner,
    ProjectWithOwner,
    ProjectCreate,
    ProjectUpdate,
    ProjectResponse,
    ProjectDetailResponse,
    ProjectListResponse,
    PublicProjectListResponse,
)
from .common import MessageResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "User",
    "UserBase",
    "UserUpdate",
    "PasswordChange",
    "UserResponse",
    "UserListResponse",
    "Project",
    "ProjectBase",
    "ProjectOwner",
    "ProjectWithOwner",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "ProjectDetailResponse",
    "ProjectListResponse",
    "PublicProjectListResponse",
    "MessageResponse",
]
