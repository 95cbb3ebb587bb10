from .base import BaseRepository
from .user_repository import UserRepository
from .project_repository import ProjectRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ProjectRepository",
]
