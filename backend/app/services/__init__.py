from .auth_service import AuthService
from .project_service import ProjectService
from .profile_service import ProfileService

__all__ = [
    "AuthService",
    "ProjectService",
    "ProfileService",
]
