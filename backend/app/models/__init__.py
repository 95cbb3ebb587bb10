from .user import User, UserRole, SubscriptionTier
from .project import Project, ProjectStatus, DEFAULT_PROJECT_NAME

__all__ = [
    "User",
    "UserRole",
    "SubscriptionTier",
    "Project",
    "ProjectStatus",
    "DEFAULT_PROJECT_NAME",
]
