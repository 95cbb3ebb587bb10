"""
Dependency Injection Container for API Routes

Centralizes service construction so routes receive ready-made services
bound to the request's database session.
"""
from fastapi import Depends
from sqlalchemy.orm import Session
from ..core.database import get_db
from ..services import AuthService, ProjectService, ProfileService


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """
    Get AuthService instance

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        AuthService instance
    """
    return AuthService(db)


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    """
    Get ProjectService instance

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        ProjectService instance
    """
    return ProjectService(db)


def get_profile_service(db: Session = Depends(get_db)) -> ProfileService:
    """
    Get ProfileService instance

    Args:
        db: Database session (injected by FastAPI)

    Returns:
        ProfileService instance
    """
    return ProfileService(db)
