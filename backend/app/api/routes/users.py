from fastapi import APIRouter, Depends
from ...core.security import get_current_user, get_current_admin
from ...models import User
from ...schemas import UserResponse, UserListResponse, UserUpdate, PasswordChange, MessageResponse
from ...services import ProfileService
from ..dependencies import get_profile_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
def list_users(
    current_user: User = Depends(get_current_admin),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """List all users (admin only)"""
    return {"users": profile_service.list_users(current_user)}


@router.patch("/me", response_model=UserResponse)
def update_profile(
    profile_data: UserUpdate,
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """Update the current user's profile"""
    return {"user": profile_service.update_profile(current_user, profile_data)}


@router.post("/me/password", response_model=MessageResponse)
def change_password(
    password_data: PasswordChange,
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """Change the current user's password"""
    profile_service.change_password(current_user, password_data)
    return {"message": "Password updated successfully"}


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """Get a user by ID (self or admin)"""
    return {"user": profile_service.get_user(current_user, user_id)}
