from fastapi import APIRouter, Depends, Response, status
from ...core.security import get_current_user, set_auth_cookie, clear_auth_cookie
from ...models import User
from ...schemas import UserRegister, UserLogin, AuthResponse, UserResponse, MessageResponse
from ...services import AuthService
from ..dependencies import get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Register a new user and start a session"""
    user, token = auth_service.register(user_data)
    set_auth_cookie(response, token)
    return {"user": user, "token": token}


@router.post("/login", response_model=AuthResponse)
def login(
    user_data: UserLogin,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service)
):
    """Login user and return JWT token"""
    user, token = auth_service.login(user_data)
    set_auth_cookie(response, token)
    return {"user": user, "token": token}


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    """Clear the session cookie"""
    clear_auth_cookie(response)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    """Get the authenticated user"""
    return {"user": current_user}
