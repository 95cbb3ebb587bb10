from pydantic import BaseModel, AnyHttpUrl, Field, TypeAdapter, ValidationError, field_validator
from typing import Optional, List
from datetime import datetime
from ..models.user import UserRole, SubscriptionTier

_http_url = TypeAdapter(AnyHttpUrl)


class UserBase(BaseModel):
    email: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None


class User(UserBase):
    """Outward representation of an account; never carries the password hash"""
    id: int
    role: UserRole
    subscription_tier: SubscriptionTier
    tokens_used: int
    tokens_limit: int
    is_active: bool
    email_verified: bool
    last_login_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    avatar_url: Optional[str] = Field(default=None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("avatar_url")
    @classmethod
    def check_avatar_url(cls, value):
        # Stored exactly as sent; parsing would normalize it
        if value is not None:
            try:
                _http_url.validate_python(value)
            except ValidationError:
                raise ValueError("avatar_url must be a valid http(s) URL")
        return value


class PasswordChange(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)


class UserResponse(BaseModel):
    user: User


class UserListResponse(BaseModel):
    users: List[User]
