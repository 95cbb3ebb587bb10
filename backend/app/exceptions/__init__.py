from .base import StudioException
from .not_found import NotFoundError
from .validation import ConflictError
from .auth import (
    AuthenticationError,
    InvalidCredentialsError,
    AccountDisabledError,
    AuthorizationError,
)

__all__ = [
    "StudioException",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "InvalidCredentialsError",
    "AccountDisabledError",
    "AuthorizationError",
]
