from fastapi import status
from .base import StudioException


class AuthenticationError(StudioException):
    """Exception raised when authentication fails"""

    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"}
        )


class InvalidCredentialsError(AuthenticationError):
    """Exception raised when an email/password pair does not verify"""

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(detail=detail)


class AccountDisabledError(AuthenticationError):
    """Exception raised when a deactivated account tries to authenticate"""

    def __init__(self, detail: str = "Account is disabled"):
        super().__init__(detail=detail)


class AuthorizationError(StudioException):
    """Exception raised when user is not authorized"""

    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_403_FORBIDDEN
        )
