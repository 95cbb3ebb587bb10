from fastapi import status
from .base import StudioException


class ConflictError(StudioException):
    """Exception raised when a uniqueness constraint would be violated"""

    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST
        )
