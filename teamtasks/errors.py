"""Error kinds raised by the request handlers.

Every error is an ``HTTPException`` so FastAPI stops the request where it is
raised; ``teamtasks.main`` renders all of them as ``{"message": ...}``.
"""
from typing import Optional

from fastapi import HTTPException, status


class AppError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(status_code=status_code or self.status_code, detail=message)

    @property
    def message(self) -> str:
        return self.detail


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthenticatedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid JWT Token"):
        super().__init__(message)
        self.headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN


class DomainConflictError(AppError):
    """The request is well formed but the current state forbids it."""

    status_code = status.HTTP_409_CONFLICT
