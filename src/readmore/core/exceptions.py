"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class StorageError(AppError):
    """Raised when the underlying store rejects an operation."""

    def __init__(self, message: str, code: str = "STORAGE_ERROR"):
        super().__init__(message, code=code)


class UniqueConstraintViolation(StorageError):
    """Raised when a write collides with a unique constraint in the store."""

    def __init__(self, field: str, value: Optional[str] = None):
        self.field = field
        self.value = value
        detail = f"{field} already exists" if value is None else f"{field} already exists: {value}"
        super().__init__(detail, code="UNIQUE_VIOLATION")
