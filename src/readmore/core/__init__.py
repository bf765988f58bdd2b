"""Core utilities and shared functionality."""

from readmore.core.exceptions import (
    AppError,
    NotFoundError,
    StorageError,
    UniqueConstraintViolation,
)

__all__ = [
    "AppError",
    "NotFoundError",
    "StorageError",
    "UniqueConstraintViolation",
]
