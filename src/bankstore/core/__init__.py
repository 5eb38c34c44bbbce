"""Core utilities and shared functionality."""

from bankstore.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    DuplicateError,
    NotSupportedError,
    ConfigurationError,
    DocumentStoreError,
)

__all__ = [
    "AppError",
    "ValidationError",
    "NotFoundError",
    "DuplicateError",
    "NotSupportedError",
    "ConfigurationError",
    "DocumentStoreError",
]
