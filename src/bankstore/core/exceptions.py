"""Application-level exceptions."""

from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class DuplicateError(AppError):
    """Raised when a uniqueness constraint is violated."""

    def __init__(self, message: str):
        super().__init__(message, code="DUPLICATE")


class NotSupportedError(AppError):
    """Raised when an operation is deliberately not implemented."""

    def __init__(self, operation: str):
        super().__init__(f"Operation not supported: {operation}", code="NOT_SUPPORTED")


class ConfigurationError(AppError):
    """Raised when the store cannot be opened with the current settings."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")


class DocumentStoreError(AppError):
    """
    Raised by a document container when the store itself fails.

    Covers driver and network faults and malformed documents. Expected
    outcomes such as a missing item or an id conflict are reported as
    status codes instead.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message, code="DATA_STORE_ERROR")
