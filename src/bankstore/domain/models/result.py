"""Result envelope returned by every repository operation."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from bankstore.core.exceptions import (
    AppError,
    DuplicateError,
    NotFoundError,
    NotSupportedError,
    ValidationError,
    DocumentStoreError,
)
from bankstore.domain.models.enums import ResultType

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Success/failure wrapper used in place of raised exceptions.

    ``value`` is only meaningful when ``succeeded`` is True. ``message``
    carries optional human-readable detail for failures.
    """

    succeeded: bool
    result_type: ResultType
    value: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Build a successful result carrying ``value``."""
        return cls(succeeded=True, result_type=ResultType.SUCCESS, value=value)

    @classmethod
    def fail(cls, result_type: ResultType, message: Optional[str] = None) -> "Result[T]":
        """Build a failed result of the given type."""
        if result_type is ResultType.SUCCESS:
            raise ValueError("A failed result cannot have result type SUCCESS")
        return cls(succeeded=False, result_type=result_type, message=message)

    def unwrap(self) -> T:
        """
        Return the value, or raise the AppError matching the failure.

        For callers that prefer exceptions over inspecting the envelope.
        """
        if self.succeeded:
            return self.value

        message = self.message or self.result_type.value
        if self.result_type is ResultType.NOT_FOUND:
            raise NotFoundError("Document", message)
        if self.result_type is ResultType.DUPLICATE:
            raise DuplicateError(message)
        if self.result_type is ResultType.INVALID_DATA:
            raise ValidationError(message)
        if self.result_type is ResultType.NOT_SUPPORTED:
            raise NotSupportedError(message)
        if self.result_type is ResultType.DATA_STORE_ERROR:
            raise DocumentStoreError(message)
        raise AppError(message)
