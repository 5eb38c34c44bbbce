"""Enumerations for domain models."""

from enum import Enum


class ResultType(str, Enum):
    """Outcome categories reported by every repository operation."""

    SUCCESS = "Success"
    NOT_FOUND = "NotFound"
    DUPLICATE = "Duplicate"
    INVALID_DATA = "InvalidData"
    DATA_STORE_ERROR = "DataStoreError"
    NOT_SUPPORTED = "NotSupported"
