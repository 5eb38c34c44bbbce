"""Domain layer - entities and the result envelope."""

from bankstore.domain.models import (
    Account,
    BankUser,
    Result,
    ResultType,
)

__all__ = [
    "Account",
    "BankUser",
    "Result",
    "ResultType",
]
