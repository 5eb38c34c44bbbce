"""Domain models package."""

from bankstore.domain.models.enums import ResultType
from bankstore.domain.models.account import Account
from bankstore.domain.models.user import BankUser
from bankstore.domain.models.result import Result

__all__ = [
    "ResultType",
    "Account",
    "BankUser",
    "Result",
]
