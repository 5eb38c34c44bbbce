"""Document store repository implementations."""

from bankstore.repositories.document.account_repo import DocumentAccountRepository
from bankstore.repositories.document.user_repo import DocumentUserRepository

__all__ = [
    "DocumentAccountRepository",
    "DocumentUserRepository",
]
