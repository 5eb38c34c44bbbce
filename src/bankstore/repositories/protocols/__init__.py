"""Repository protocol definitions (interfaces)."""

from bankstore.repositories.protocols.account_repo import AccountRepository
from bankstore.repositories.protocols.user_repo import UserRepository

__all__ = [
    "AccountRepository",
    "UserRepository",
]
