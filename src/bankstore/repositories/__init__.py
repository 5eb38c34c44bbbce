"""Repository layer - data access abstractions and implementations."""

from bankstore.repositories.protocols import (
    AccountRepository,
    UserRepository,
)
from bankstore.repositories.document import (
    DocumentAccountRepository,
    DocumentUserRepository,
)

__all__ = [
    "AccountRepository",
    "UserRepository",
    "DocumentAccountRepository",
    "DocumentUserRepository",
]
