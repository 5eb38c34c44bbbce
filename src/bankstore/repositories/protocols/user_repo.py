"""User repository protocol."""

from typing import Protocol

from bankstore.domain.models import BankUser, Result


class UserRepository(Protocol):
    """Interface for bank user data access."""

    def create_user(self, user: BankUser) -> Result[BankUser]:
        """Persist a new user."""
        ...

    def update_user(self, updated_user: BankUser) -> Result[BankUser]:
        """Replace a user, keeping user names unique."""
        ...

    def rename_user(self, old_user_name: str, updated_user: BankUser) -> Result[BankUser]:
        """Move a user from ``old_user_name`` to ``updated_user.user_name``."""
        ...

    def delete_user(self, user: BankUser) -> Result[BankUser]:
        """Delete a user."""
        ...

    def get_all_users(self) -> Result[list[BankUser]]:
        """List all users."""
        ...

    def get_all_by_user_name(self, user_name: str) -> Result[list[BankUser]]:
        ...

    def get_all_by_first_name(self, first_name: str) -> Result[list[BankUser]]:
        ...

    def get_all_by_last_name(self, last_name: str) -> Result[list[BankUser]]:
        ...

    def get_all_by_name(self, first_name: str, last_name: str) -> Result[list[BankUser]]:
        ...

    def get_by_user_name(self, user_name: str) -> Result[BankUser]:
        """Retrieve user by user name."""
        ...

    def get_by_id(self, user_id: str) -> Result[BankUser]:
        """Retrieve user by ID."""
        ...
