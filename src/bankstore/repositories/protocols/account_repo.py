"""Account repository protocol."""

from typing import Protocol

from bankstore.domain.models import Account, Result


class AccountRepository(Protocol):
    """Interface for account data access."""

    def create_account(self, account: Account) -> Result[Account]:
        """Persist a new account."""
        ...

    def update_account(self, account: Account) -> Result[Account]:
        """Update an existing account."""
        ...

    def delete_account(self, account: Account) -> Result[Account]:
        """Delete an account."""
        ...

    def get_all_accounts(self) -> Result[list[Account]]:
        """List all accounts."""
        ...

    def get_all_by_user_name(self, user_name: str) -> Result[list[Account]]:
        """List accounts owned by a user name."""
        ...

    def get_by_account_number(self, number: int) -> Result[Account]:
        """Retrieve account by number."""
        ...

    def get_by_id(self, account_id: str) -> Result[Account]:
        """Retrieve account by ID."""
        ...
