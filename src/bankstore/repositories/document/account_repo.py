"""Document store implementation of AccountRepository."""

import logging
from http import HTTPStatus
from typing import Any, Optional

from bankstore.domain.models import Account, Result, ResultType
from bankstore.repositories.document.base import DocumentRepository, store_faults_as_result
from bankstore.store.query import QuerySpec

logger = logging.getLogger(__name__)


class DocumentAccountRepository(DocumentRepository[Account]):
    """
    Account documents partitioned by account id.

    Create, read and delete all address the item by (id, id).
    """

    entity_name = "account"

    def _to_entity(self, document: dict[str, Any]) -> Account:
        return Account.from_document(document)

    @store_faults_as_result
    def create_account(self, account: Account) -> Result[Account]:
        """Persist a new account."""
        invalid = self._validate(account)
        if invalid is not None:
            return invalid

        response = self._container.create_item(account.to_document(), account.partition_key)

        if response.status_code == HTTPStatus.CREATED:
            logger.info("Created account %s", account.id)
            created = self._load(response.resource) if response.resource else account
            return Result.ok(created)
        if response.status_code == HTTPStatus.CONFLICT:
            return Result.fail(
                ResultType.DUPLICATE,
                f"An account with id {account.id} already exists",
            )
        return self._unexpected("create", response)

    def update_account(self, account: Account) -> Result[Account]:
        """Account updates are not offered by this repository."""
        logger.debug("Rejected update for account %s", getattr(account, "id", None))
        return Result.fail(ResultType.NOT_SUPPORTED, "Updating accounts is not supported")

    @store_faults_as_result
    def delete_account(self, account: Account) -> Result[Account]:
        """Delete an account."""
        invalid = self._validate(account)
        if invalid is not None:
            return invalid

        response = self._container.delete_item(account.id, account.partition_key)

        if response.status_code == HTTPStatus.NOT_FOUND:
            return Result.fail(ResultType.NOT_FOUND, f"Account {account.id} not found")
        if response.status_code != HTTPStatus.NO_CONTENT:
            return self._unexpected("delete", response)
        logger.info("Deleted account %s", account.id)
        return Result.ok(account)

    @store_faults_as_result
    def get_all_accounts(self) -> Result[list[Account]]:
        """List all accounts. The whole container is read into memory."""
        return self._collect_all(QuerySpec())

    @store_faults_as_result
    def get_all_by_user_name(self, user_name: str) -> Result[list[Account]]:
        """List accounts owned by a user name."""
        if self._missing_text(user_name):
            return self._invalid("A user name is required")
        return self._collect_all(QuerySpec({"UserName": user_name}))

    @store_faults_as_result
    def get_by_account_number(self, number: int) -> Result[Account]:
        """
        Retrieve account by number.

        Numbers are not unique by construction, so two matches are reported
        as a Duplicate rather than picking one.
        """
        if isinstance(number, bool) or not isinstance(number, int):
            return self._invalid("An integer account number is required")
        return self._find_unique(QuerySpec({"Number": number}))

    @store_faults_as_result
    def get_by_id(self, account_id: str) -> Result[Account]:
        """Retrieve account by ID with a point read on its own partition."""
        if self._missing_text(account_id):
            return self._invalid("An account id is required")

        response = self._container.read_item(account_id, account_id)

        if response.status_code == HTTPStatus.NOT_FOUND:
            return Result.fail(ResultType.NOT_FOUND, f"Account {account_id} not found")
        if response.status_code != HTTPStatus.OK:
            return self._unexpected("read", response)
        return Result.ok(self._load(response.resource))

    def _validate(self, account: Optional[Account]) -> Optional[Result]:
        if account is None:
            return self._invalid("An account is required")
        if not isinstance(account, Account):
            return self._invalid(f"Expected an Account, got {type(account).__name__}")
        if self._missing_text(account.id):
            return self._invalid("Account id is required")
        return None
