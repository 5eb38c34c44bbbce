"""Document store implementation of UserRepository."""

import logging
from http import HTTPStatus
from typing import Any, Optional

from bankstore.domain.models import BankUser, Result, ResultType
from bankstore.repositories.document.base import DocumentRepository, store_faults_as_result
from bankstore.store.query import QuerySpec

logger = logging.getLogger(__name__)


class DocumentUserRepository(DocumentRepository[BankUser]):
    """
    Bank user documents partitioned by user name.

    Items are addressed by (id, user_name). A user name is expected to
    belong to a single user id; the container's unique key policy enforces
    it on create and ``update_user`` / ``rename_user`` check it before
    writing.
    """

    entity_name = "user"

    def _to_entity(self, document: dict[str, Any]) -> BankUser:
        return BankUser.from_document(document)

    @store_faults_as_result
    def create_user(self, user: BankUser) -> Result[BankUser]:
        """Persist a new user."""
        invalid = self._validate(user)
        if invalid is not None:
            return invalid

        response = self._container.create_item(user.to_document(), user.partition_key)

        if response.status_code == HTTPStatus.CREATED:
            logger.info("Created user %s", user.id)
            created = self._load(response.resource) if response.resource else user
            return Result.ok(created)
        if response.status_code == HTTPStatus.CONFLICT:
            return Result.fail(
                ResultType.DUPLICATE,
                f"A user with id {user.id} or username {user.user_name} already exists",
            )
        return self._unexpected("create", response)

    @store_faults_as_result
    def update_user(self, updated_user: BankUser) -> Result[BankUser]:
        """
        Replace a user in place.

        The user name must not belong to a different user id. The user name
        is also the partition key, so this cannot move a user to a new user
        name; that is ``rename_user``. Returns the user as given.
        """
        invalid = self._validate(updated_user)
        if invalid is not None:
            return invalid

        taken = self._user_name_taken(updated_user.user_name, updated_user.id)
        if taken is not None:
            return taken

        response = self._container.replace_item(
            updated_user.id,
            updated_user.to_document(),
            updated_user.partition_key,
        )

        if response.status_code == HTTPStatus.NOT_FOUND:
            return Result.fail(
                ResultType.NOT_FOUND,
                f"User {updated_user.id} not found under username {updated_user.user_name}",
            )
        if response.status_code == HTTPStatus.CONFLICT:
            return Result.fail(
                ResultType.DUPLICATE,
                f"A user with username {updated_user.user_name} already exists",
            )
        if response.status_code != HTTPStatus.OK:
            return self._unexpected("replace", response)

        logger.info("Updated user %s", updated_user.id)
        return Result.ok(updated_user)

    @store_faults_as_result
    def rename_user(self, old_user_name: str, updated_user: BankUser) -> Result[BankUser]:
        """
        Move a user from ``old_user_name`` to ``updated_user.user_name``.

        The document is written to the new partition, then removed from the
        old one. The two writes are independent; if the delete fails the
        copy under the new user name is kept and DataStoreError is returned.
        """
        if self._missing_text(old_user_name):
            return self._invalid("The previous user name is required")
        invalid = self._validate(updated_user)
        if invalid is not None:
            return invalid

        if old_user_name == updated_user.user_name:
            return self.update_user(updated_user)

        current = self._container.read_item(updated_user.id, old_user_name)
        if current.status_code == HTTPStatus.NOT_FOUND:
            return Result.fail(
                ResultType.NOT_FOUND,
                f"User {updated_user.id} not found under username {old_user_name}",
            )
        if current.status_code != HTTPStatus.OK:
            return self._unexpected("read", current)

        taken = self._user_name_taken(updated_user.user_name, updated_user.id)
        if taken is not None:
            return taken

        created = self._container.create_item(
            updated_user.to_document(),
            updated_user.partition_key,
        )
        if created.status_code == HTTPStatus.CONFLICT:
            return Result.fail(
                ResultType.DUPLICATE,
                f"A user with username {updated_user.user_name} already exists",
            )
        if created.status_code != HTTPStatus.CREATED:
            return self._unexpected("create", created)

        removed = self._container.delete_item(updated_user.id, old_user_name)
        if removed.status_code not in (HTTPStatus.NO_CONTENT, HTTPStatus.NOT_FOUND):
            logger.error(
                "User %s copied to %s but not removed from %s (status %s)",
                updated_user.id,
                updated_user.user_name,
                old_user_name,
                removed.status_code,
            )
            return Result.fail(
                ResultType.DATA_STORE_ERROR,
                f"User {updated_user.id} was copied to {updated_user.user_name} "
                f"but could not be removed from {old_user_name}",
            )

        logger.info(
            "Renamed user %s from %s to %s",
            updated_user.id,
            old_user_name,
            updated_user.user_name,
        )
        return Result.ok(updated_user)

    @store_faults_as_result
    def delete_user(self, user: BankUser) -> Result[BankUser]:
        """Delete a user."""
        invalid = self._validate(user)
        if invalid is not None:
            return invalid

        response = self._container.delete_item(user.id, user.partition_key)

        if response.status_code == HTTPStatus.NOT_FOUND:
            return Result.fail(ResultType.NOT_FOUND, f"User {user.id} not found")
        if response.status_code != HTTPStatus.NO_CONTENT:
            return self._unexpected("delete", response)
        logger.info("Deleted user %s", user.id)
        return Result.ok(user)

    @store_faults_as_result
    def get_all_users(self) -> Result[list[BankUser]]:
        return self._collect_all(QuerySpec())

    @store_faults_as_result
    def get_all_by_user_name(self, user_name: str) -> Result[list[BankUser]]:
        if self._missing_text(user_name):
            return self._invalid("A user name is required")
        return self._collect_all(QuerySpec({"UserName": user_name}, partition_key=user_name))

    @store_faults_as_result
    def get_all_by_first_name(self, first_name: str) -> Result[list[BankUser]]:
        if self._missing_text(first_name):
            return self._invalid("A first name is required")
        return self._collect_all(QuerySpec({"FirstName": first_name}))

    @store_faults_as_result
    def get_all_by_last_name(self, last_name: str) -> Result[list[BankUser]]:
        if self._missing_text(last_name):
            return self._invalid("A last name is required")
        return self._collect_all(QuerySpec({"LastName": last_name}))

    @store_faults_as_result
    def get_all_by_name(self, first_name: str, last_name: str) -> Result[list[BankUser]]:
        if self._missing_text(first_name) or self._missing_text(last_name):
            return self._invalid("Both first and last name are required")
        return self._collect_all(QuerySpec({"FirstName": first_name, "LastName": last_name}))

    @store_faults_as_result
    def get_by_user_name(self, user_name: str) -> Result[BankUser]:
        """Retrieve the user holding ``user_name``."""
        if self._missing_text(user_name):
            return self._invalid("A user name is required")
        return self._find_unique(QuerySpec({"UserName": user_name}, partition_key=user_name))

    @store_faults_as_result
    def get_by_id(self, user_id: str) -> Result[BankUser]:
        """Retrieve user by ID. Queries across partitions."""
        if self._missing_text(user_id):
            return self._invalid("A user id is required")
        return self._find_unique(QuerySpec({"id": user_id}))

    def _user_name_taken(self, user_name: str, user_id: str) -> Optional[Result]:
        owners = self._query_all(QuerySpec({"UserName": user_name}, partition_key=user_name))
        if any(owner.id != user_id for owner in owners):
            logger.info("Username %s is already held by another user", user_name)
            return Result.fail(
                ResultType.DUPLICATE,
                f"A user with username {user_name} already exists",
            )
        return None

    def _validate(self, user: Optional[BankUser]) -> Optional[Result]:
        if user is None:
            return self._invalid("A user is required")
        if not isinstance(user, BankUser):
            return self._invalid(f"Expected a BankUser, got {type(user).__name__}")
        if self._missing_text(user.id) or self._missing_text(user.user_name):
            return self._invalid("User id and user name are required")
        return None
