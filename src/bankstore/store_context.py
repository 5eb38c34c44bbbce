"""Store context for in-process repository access.

Opens one document store connection from settings and hands each
repository the container it works on.
"""

import logging
from typing import Optional

from bankstore.config.settings import Settings, get_settings
from bankstore.repositories import DocumentAccountRepository, DocumentUserRepository
from bankstore.store import ContainerDefinition, DocumentStore, open_document_store

logger = logging.getLogger(__name__)


def accounts_definition(settings: Settings) -> ContainerDefinition:
    """Accounts are partitioned by their id."""
    return ContainerDefinition(
        database_name=settings.accounts_database,
        container_name=settings.accounts_container,
        partition_key_path="/id",
    )


def users_definition(settings: Settings) -> ContainerDefinition:
    """Users are partitioned, and kept unique, by user name."""
    return ContainerDefinition(
        database_name=settings.users_database,
        container_name=settings.users_container,
        partition_key_path="/UserName",
        unique_keys=("/UserName",),
    )


class StoreContext:
    """
    Owns the store connection for the lifetime of its repositories.

    Use as a context manager, or call ``close()`` when done.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[DocumentStore] = None,
    ):
        """
        Initialize the store context.

        Args:
            settings: Settings to read container names and backend from.
                Defaults to the global settings.
            store: An already-open store. When omitted, one is opened
                from settings.
        """
        self._settings = settings or get_settings()
        self._store = store or open_document_store(self._settings)

        # Repository instances (lazy initialized)
        self._accounts: Optional[DocumentAccountRepository] = None
        self._users: Optional[DocumentUserRepository] = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def accounts(self) -> DocumentAccountRepository:
        """Get the account repository."""
        if self._accounts is None:
            container = self._store.get_container(accounts_definition(self._settings))
            self._accounts = DocumentAccountRepository(
                container, page_size=self._settings.query_page_size
            )
        return self._accounts

    @property
    def users(self) -> DocumentUserRepository:
        """Get the user repository."""
        if self._users is None:
            container = self._store.get_container(users_definition(self._settings))
            self._users = DocumentUserRepository(
                container, page_size=self._settings.query_page_size
            )
        return self._users

    def close(self) -> None:
        """Release the store connection."""
        if self._store is not None:
            self._store.close()
            self._store = None
            self._accounts = None
            self._users = None
            logger.debug("Store context closed")

    def __enter__(self) -> "StoreContext":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
