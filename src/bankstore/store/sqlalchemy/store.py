"""Connection owner for the relational document store."""

import logging
from typing import Optional

from sqlalchemy import Engine

from bankstore.store.protocols import ContainerDefinition
from bankstore.store.sqlalchemy.container import SqlAlchemyDocumentContainer
from bankstore.store.sqlalchemy.database import create_store_engine, get_session_factory, init_db

logger = logging.getLogger(__name__)


class SqlAlchemyDocumentStore:
    """
    Holds one engine and a session factory for the lifetime of the store.

    Containers open a short-lived session per operation from the shared
    factory. Pass ``engine`` to share an existing engine (tests use an
    in-memory SQLite engine); it is then left open on close.
    """

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        if engine is None and database_url is None:
            raise ValueError("Either database_url or engine is required")

        self._owns_engine = engine is None
        self._engine = engine or create_store_engine(database_url)
        init_db(self._engine)
        self._session_factory = get_session_factory(self._engine)
        logger.info("Opened relational document store at %s", self._engine.url.render_as_string())

    def get_container(self, definition: ContainerDefinition) -> SqlAlchemyDocumentContainer:
        """Resolve a logical database/container pair."""
        return SqlAlchemyDocumentContainer(self._session_factory, definition)

    def close(self) -> None:
        """Release pooled connections if the engine is owned."""
        if self._owns_engine:
            self._engine.dispose()

    def __enter__(self) -> "SqlAlchemyDocumentStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
