"""SQLAlchemy document store implementation."""

from bankstore.store.sqlalchemy.database import (
    Base,
    create_store_engine,
    init_db,
    get_session_factory,
)
from bankstore.store.sqlalchemy.container import SqlAlchemyDocumentContainer
from bankstore.store.sqlalchemy.store import SqlAlchemyDocumentStore

__all__ = [
    "Base",
    "create_store_engine",
    "init_db",
    "get_session_factory",
    "SqlAlchemyDocumentContainer",
    "SqlAlchemyDocumentStore",
]
