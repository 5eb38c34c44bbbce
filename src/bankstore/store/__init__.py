"""Document store contract and backends."""

from bankstore.store.protocols import (
    ContainerDefinition,
    DocumentContainer,
    StoreResponse,
)
from bankstore.store.query import QuerySpec
from bankstore.store.factory import DocumentStore, open_document_store

__all__ = [
    "ContainerDefinition",
    "DocumentContainer",
    "StoreResponse",
    "QuerySpec",
    "DocumentStore",
    "open_document_store",
]
