"""Azure Cosmos DB document store implementation."""

from bankstore.store.cosmos.container import CosmosDocumentContainer
from bankstore.store.cosmos.store import CosmosDocumentStore

__all__ = [
    "CosmosDocumentContainer",
    "CosmosDocumentStore",
]
