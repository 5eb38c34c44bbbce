"""Open the document store selected by settings."""

from typing import Optional, Protocol

from bankstore.config.settings import Settings, get_settings
from bankstore.core.exceptions import ConfigurationError
from bankstore.store.protocols import ContainerDefinition, DocumentContainer


class DocumentStore(Protocol):
    """An open store connection that resolves containers."""

    def get_container(self, definition: ContainerDefinition) -> DocumentContainer:
        ...

    def close(self) -> None:
        ...


def open_document_store(settings: Optional[Settings] = None) -> DocumentStore:
    """Open a connection to the configured backend."""
    settings = settings or get_settings()

    if settings.store_backend == "cosmos":
        if not settings.cosmos_endpoint or settings.cosmos_key is None:
            raise ConfigurationError(
                "Cosmos backend requires BANKSTORE_COSMOS_ENDPOINT and BANKSTORE_COSMOS_KEY"
            )
        from bankstore.store.cosmos import CosmosDocumentStore

        return CosmosDocumentStore(
            endpoint=settings.cosmos_endpoint,
            credential=settings.cosmos_key.get_secret_value(),
            application_name=settings.application_name,
            create_if_missing=settings.cosmos_create_containers,
        )

    from bankstore.store.sqlalchemy import SqlAlchemyDocumentStore

    return SqlAlchemyDocumentStore(database_url=settings.get_database_url())
