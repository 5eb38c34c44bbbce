"""Connection owner for Azure Cosmos DB."""

import logging
from contextlib import ExitStack
from typing import Optional

from azure.cosmos import CosmosClient, PartitionKey

from bankstore.store.cosmos.container import CosmosDocumentContainer
from bankstore.store.protocols import ContainerDefinition

logger = logging.getLogger(__name__)


class CosmosDocumentStore:
    """
    Holds one CosmosClient for the lifetime of the store.

    When ``create_if_missing`` is set, databases and containers are created
    with the definition's partition key path and unique key policy.
    Otherwise they must already exist.
    """

    def __init__(
        self,
        endpoint: str,
        credential: str,
        application_name: str = "BankProject",
        create_if_missing: bool = False,
        client: Optional[CosmosClient] = None,
    ):
        self._stack = ExitStack()
        if client is None:
            client = self._stack.enter_context(
                CosmosClient(endpoint, credential=credential, user_agent=application_name)
            )
        self._client = client
        self._create_if_missing = create_if_missing
        logger.info("Opened Cosmos document store at %s", endpoint)

    def get_container(self, definition: ContainerDefinition) -> CosmosDocumentContainer:
        """Resolve a logical database/container pair."""
        if self._create_if_missing:
            database = self._client.create_database_if_not_exists(id=definition.database_name)
            options = {}
            if definition.unique_keys:
                options["unique_key_policy"] = {
                    "uniqueKeys": [{"paths": list(definition.unique_keys)}]
                }
            container = database.create_container_if_not_exists(
                id=definition.container_name,
                partition_key=PartitionKey(path=definition.partition_key_path),
                **options,
            )
        else:
            database = self._client.get_database_client(definition.database_name)
            container = database.get_container_client(definition.container_name)
        return CosmosDocumentContainer(container)

    def close(self) -> None:
        """Release the client connection if this store opened it."""
        self._stack.close()

    def __enter__(self) -> "CosmosDocumentStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
