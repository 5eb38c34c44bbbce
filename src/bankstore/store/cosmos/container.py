"""Azure Cosmos DB implementation of DocumentContainer."""

import logging
from http import HTTPStatus
from typing import Any, Iterator

from azure.core.exceptions import AzureError
from azure.cosmos import ContainerProxy, exceptions

from bankstore.core.exceptions import DocumentStoreError
from bankstore.store.protocols import StoreResponse
from bankstore.store.query import QuerySpec

logger = logging.getLogger(__name__)


class CosmosDocumentContainer:
    """
    Adapter from a Cosmos container proxy to the DocumentContainer contract.

    The SDK raises on non-2xx responses; those are turned back into status
    codes. Transport failures and SDK errors without a response become
    DocumentStoreError.
    """

    def __init__(self, container: ContainerProxy):
        self._container = container

    def create_item(self, body: dict[str, Any], partition_key: Any) -> StoreResponse:
        # Cosmos derives the partition key from the body
        try:
            resource = self._container.create_item(body=dict(body))
        except exceptions.CosmosHttpResponseError as e:
            return self._error_response("create", e)
        except AzureError as e:
            raise DocumentStoreError(f"Create failed: {e}") from e
        return StoreResponse(HTTPStatus.CREATED, dict(resource))

    def read_item(self, item_id: str, partition_key: Any) -> StoreResponse:
        try:
            resource = self._container.read_item(item=item_id, partition_key=partition_key)
        except exceptions.CosmosHttpResponseError as e:
            return self._error_response("read", e)
        except AzureError as e:
            raise DocumentStoreError(f"Read failed for item {item_id}: {e}") from e
        return StoreResponse(HTTPStatus.OK, dict(resource))

    def replace_item(
        self, item_id: str, body: dict[str, Any], partition_key: Any
    ) -> StoreResponse:
        try:
            resource = self._container.replace_item(item=item_id, body=dict(body))
        except exceptions.CosmosHttpResponseError as e:
            return self._error_response("replace", e)
        except AzureError as e:
            raise DocumentStoreError(f"Replace failed for item {item_id}: {e}") from e
        return StoreResponse(HTTPStatus.OK, dict(resource))

    def delete_item(self, item_id: str, partition_key: Any) -> StoreResponse:
        try:
            self._container.delete_item(item=item_id, partition_key=partition_key)
        except exceptions.CosmosHttpResponseError as e:
            return self._error_response("delete", e)
        except AzureError as e:
            raise DocumentStoreError(f"Delete failed for item {item_id}: {e}") from e
        return StoreResponse(HTTPStatus.NO_CONTENT)

    def query_items(
        self, query: QuerySpec, page_size: int = 100
    ) -> Iterator[list[dict[str, Any]]]:
        """Run a parameterized query, yielding each page as it arrives."""
        if query.partition_key is not None:
            scope = {"partition_key": query.partition_key}
        else:
            scope = {"enable_cross_partition_query": True}

        try:
            pages = self._container.query_items(
                query=query.text,
                parameters=query.parameters,
                max_item_count=page_size,
                **scope,
            ).by_page()
            for page in pages:
                yield [dict(document) for document in page]
        except AzureError as e:
            raise DocumentStoreError(f"Query '{query.text}' failed: {e}") from e

    @staticmethod
    def _error_response(action: str, error: exceptions.CosmosHttpResponseError) -> StoreResponse:
        status = error.status_code or HTTPStatus.INTERNAL_SERVER_ERROR
        logger.debug("Cosmos %s returned status %s", action, status)
        return StoreResponse(status)
