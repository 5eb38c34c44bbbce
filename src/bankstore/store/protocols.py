"""Document store contract shared by every backend."""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Protocol

from bankstore.store.query import QuerySpec


@dataclass(frozen=True)
class StoreResponse:
    """Outcome of a point operation, following HTTP status conventions."""

    status_code: int
    resource: Optional[dict[str, Any]] = None


@dataclass(frozen=True)
class ContainerDefinition:
    """Logical address and key policy of a container."""

    database_name: str
    container_name: str
    partition_key_path: str
    unique_keys: tuple[str, ...] = field(default_factory=tuple)

    @property
    def partition_key_field(self) -> str:
        return self.partition_key_path.lstrip("/")


class DocumentContainer(Protocol):
    """
    Item-level operations over one partitioned container.

    Expected outcomes (not found, id conflict) come back as status codes.
    Infrastructure faults raise DocumentStoreError.
    """

    def create_item(self, body: dict[str, Any], partition_key: Any) -> StoreResponse:
        """Create a new item. 201 on success, 409 on conflict."""
        ...

    def read_item(self, item_id: str, partition_key: Any) -> StoreResponse:
        """Read an item. 200 on success, 404 when absent."""
        ...

    def replace_item(
        self, item_id: str, body: dict[str, Any], partition_key: Any
    ) -> StoreResponse:
        """Replace an existing item. 200 on success, 404 when absent."""
        ...

    def delete_item(self, item_id: str, partition_key: Any) -> StoreResponse:
        """Delete an item. 204 on success, 404 when absent."""
        ...

    def query_items(self, query: QuerySpec, page_size: int) -> Iterator[list[dict[str, Any]]]:
        """Run a query lazily, yielding one page of documents at a time."""
        ...
