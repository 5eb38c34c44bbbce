"""SQLAlchemy implementation of DocumentContainer."""

import logging
from http import HTTPStatus
from typing import Any, Iterator, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from bankstore.core.exceptions import DocumentStoreError
from bankstore.store.protocols import ContainerDefinition, StoreResponse
from bankstore.store.query import QuerySpec
from bankstore.store.sqlalchemy.orm_models import DocumentORM

logger = logging.getLogger(__name__)


class SqlAlchemyDocumentContainer:
    """
    Relational stand-in for a partitioned document container.

    Items are unique by (partition key, id), and the partition key must
    match the value at the container's partition key path in the body.
    Unique keys are enforced per partition, the way a document store
    applies a unique key policy.

    Every operation (and every query page) runs in its own session, so a
    container can be shared between threads.
    """

    def __init__(self, session_factory: sessionmaker, definition: ContainerDefinition):
        self._session_factory = session_factory
        self._definition = definition

    @property
    def definition(self) -> ContainerDefinition:
        return self._definition

    def create_item(self, body: dict[str, Any], partition_key: Any) -> StoreResponse:
        """Create a new item. 201 on success, 409 on conflict."""
        item_id = body.get("id")
        if not item_id or not self._matches_partition(body, partition_key):
            return StoreResponse(HTTPStatus.BAD_REQUEST)

        stored = dict(body)
        try:
            with self._session_factory.begin() as db:
                if self._get(db, item_id, partition_key) is not None:
                    return StoreResponse(HTTPStatus.CONFLICT)
                if self._violates_unique_keys(db, body, partition_key, item_id):
                    return StoreResponse(HTTPStatus.CONFLICT)

                db.add(
                    DocumentORM(
                        database_name=self._definition.database_name,
                        container_name=self._definition.container_name,
                        partition_key=str(partition_key),
                        item_id=item_id,
                        body=stored,
                    )
                )
        except IntegrityError:
            # Lost a race with a concurrent create of the same item
            return StoreResponse(HTTPStatus.CONFLICT)
        except SQLAlchemyError as e:
            raise DocumentStoreError(f"Create failed for item {item_id}: {e}") from e

        return StoreResponse(HTTPStatus.CREATED, dict(stored))

    def read_item(self, item_id: str, partition_key: Any) -> StoreResponse:
        """Read an item. 200 on success, 404 when absent."""
        try:
            with self._session_factory() as db:
                orm_doc = self._get(db, item_id, partition_key)
                body = dict(orm_doc.body) if orm_doc is not None else None
        except SQLAlchemyError as e:
            raise DocumentStoreError(f"Read failed for item {item_id}: {e}") from e

        if body is None:
            return StoreResponse(HTTPStatus.NOT_FOUND)
        return StoreResponse(HTTPStatus.OK, body)

    def replace_item(
        self, item_id: str, body: dict[str, Any], partition_key: Any
    ) -> StoreResponse:
        """Replace an existing item. 200 on success, 404 when absent."""
        if body.get("id") != item_id or not self._matches_partition(body, partition_key):
            return StoreResponse(HTTPStatus.BAD_REQUEST)

        stored = dict(body)
        try:
            with self._session_factory.begin() as db:
                orm_doc = self._get(db, item_id, partition_key)
                if orm_doc is None:
                    return StoreResponse(HTTPStatus.NOT_FOUND)
                if self._violates_unique_keys(db, body, partition_key, item_id):
                    return StoreResponse(HTTPStatus.CONFLICT)
                orm_doc.body = stored
        except SQLAlchemyError as e:
            raise DocumentStoreError(f"Replace failed for item {item_id}: {e}") from e

        return StoreResponse(HTTPStatus.OK, dict(stored))

    def delete_item(self, item_id: str, partition_key: Any) -> StoreResponse:
        """Delete an item. 204 on success, 404 when absent."""
        try:
            with self._session_factory.begin() as db:
                orm_doc = self._get(db, item_id, partition_key)
                if orm_doc is None:
                    return StoreResponse(HTTPStatus.NOT_FOUND)
                db.delete(orm_doc)
        except SQLAlchemyError as e:
            raise DocumentStoreError(f"Delete failed for item {item_id}: {e}") from e

        return StoreResponse(HTTPStatus.NO_CONTENT)

    def query_items(
        self, query: QuerySpec, page_size: int = 100
    ) -> Iterator[list[dict[str, Any]]]:
        """
        Run a query lazily, one page per iteration step.

        Pages are ordered by (partition key, id) so offsets stay stable
        between fetches. The first page is always yielded, even when empty.
        """
        if page_size < 1:
            raise ValueError("page_size must be at least 1")

        stmt = self._scoped(select(DocumentORM), query.partition_key)
        for name, value in query.filters.items():
            stmt = stmt.where(self._field_equals(name, value))
        stmt = stmt.order_by(DocumentORM.partition_key, DocumentORM.item_id)

        offset = 0
        while True:
            try:
                with self._session_factory() as db:
                    rows = db.execute(stmt.offset(offset).limit(page_size)).scalars().all()
                    batch = [dict(row.body) for row in rows]
            except SQLAlchemyError as e:
                raise DocumentStoreError(
                    f"Query '{query.text}' failed at offset {offset}: {e}"
                ) from e

            logger.debug(
                "Fetched page of %d documents from %s at offset %d",
                len(batch),
                self._definition.container_name,
                offset,
            )
            yield batch

            if len(batch) < page_size:
                return
            offset += page_size

    # Internal helpers

    def _scoped(self, stmt, partition_key: Optional[Any] = None):
        stmt = stmt.where(
            DocumentORM.database_name == self._definition.database_name,
            DocumentORM.container_name == self._definition.container_name,
        )
        if partition_key is not None:
            stmt = stmt.where(DocumentORM.partition_key == str(partition_key))
        return stmt

    def _get(self, db: Session, item_id: str, partition_key: Any) -> Optional[DocumentORM]:
        stmt = self._scoped(select(DocumentORM), partition_key).where(
            DocumentORM.item_id == item_id
        )
        return db.execute(stmt).scalars().first()

    def _matches_partition(self, body: dict[str, Any], partition_key: Any) -> bool:
        value = body.get(self._definition.partition_key_field)
        return value is not None and str(value) == str(partition_key)

    def _violates_unique_keys(
        self, db: Session, body: dict[str, Any], partition_key: Any, item_id: str
    ) -> bool:
        for path in self._definition.unique_keys:
            name = path.lstrip("/")
            value = body.get(name)
            if value is None:
                continue
            stmt = (
                self._scoped(select(DocumentORM.item_id), partition_key)
                .where(self._field_equals(name, value))
                .where(DocumentORM.item_id != item_id)
            )
            if db.execute(stmt).first() is not None:
                logger.debug("Unique key %s=%r already taken", name, value)
                return True
        return False

    @staticmethod
    def _field_equals(name: str, value: Any):
        """Comparison between a top-level document field and ``value``."""
        if name == "id":
            return DocumentORM.item_id == str(value)

        element = DocumentORM.body[name]
        if value is None:
            return element.as_string().is_(None)
        if isinstance(value, bool):
            return element.as_boolean() == value
        if isinstance(value, int):
            return element.as_integer() == value
        if isinstance(value, float):
            return element.as_float() == value
        return element.as_string() == str(value)
