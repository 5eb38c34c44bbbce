"""Shared plumbing for document-backed repositories."""

import functools
import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from bankstore.core.exceptions import DocumentStoreError
from bankstore.domain.models import Result, ResultType
from bankstore.store.protocols import DocumentContainer, StoreResponse
from bankstore.store.query import QuerySpec

logger = logging.getLogger(__name__)

T = TypeVar("T")


def store_faults_as_result(method: Callable[..., Result]) -> Callable[..., Result]:
    """
    Convert store faults raised inside a repository method into a
    DataStoreError result. A fault on any page fails the whole call.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs) -> Result:
        try:
            return method(self, *args, **kwargs)
        except (DocumentStoreError, ConnectionError, TimeoutError) as e:
            logger.error(
                "%s.%s failed against the document store: %s",
                type(self).__name__,
                method.__name__,
                e,
            )
            return Result.fail(ResultType.DATA_STORE_ERROR, str(e))

    return wrapper


class DocumentRepository(Generic[T]):
    """Base class holding a container and the page/result helpers."""

    entity_name = "document"

    def __init__(self, container: DocumentContainer, page_size: int = 100):
        self._container = container
        self._page_size = page_size

    def _to_entity(self, document: dict[str, Any]) -> T:
        raise NotImplementedError

    def _load(self, document: dict[str, Any]) -> T:
        try:
            return self._to_entity(document)
        except (KeyError, TypeError, ValueError) as e:
            raise DocumentStoreError(f"Malformed {self.entity_name} document: {e!r}") from e

    def _query_all(self, query: QuerySpec) -> list[T]:
        """Exhaust every page of ``query``."""
        entities = []
        for page in self._container.query_items(query, self._page_size):
            entities.extend(self._load(document) for document in page)
        return entities

    def _collect_all(self, query: QuerySpec) -> Result[list[T]]:
        """Every match across all pages, or NotFound when there are none."""
        entities = self._query_all(query)
        if not entities:
            return Result.fail(
                ResultType.NOT_FOUND,
                f"No {self.entity_name} matches {query.describe()}",
            )
        return Result.ok(entities)

    def _find_unique(self, query: QuerySpec) -> Result[T]:
        """The single match across all pages; more than one is a Duplicate."""
        entities = self._query_all(query)
        if not entities:
            return Result.fail(
                ResultType.NOT_FOUND,
                f"No {self.entity_name} matches {query.describe()}",
            )
        if len(entities) > 1:
            logger.warning(
                "%d %s documents match %s, expected one",
                len(entities),
                self.entity_name,
                query.describe(),
            )
            return Result.fail(
                ResultType.DUPLICATE,
                f"{len(entities)} {self.entity_name} documents match {query.describe()}",
            )
        return Result.ok(entities[0])

    def _unexpected(self, action: str, response: StoreResponse) -> Result:
        logger.warning(
            "Unexpected status %s from %s %s",
            response.status_code,
            action,
            self.entity_name,
        )
        return Result.fail(
            ResultType.DATA_STORE_ERROR,
            f"Store returned status {int(response.status_code)} for {action} {self.entity_name}",
        )

    @staticmethod
    def _invalid(message: str) -> Result:
        return Result.fail(ResultType.INVALID_DATA, message)

    @staticmethod
    def _missing_text(value: Optional[Any]) -> bool:
        return not isinstance(value, str) or not value
