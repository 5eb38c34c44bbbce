"""
Pytest configuration and fixtures for bank store tests.

This module provides:
- In-memory SQLite document store fixtures
- Account and user containers and repositories
- Factory helpers for accounts and users
- Scripted containers for status-code and failure paths
"""

from http import HTTPStatus
from typing import Callable, Iterator, Optional
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, StaticPool

from bankstore.config.settings import Settings, reset_settings
from bankstore.core.exceptions import DocumentStoreError
from bankstore.domain.models import Account, BankUser
from bankstore.repositories import DocumentAccountRepository, DocumentUserRepository
from bankstore.store import StoreResponse
from bankstore.store.sqlalchemy import (
    Base,
    SqlAlchemyDocumentContainer,
    SqlAlchemyDocumentStore,
)
from bankstore.store.sqlalchemy import orm_models  # noqa: F401
from bankstore.store_context import accounts_definition, users_definition

# Small pages so multi-page reads are exercised
TEST_PAGE_SIZE = 2


# =============================================================================
# SETTINGS FIXTURES
# =============================================================================


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a temporary data directory."""
    reset_settings()
    return Settings(
        data_dir=tmp_path / "data",
        query_page_size=TEST_PAGE_SIZE,
    )


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_store(test_engine) -> SqlAlchemyDocumentStore:
    """Document store sharing the in-memory engine."""
    store = SqlAlchemyDocumentStore(engine=test_engine)
    yield store
    store.close()


# =============================================================================
# CONTAINER FIXTURES
# =============================================================================


@pytest.fixture
def accounts_container(test_store, test_settings) -> SqlAlchemyDocumentContainer:
    return test_store.get_container(accounts_definition(test_settings))


@pytest.fixture
def users_container(test_store, test_settings) -> SqlAlchemyDocumentContainer:
    return test_store.get_container(users_definition(test_settings))


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(accounts_container) -> DocumentAccountRepository:
    """Provide test AccountRepository."""
    return DocumentAccountRepository(accounts_container, page_size=TEST_PAGE_SIZE)


@pytest.fixture
def user_repo(users_container) -> DocumentUserRepository:
    """Provide test UserRepository."""
    return DocumentUserRepository(users_container, page_size=TEST_PAGE_SIZE)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def account_factory(account_repo) -> Callable[..., Account]:
    """Factory for persisting test accounts."""

    def _create_account(account_id: str, user_name: str = "bob", number: int = 100) -> Account:
        account = Account(id=account_id, user_name=user_name, number=number)
        result = account_repo.create_account(account)
        assert result.succeeded, result.message
        return result.value

    return _create_account


@pytest.fixture
def user_factory(user_repo) -> Callable[..., BankUser]:
    """Factory for persisting test users."""

    def _create_user(
        user_id: str,
        user_name: str,
        first_name: Optional[str] = "Test",
        last_name: Optional[str] = "User",
    ) -> BankUser:
        user = BankUser(
            id=user_id,
            user_name=user_name,
            first_name=first_name,
            last_name=last_name,
        )
        result = user_repo.create_user(user)
        assert result.succeeded, result.message
        return result.value

    return _create_user


# =============================================================================
# SCRIPTED CONTAINER FIXTURES
# =============================================================================


def pages(*batches: list[dict]) -> Iterator[list[dict]]:
    """Yield the given batches as query pages."""
    yield from batches


def failing_after(*batches: list[dict]) -> Iterator[list[dict]]:
    """Yield the given pages, then fail the next page fetch."""
    yield from batches
    raise DocumentStoreError("connection reset while fetching next page")


@pytest.fixture
def scripted_container() -> MagicMock:
    """
    Container double whose responses are set per test.

    Point operations default to their success status; queries default to
    a single empty page.
    """
    container = MagicMock()
    container.create_item.return_value = StoreResponse(HTTPStatus.CREATED)
    container.read_item.return_value = StoreResponse(HTTPStatus.NOT_FOUND)
    container.replace_item.return_value = StoreResponse(HTTPStatus.OK)
    container.delete_item.return_value = StoreResponse(HTTPStatus.NO_CONTENT)
    container.query_items.side_effect = lambda query, page_size: pages([])
    return container
