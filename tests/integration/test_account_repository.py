"""
Integration tests for DocumentAccountRepository over SQLite.

Tests cover:
- Create, read and delete addressed by account id
- Lookups by user name and account number across pages
- Not-found, duplicate and invalid-input results
"""

import pytest

from bankstore.domain.models import Account, ResultType
from bankstore.repositories import DocumentAccountRepository


class TestCreateAccount:
    """Tests for create_account."""

    def test_create_then_get_by_id_returns_equal_account(
        self,
        account_repo: DocumentAccountRepository,
    ):
        """
        GIVEN an empty accounts container
        WHEN I create an account
        THEN get_by_id returns an equal account
        """
        account = Account(id="A1", user_name="bob", number=100)

        created = account_repo.create_account(account)
        retrieved = account_repo.get_by_id("A1")

        assert created.succeeded
        assert created.result_type is ResultType.SUCCESS
        assert retrieved.succeeded
        assert retrieved.value == account

    def test_create_same_id_twice_is_duplicate(self, account_repo, account_factory):
        account_factory("A1")

        result = account_repo.create_account(Account(id="A1", user_name="alice", number=5))

        assert not result.succeeded
        assert result.result_type is ResultType.DUPLICATE
        assert "A1" in result.message

    @pytest.mark.parametrize("bad_input", [None, "A1", Account(id="", user_name="bob", number=1)])
    def test_invalid_input_is_rejected(self, scripted_container, bad_input):
        repo = DocumentAccountRepository(scripted_container)

        result = repo.create_account(bad_input)

        assert result.result_type is ResultType.INVALID_DATA
        scripted_container.create_item.assert_not_called()


class TestDeleteAccount:
    """Tests for delete_account."""

    def test_delete_existing_account(self, account_repo, account_factory):
        """
        GIVEN an account exists
        WHEN I delete it
        THEN the delete succeeds and the account is gone
        """
        account = account_factory("A1")

        result = account_repo.delete_account(account)

        assert result.succeeded
        assert result.value == account
        assert account_repo.get_by_id("A1").result_type is ResultType.NOT_FOUND

    def test_delete_locates_account_by_id_not_owner(self, account_repo, account_factory):
        account_factory("A1", user_name="bob")

        # Owner name changed since creation; the id still finds the item
        result = account_repo.delete_account(
            Account(id="A1", user_name="someone-else", number=100)
        )

        assert result.succeeded

    def test_delete_missing_account_is_not_found(self, account_repo):
        result = account_repo.delete_account(Account(id="missing", user_name="bob", number=1))

        assert result.result_type is ResultType.NOT_FOUND


class TestUpdateAccount:
    """Account updates are deliberately unsupported."""

    def test_update_is_not_supported(self, account_repo, account_factory):
        account = account_factory("A1", number=100)

        result = account_repo.update_account(Account(id="A1", user_name="bob", number=999))

        assert not result.succeeded
        assert result.result_type is ResultType.NOT_SUPPORTED
        assert account_repo.get_by_id("A1").value == account


class TestAccountQueries:
    """Tests for the lookup operations."""

    def test_get_all_accounts_reads_every_page(self, account_repo, account_factory):
        for i in range(5):
            account_factory(f"A{i}", number=100 + i)

        result = account_repo.get_all_accounts()

        assert result.succeeded
        assert sorted(a.id for a in result.value) == ["A0", "A1", "A2", "A3", "A4"]

    def test_get_all_accounts_on_empty_container_is_not_found(self, account_repo):
        result = account_repo.get_all_accounts()

        assert not result.succeeded
        assert result.result_type is ResultType.NOT_FOUND
        assert result.value is None

    def test_get_all_by_user_name_filters_owner(self, account_repo, account_factory):
        account_factory("A1", user_name="bob", number=100)
        account_factory("A2", user_name="alice", number=200)
        account_factory("A3", user_name="bob", number=300)

        result = account_repo.get_all_by_user_name("bob")

        assert result.succeeded
        assert sorted(a.id for a in result.value) == ["A1", "A3"]

    def test_get_all_by_user_name_without_matches_is_not_found(self, account_repo, account_factory):
        account_factory("A1", user_name="bob")

        result = account_repo.get_all_by_user_name("nobody")

        assert result.result_type is ResultType.NOT_FOUND

    def test_get_by_account_number(self, account_repo, account_factory):
        """
        GIVEN account {A1, bob, 100} exists
        WHEN I look up number 100
        THEN account A1 is returned
        """
        account_factory("A1", user_name="bob", number=100)
        account_factory("A2", user_name="bob", number=101)

        result = account_repo.get_by_account_number(100)

        assert result.succeeded
        assert result.value.id == "A1"

    def test_get_by_account_number_finds_match_past_first_page(self, account_repo, account_factory):
        for i in range(4):
            account_factory(f"A{i}", number=i)

        result = account_repo.get_by_account_number(3)

        assert result.succeeded
        assert result.value.id == "A3"

    def test_get_by_account_number_with_two_matches_is_duplicate(self, account_repo, account_factory):
        account_factory("A1", number=100)
        account_factory("A2", number=100)

        result = account_repo.get_by_account_number(100)

        assert result.result_type is ResultType.DUPLICATE

    def test_get_by_account_number_rejects_non_integer(self, account_repo):
        assert account_repo.get_by_account_number("100").result_type is ResultType.INVALID_DATA
        assert account_repo.get_by_account_number(True).result_type is ResultType.INVALID_DATA

    def test_get_by_id_missing_is_not_found(self, account_repo):
        assert account_repo.get_by_id("nope").result_type is ResultType.NOT_FOUND

    def test_get_by_id_rejects_empty_id(self, account_repo):
        assert account_repo.get_by_id("").result_type is ResultType.INVALID_DATA

    def test_user_name_value_is_not_interpolated(self, account_repo, account_factory):
        account_factory("A1", user_name="bob")

        result = account_repo.get_all_by_user_name('bob" OR "1" = "1')

        assert result.result_type is ResultType.NOT_FOUND
