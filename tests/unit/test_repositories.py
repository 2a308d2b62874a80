"""Unit tests for in-memory repositories."""

import pytest

from tests.conftest import create_account, create_payment
from wallet_ledger.domain.models import Favorite
from wallet_ledger.infrastructure.repositories import (
    AccountRepository,
    FavoriteRepository,
    PaymentRepository,
)


class TestAccountRepository:
    """Tests for AccountRepository."""

    def test_get_missing_returns_none(self) -> None:
        """Unknown ids return None."""
        repo = AccountRepository()
        assert repo.get(1) is None
        assert repo.get_by_phone("911") is None

    def test_add_and_get(self) -> None:
        """Added accounts can be found by id and phone."""
        repo = AccountRepository()
        account = create_account(1, "911")

        repo.add(account)

        assert repo.get(1) is account
        assert repo.get_by_phone("911") is account
        assert len(repo) == 1

    def test_get_all_keeps_insertion_order(self) -> None:
        """get_all returns accounts in the order they were added."""
        repo = AccountRepository()
        repo.add_many([create_account(3, "c"), create_account(1, "a"), create_account(2, "b")])

        assert [account.id for account in repo.get_all()] == [3, 1, 2]

    def test_get_all_returns_copy_of_list(self) -> None:
        """Mutating the returned list does not change the repository."""
        repo = AccountRepository()
        repo.add(create_account())

        repo.get_all().clear()

        assert len(repo) == 1

    def test_duplicate_id_keeps_both_and_last_wins(self) -> None:
        """A duplicated id is stored twice and lookups return the latest."""
        repo = AccountRepository()
        first = create_account(1, "911", 10)
        second = create_account(1, "911", 20)

        repo.add(first)
        repo.add(second)

        assert len(repo) == 2
        assert repo.get(1) is second
        assert repo.get_by_phone("911") is second

    def test_max_id(self) -> None:
        """max_id returns the largest stored id or zero."""
        repo = AccountRepository()
        assert repo.max_id() == 0

        repo.add_many([create_account(5, "a"), create_account(2, "b")])

        assert repo.max_id() == 5


class TestPaymentRepository:
    """Tests for PaymentRepository."""

    def test_add_and_get(self) -> None:
        """Added payments can be found by id."""
        repo = PaymentRepository()
        payment = create_payment("p-1")

        repo.add(payment)

        assert repo.get("p-1") is payment
        assert repo.get("p-2") is None

    def test_add_duplicate_id_raises(self) -> None:
        """Storing the same payment id twice is refused."""
        repo = PaymentRepository()
        repo.add(create_payment("p-1"))

        with pytest.raises(ValueError, match="already stored"):
            repo.add(create_payment("p-1"))


class TestFavoriteRepository:
    """Tests for FavoriteRepository."""

    def test_add_and_get(self) -> None:
        """Favorites can be found by their own id and by source payment."""
        repo = FavoriteRepository()
        favorite = Favorite.from_payment(create_payment("p-1"), "lunch")

        repo.add(favorite)

        assert repo.get(favorite.id) is favorite
        assert repo.get_by_payment_id("p-1") is favorite
        assert repo.get("p-1") is None
        assert repo.get_all() == [favorite]

    def test_add_duplicate_id_raises(self) -> None:
        """Storing the same favorite id twice is refused."""
        repo = FavoriteRepository()
        favorite = Favorite.from_payment(create_payment("p-1"), "lunch")
        repo.add(favorite)

        with pytest.raises(ValueError, match="already stored"):
            repo.add(favorite)
