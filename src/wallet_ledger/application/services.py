from pathlib import Path

import structlog

from wallet_ledger.config import Settings
from wallet_ledger.config import settings as default_settings
from wallet_ledger.domain.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    FavoriteAlreadyAddedError,
    FavoriteNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    PaymentNotFoundError,
    PhoneAlreadyRegisteredError,
)
from wallet_ledger.domain.models import Account, Favorite, Payment, PaymentStatus
from wallet_ledger.infrastructure.repositories import (
    AccountRepository,
    FavoriteRepository,
    PaymentRepository,
)
from wallet_ledger.infrastructure.snapshot import read_snapshot, write_snapshot


logger = structlog.get_logger()


class WalletService:
    """In-memory wallet ledger.

    Owns every account, payment and favorite. Lookups return the stored
    objects themselves, so callers observe later balance and status changes.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else default_settings
        self._accounts = AccountRepository()
        self._payments = PaymentRepository()
        self._favorites = FavoriteRepository()
        self._next_account_id = 0

    @property
    def accounts(self) -> list[Account]:
        return self._accounts.get_all()

    @property
    def payments(self) -> list[Payment]:
        return self._payments.get_all()

    @property
    def favorites(self) -> list[Favorite]:
        return self._favorites.get_all()

    def register_account(self, phone: str) -> Account:
        if self._accounts.get_by_phone(phone) is not None:
            raise PhoneAlreadyRegisteredError(phone)

        self._next_account_id += 1
        account = Account(id=self._next_account_id, phone=phone, balance=0)
        self._accounts.add(account)

        logger.info("account_registered", account_id=account.id)
        return account

    def find_account_by_id(self, account_id: int) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def find_payment_by_id(self, payment_id: str) -> Payment:
        payment = self._payments.get(payment_id)
        if payment is None:
            raise PaymentNotFoundError(payment_id)
        return payment

    def find_favorite_by_id(self, favorite_id: str) -> Favorite:
        favorite = self._favorites.get(favorite_id)
        if favorite is None:
            raise FavoriteNotFoundError(favorite_id)
        return favorite

    def deposit(self, account_id: int, amount: int) -> None:
        if amount <= 0:
            raise InvalidAmountError(amount)

        account = self.find_account_by_id(account_id)
        account.balance += amount

        logger.info("deposit_completed", account_id=account_id, amount=amount, balance_after=account.balance)

    def pay(self, account_id: int, amount: int, category: str) -> Payment:
        log = logger.bind(account_id=account_id, amount=amount, category=category)

        if amount <= 0:
            raise InvalidAmountError(amount)

        account = self.find_account_by_id(account_id)
        if account.balance < amount:
            log.info("payment_declined", reason="INSUFFICIENT_FUNDS", available=account.balance)
            raise InsufficientFundsError(account_id, required=amount, available=account.balance)

        payment = Payment.create(account_id=account_id, amount=amount, category=category)
        self._payments.add(payment)
        account.balance -= amount

        log.info("payment_created", payment_id=payment.id, balance_after=account.balance)
        return payment

    def reject(self, payment_id: str) -> None:
        """Fail a payment and return its amount to the account.

        Rejecting an already failed payment credits the account again.
        """
        payment = self.find_payment_by_id(payment_id)
        log = logger.bind(payment_id=payment_id, account_id=payment.account_id, amount=payment.amount)

        if payment.status is PaymentStatus.FAIL:
            log.warning("payment_already_rejected")

        payment.mark_failed()
        account = self.find_account_by_id(payment.account_id)
        account.balance += payment.amount

        log.info("payment_rejected", balance_after=account.balance)

    def repeat(self, payment_id: str) -> Payment:
        payment = self.find_payment_by_id(payment_id)
        return self.pay(payment.account_id, payment.amount, payment.category)

    def favorite_payment(self, payment_id: str, name: str) -> Favorite:
        payment = self.find_payment_by_id(payment_id)

        existing = self._favorites.get_by_payment_id(payment_id)
        if existing is not None:
            raise FavoriteAlreadyAddedError(payment_id, existing.id)

        favorite = Favorite.from_payment(payment, name)
        self._favorites.add(favorite)

        logger.info(
            "favorite_created",
            favorite_id=favorite.id,
            payment_id=payment_id,
            account_id=favorite.account_id,
            name=name,
        )
        return favorite

    def pay_from_favorite(self, favorite_id: str) -> Payment:
        favorite = self.find_favorite_by_id(favorite_id)
        return self.pay(favorite.account_id, favorite.amount, favorite.category)

    def export_to_file(self, path: str | Path) -> None:
        count = write_snapshot(path, self._accounts.get_all(), encoding=self.settings.snapshot_encoding)
        logger.info("snapshot_exported", path=str(path), accounts=count)

    def import_from_file(self, path: str | Path) -> list[Account]:
        """Append the accounts stored at ``path`` and return them.

        The whole file is decoded before anything is added, so a malformed
        snapshot leaves the ledger unchanged.
        """
        imported = read_snapshot(path, encoding=self.settings.snapshot_encoding)

        if self.settings.snapshot_duplicate_policy == "reject":
            self._check_duplicates(imported)

        self._accounts.add_many(imported)
        self._next_account_id = max(self._next_account_id, self._accounts.max_id())

        logger.info(
            "snapshot_imported",
            path=str(path),
            accounts=len(imported),
            total_accounts=len(self._accounts),
        )
        return imported

    def _check_duplicates(self, imported: list[Account]) -> None:
        seen_ids: set[int] = set()
        seen_phones: set[str] = set()
        for account in imported:
            if (
                account.id in seen_ids
                or account.phone in seen_phones
                or self._accounts.get(account.id) is not None
                or self._accounts.get_by_phone(account.phone) is not None
            ):
                raise DuplicateAccountError(account.id, account.phone)
            seen_ids.add(account.id)
            seen_phones.add(account.phone)
