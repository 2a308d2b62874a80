"""Shared pytest fixtures for wallet ledger tests."""

from pathlib import Path

import pytest

from wallet_ledger.application.services import WalletService
from wallet_ledger.config import Settings
from wallet_ledger.domain.models import Account, Payment, PaymentStatus


@pytest.fixture
def append_settings() -> Settings:
    """Settings with the default duplicate-tolerant import policy."""
    return Settings(snapshot_duplicate_policy="append", snapshot_encoding="utf-8")


@pytest.fixture
def reject_settings() -> Settings:
    """Settings that refuse duplicate accounts on import."""
    return Settings(snapshot_duplicate_policy="reject", snapshot_encoding="utf-8")


@pytest.fixture
def service(append_settings: Settings) -> WalletService:
    """Create an empty WalletService."""
    return WalletService(append_settings)


@pytest.fixture
def strict_service(reject_settings: Settings) -> WalletService:
    """Create an empty WalletService that rejects duplicate imports."""
    return WalletService(reject_settings)


@pytest.fixture
def funded_account(service: WalletService) -> Account:
    """Register phone 911 and deposit 1000."""
    account = service.register_account("911")
    service.deposit(account.id, 1000)
    return account


@pytest.fixture
def snapshot_path(tmp_path: Path) -> Path:
    """Path for a snapshot file inside the test's temp dir."""
    return tmp_path / "accounts.dump"


def create_account(account_id: int = 1, phone: str = "911", balance: int = 0) -> Account:
    """Helper to create Account with custom values."""
    return Account(id=account_id, phone=phone, balance=balance)


def create_payment(
    payment_id: str = "payment-001",
    account_id: int = 1,
    amount: int = 300,
    category: str = "food",
    status: PaymentStatus = PaymentStatus.IN_PROGRESS,
) -> Payment:
    """Helper to create Payment with custom values."""
    return Payment(
        id=payment_id,
        account_id=account_id,
        amount=amount,
        category=category,
        status=status,
    )
