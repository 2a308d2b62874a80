"""Domain layer - business entities and rules."""

from wallet_ledger.domain.exceptions import (
    AccountNotFoundError,
    DomainError,
    DuplicateAccountError,
    FavoriteAlreadyAddedError,
    FavoriteNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    PaymentNotFoundError,
    PhoneAlreadyRegisteredError,
    SnapshotFormatError,
)
from wallet_ledger.domain.models import (
    Account,
    Favorite,
    Payment,
    PaymentStatus,
)


__all__ = [
    "Account",
    "AccountNotFoundError",
    "DomainError",
    "DuplicateAccountError",
    "Favorite",
    "FavoriteAlreadyAddedError",
    "FavoriteNotFoundError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "Payment",
    "PaymentNotFoundError",
    "PaymentStatus",
    "PhoneAlreadyRegisteredError",
    "SnapshotFormatError",
]
