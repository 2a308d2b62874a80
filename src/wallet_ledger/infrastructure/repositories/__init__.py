"""Repository implementations."""

from wallet_ledger.infrastructure.repositories.account import AccountRepository
from wallet_ledger.infrastructure.repositories.favorite import FavoriteRepository
from wallet_ledger.infrastructure.repositories.payment import PaymentRepository


__all__ = [
    "AccountRepository",
    "FavoriteRepository",
    "PaymentRepository",
]
