"""Application layer - services and use cases."""

from wallet_ledger.application.services import WalletService


__all__ = [
    "WalletService",
]
