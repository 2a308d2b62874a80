from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from ulid import ULID


class PaymentStatus(Enum):
    OK = "OK"
    FAIL = "FAIL"
    IN_PROGRESS = "INPROGRESS"


@dataclass
class Account:
    id: int
    phone: str
    balance: int = 0


@dataclass
class Payment:
    id: str
    account_id: int
    amount: int
    category: str
    status: PaymentStatus
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, account_id: int, amount: int, category: str) -> "Payment":
        return cls(
            id=str(ULID()),
            account_id=account_id,
            amount=amount,
            category=category,
            status=PaymentStatus.IN_PROGRESS,
        )

    def mark_failed(self) -> None:
        self.status = PaymentStatus.FAIL
        self.updated_at = datetime.now(UTC)


@dataclass(frozen=True)
class Favorite:
    """Named payment template.

    Amount and category are copied from the source payment when the
    favorite is created and never follow later changes to it.
    """

    id: str
    payment_id: str
    account_id: int
    name: str
    amount: int
    category: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def from_payment(cls, payment: Payment, name: str) -> "Favorite":
        return cls(
            id=str(ULID()),
            payment_id=payment.id,
            account_id=payment.account_id,
            name=name,
            amount=payment.amount,
            category=payment.category,
        )
