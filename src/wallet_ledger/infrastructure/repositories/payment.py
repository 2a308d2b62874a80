from wallet_ledger.domain.models import Payment


class PaymentRepository:
    def __init__(self) -> None:
        self._payments: dict[str, Payment] = {}

    def __len__(self) -> int:
        return len(self._payments)

    def get(self, payment_id: str) -> Payment | None:
        return self._payments.get(payment_id)

    def add(self, payment: Payment) -> None:
        if payment.id in self._payments:
            raise ValueError(f"Payment {payment.id} already stored")
        self._payments[payment.id] = payment

    def get_all(self) -> list[Payment]:
        return list(self._payments.values())
