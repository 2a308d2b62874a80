from collections.abc import Iterable

from wallet_ledger.domain.models import Account


class AccountRepository:
    """Ordered in-memory account store.

    Accounts keep insertion order so snapshots are written in the order
    they were added. The id and phone indexes always point at the most
    recently added account, which only matters when an import appended
    an account whose id or phone was already present.
    """

    def __init__(self) -> None:
        self._accounts: list[Account] = []
        self._by_id: dict[int, Account] = {}
        self._by_phone: dict[str, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def get(self, account_id: int) -> Account | None:
        return self._by_id.get(account_id)

    def get_by_phone(self, phone: str) -> Account | None:
        return self._by_phone.get(phone)

    def add(self, account: Account) -> None:
        self._accounts.append(account)
        self._by_id[account.id] = account
        self._by_phone[account.phone] = account

    def add_many(self, accounts: Iterable[Account]) -> None:
        for account in accounts:
            self.add(account)

    def get_all(self) -> list[Account]:
        return list(self._accounts)

    def max_id(self) -> int:
        return max(self._by_id, default=0)
