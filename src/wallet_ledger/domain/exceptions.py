class DomainError(Exception):
    """Base exception for domain errors."""

    code = "DOMAIN_ERROR"


class AccountNotFoundError(DomainError):
    """Raised when an account cannot be found."""

    code = "ACCOUNT_NOT_FOUND"

    def __init__(self, account_id: int) -> None:
        self.account_id = account_id
        super().__init__(f"Account {account_id} not found")


class PaymentNotFoundError(DomainError):
    """Raised when a payment cannot be found."""

    code = "PAYMENT_NOT_FOUND"

    def __init__(self, payment_id: str) -> None:
        self.payment_id = payment_id
        super().__init__(f"Payment {payment_id} not found")


class FavoriteNotFoundError(DomainError):
    """Raised when a favorite cannot be found."""

    code = "FAVORITE_NOT_FOUND"

    def __init__(self, favorite_id: str) -> None:
        self.favorite_id = favorite_id
        super().__init__(f"Favorite {favorite_id} not found")


class FavoriteAlreadyAddedError(DomainError):
    """Raised when a payment has already been saved as a favorite."""

    code = "FAVORITE_ALREADY_ADDED"

    def __init__(self, payment_id: str, favorite_id: str) -> None:
        self.payment_id = payment_id
        self.favorite_id = favorite_id
        super().__init__(f"Payment {payment_id} already added to favorites as {favorite_id}")


class InvalidAmountError(DomainError):
    """Raised when an amount is not positive."""

    code = "INVALID_AMOUNT"

    def __init__(self, amount: int, reason: str = "amount must be positive") -> None:
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid amount {amount}: {reason}")


class PhoneAlreadyRegisteredError(DomainError):
    """Raised when registering a phone that already has an account."""

    code = "PHONE_ALREADY_REGISTERED"

    def __init__(self, phone: str) -> None:
        self.phone = phone
        super().__init__(f"Phone {phone} already registered")


class InsufficientFundsError(DomainError):
    """Raised when account has insufficient funds for a payment."""

    code = "INSUFFICIENT_FUNDS"

    def __init__(self, account_id: int, required: int, available: int) -> None:
        self.account_id = account_id
        self.required = required
        self.available = available
        super().__init__(f"Account {account_id} has insufficient funds: required {required}, available {available}")


class SnapshotFormatError(DomainError, ValueError):
    """Raised when snapshot content cannot be decoded."""

    code = "SNAPSHOT_FORMAT"

    def __init__(self, record_index: int, reason: str) -> None:
        self.record_index = record_index
        self.reason = reason
        super().__init__(f"Malformed snapshot record {record_index}: {reason}")


class DuplicateAccountError(DomainError):
    """Raised when an imported account collides with an existing one."""

    code = "DUPLICATE_ACCOUNT"

    def __init__(self, account_id: int, phone: str) -> None:
        self.account_id = account_id
        self.phone = phone
        super().__init__(f"Imported account {account_id} ({phone}) duplicates an existing account")
