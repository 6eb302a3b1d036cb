"""Custom exceptions for SplitLedger."""

from decimal import Decimal


class SplitLedgerError(Exception):
    """Base exception for all SplitLedger errors."""

    pass


class ConfigurationError(SplitLedgerError):
    """Raised when configuration is invalid or missing."""

    pass


class InvalidInputError(SplitLedgerError):
    """Raised when a required field is missing or empty."""

    pass


class DuplicateUserError(SplitLedgerError):
    """Raised when registering a user id that is already taken."""

    def __init__(self, user_id: str, message: str | None = None):
        self.user_id = user_id
        super().__init__(message or f"User with ID {user_id} already exists")


class UnknownUserError(SplitLedgerError):
    """Raised when an expense references a user that is not registered."""

    def __init__(self, user_id: str, role: str = "participant"):
        self.user_id = user_id
        self.role = role
        super().__init__(f"{role.capitalize()} {user_id} does not exist")


class AmountMismatchError(SplitLedgerError):
    """Raised when an expense total disagrees with the sum of its splits."""

    def __init__(self, total_amount: Decimal, split_total: Decimal):
        self.total_amount = total_amount
        self.split_total = split_total
        self.difference = total_amount - split_total
        super().__init__(
            f"Total amount {total_amount} does not match sum of splits "
            f"{split_total} (difference: {self.difference})"
        )


class LedgerFileError(SplitLedgerError):
    """Raised when a ledger document cannot be read or parsed."""

    pass
