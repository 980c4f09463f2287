"""
Domain exceptions for the marina billing ledger.

Every failure raised by the store or the codec is local and recoverable: the
in-memory store is left exactly as it was before the failing call.
"""

from __future__ import annotations


class MarinaError(Exception):
    """Base class for ledger errors."""


class StoreFullError(MarinaError):
    """Raised when adding a record to a store already at capacity."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Store is full ({capacity} records)")
        self.capacity = capacity


class BoatNotFoundError(MarinaError, LookupError):
    """Raised when no record matches a boat name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No boat named '{name}'")
        self.name = name


class OverpaymentError(MarinaError):
    """Raised when a payment exceeds the balance owed."""

    def __init__(self, name: str, amount: float, balance: float) -> None:
        super().__init__(
            f"Payment of {amount:.2f} for '{name}' exceeds amount owed {balance:.2f}"
        )
        self.name = name
        self.amount = amount
        self.balance = balance


class RecordParseError(MarinaError, ValueError):
    """Raised when a text line cannot be parsed into a boat record."""

    def __init__(self, line: str, reason: str = "expected 5 comma-separated fields") -> None:
        super().__init__(f"Malformed record line ({reason}): {line!r}")
        self.line = line
        self.reason = reason


class WriteFailureError(MarinaError, OSError):
    """Raised when the ledger file cannot be written."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Unable to write file '{path}': {cause}")
        self.path = path
        self.cause = cause


__all__ = [
    "MarinaError",
    "StoreFullError",
    "BoatNotFoundError",
    "OverpaymentError",
    "RecordParseError",
    "WriteFailureError",
]
