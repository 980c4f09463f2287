"""Logging setup shared by the ledger CLI and library modules."""

from marina_billing.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
