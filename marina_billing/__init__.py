"""
Marina Billing - inventory and billing ledger for a marina.

Tracks boats, where each one is kept (slip, land, trailer or storage) and what
each owes, and applies monthly location-based fees. The ledger lives in a flat
comma-delimited text file that is read at startup and rewritten at exit.

The package provides:

- A record store with case-insensitive lookup and alphabetical ordering
- A lenient text codec for the ledger file
- A typer-based CLI, including the interactive menu shell
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from marina_billing.codec import (
    LoadReport,
    load_all,
    load_lines,
    parse_line,
    save_all,
    serialize_record,
)
from marina_billing.config import Settings, get_settings
from marina_billing.domain import (
    BoatNotFoundError,
    BoatRecord,
    LandLocation,
    LocationKind,
    MarinaError,
    OverpaymentError,
    RecordParseError,
    SlipLocation,
    StorageLocation,
    StoreFullError,
    TrailerLocation,
    WriteFailureError,
)
from marina_billing.store import RecordStore
from marina_billing.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Store and codec
    "RecordStore",
    "LoadReport",
    "load_all",
    "load_lines",
    "parse_line",
    "save_all",
    "serialize_record",
    # Domain
    "BoatRecord",
    "LocationKind",
    "SlipLocation",
    "LandLocation",
    "TrailerLocation",
    "StorageLocation",
    # Errors
    "MarinaError",
    "StoreFullError",
    "BoatNotFoundError",
    "OverpaymentError",
    "RecordParseError",
    "WriteFailureError",
    # Logging
    "configure_logging",
    "get_logger",
]
