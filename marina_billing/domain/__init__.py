"""
Domain package for the marina billing ledger.

Exports the boat record model, its location variants, the ordering helpers and
the ledger exceptions. Keep this package free of file I/O.
"""

from marina_billing.domain.errors import (
    BoatNotFoundError,
    MarinaError,
    OverpaymentError,
    RecordParseError,
    StoreFullError,
    WriteFailureError,
)
from marina_billing.domain.models import (
    DEFAULT_CAPACITY,
    DEFAULT_MONTHLY_RATES,
    BoatRecord,
    LandLocation,
    Location,
    LocationKind,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)
from marina_billing.domain.ordering import compare_names, name_key, sort_by_name

__all__ = [
    # Models
    "BoatRecord",
    "Location",
    "LocationKind",
    "SlipLocation",
    "LandLocation",
    "TrailerLocation",
    "StorageLocation",
    "DEFAULT_CAPACITY",
    "DEFAULT_MONTHLY_RATES",
    # Ordering
    "compare_names",
    "name_key",
    "sort_by_name",
    # Errors
    "MarinaError",
    "StoreFullError",
    "BoatNotFoundError",
    "OverpaymentError",
    "RecordParseError",
    "WriteFailureError",
]
