"""
In-memory record store for the marina billing ledger.

The store owns every boat record it holds and keeps them ordered by
case-insensitive name after each mutation, so iteration, listing and saving
are always alphabetical. It is an ordinary value passed to whoever needs it;
there is no module-level store.

Usage:
    from marina_billing.store import RecordStore

    store = RecordStore(capacity=120)
    store.add(record)
    store.apply_monthly_charge()
    store.apply_payment("Big Brother", 250.0)
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from marina_billing.config import Settings
from marina_billing.domain.errors import BoatNotFoundError, OverpaymentError, StoreFullError
from marina_billing.domain.models import (
    DEFAULT_CAPACITY,
    DEFAULT_MONTHLY_RATES,
    BoatRecord,
    LocationKind,
)
from marina_billing.domain.ordering import names_equal, sort_by_name
from marina_billing.utils.logging import get_logger

log = get_logger(__name__)


class RecordStore:
    """
    Ordered, capacity-bounded collection of boat records.

    Parameters
    ----------
    capacity : int
        Maximum number of records; adding beyond it raises StoreFullError.
    rates : Mapping[LocationKind, float] | None
        Monthly per-foot rates. Kinds missing from the mapping use the defaults.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        rates: Optional[Mapping[LocationKind, float]] = None,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.rates: Dict[LocationKind, float] = dict(DEFAULT_MONTHLY_RATES)
        if rates:
            self.rates.update({LocationKind(kind): rate for kind, rate in rates.items()})
        self._records: List[BoatRecord] = []

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecordStore":
        return cls(capacity=settings.capacity, rates=settings.monthly_rates())

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BoatRecord]:
        return iter(self.sorted_view())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __repr__(self) -> str:
        return f"RecordStore(records={len(self._records)}, capacity={self.capacity})"

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self.capacity

    def _refresh_order(self) -> None:
        self._records = sort_by_name(self._records)

    def add(self, record: BoatRecord) -> None:
        """
        Add a record and refresh the name order.

        Records whose name equals an existing one are accepted; lookups only
        ever reach the first of them.
        """
        if self.is_full:
            raise StoreFullError(self.capacity)
        self._records.append(record)
        self._refresh_order()
        log.debug("Boat added", extra={"boat": record.name, "records": len(self._records)})

    def find(self, name: str) -> Optional[int]:
        """Return the position of the first record named ``name`` (any case), or None."""
        for index, record in enumerate(self._records):
            if names_equal(record.name, name):
                return index
        return None

    def get(self, name: str) -> Optional[BoatRecord]:
        index = self.find(name)
        return None if index is None else self._records[index]

    def remove(self, name: str) -> BoatRecord:
        """Remove and return the first record named ``name``."""
        index = self.find(name)
        if index is None:
            raise BoatNotFoundError(name)
        removed = self._records.pop(index)
        self._refresh_order()
        log.debug("Boat removed", extra={"boat": removed.name, "records": len(self._records)})
        return removed

    def apply_payment(self, name: str, amount: float) -> BoatRecord:
        """
        Subtract a payment from a boat's balance.

        Paying exactly the amount owed is allowed and zeroes the balance; paying
        more raises OverpaymentError and leaves the balance untouched.
        """
        record = self.get(name)
        if record is None:
            raise BoatNotFoundError(name)
        if amount > record.amount_owed:
            raise OverpaymentError(record.name, amount, record.amount_owed)
        record.amount_owed -= amount
        log.debug(
            "Payment applied",
            extra={"boat": record.name, "amount": amount, "balance": record.amount_owed},
        )
        return record

    def rate_for(self, kind: LocationKind) -> float:
        return self.rates[kind]

    def monthly_charge_for(self, record: BoatRecord) -> float:
        return self.rate_for(record.kind) * record.length

    def apply_monthly_charge(self) -> float:
        """Add one month of location fees to every record; return the total charged."""
        total = 0.0
        for record in self._records:
            charge = self.monthly_charge_for(record)
            record.amount_owed += charge
            total += charge
        log.info("Monthly charges applied", extra={"records": len(self._records), "total": total})
        return total

    def sorted_view(self) -> Tuple[BoatRecord, ...]:
        """All records ordered by case-insensitive name, stable on equal names."""
        return tuple(self._records)

    def names(self) -> List[str]:
        return [record.name for record in self._records]

    def total_owed(self) -> float:
        return sum(record.amount_owed for record in self._records)

    def clear(self) -> None:
        self._records.clear()


__all__ = ["RecordStore"]
