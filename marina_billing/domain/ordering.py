"""
Case-insensitive name ordering for boat records.

Names are compared on their lowercase-folded form by plain code point, so the
order is ordinary case-insensitive lexicographic order with no locale rules: a
name that is a prefix of another sorts first.
"""

from __future__ import annotations

from typing import Iterable, List

from marina_billing.domain.models import BoatRecord


def name_key(name: str) -> str:
    """Sort key for a boat name."""
    return name.lower()


def compare_names(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, equal to, or after ``b``."""
    ka, kb = name_key(a), name_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def names_equal(a: str, b: str) -> bool:
    return compare_names(a, b) == 0


def sort_by_name(records: Iterable[BoatRecord]) -> List[BoatRecord]:
    """Return records ordered by name; records with equal names keep their relative order."""
    return sorted(records, key=lambda record: name_key(record.name))


def is_name_sorted(records: Iterable[BoatRecord]) -> bool:
    keys = [name_key(record.name) for record in records]
    return all(prev <= cur for prev, cur in zip(keys, keys[1:]))


__all__ = ["name_key", "compare_names", "names_equal", "sort_by_name", "is_name_sorted"]
