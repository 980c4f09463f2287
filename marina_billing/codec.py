"""
Text codec for the marina ledger file.

Each line of the ledger holds one boat:

    name,length,kind,detail,amountOwed

for example ``Big Brother,20,slip,27,1200.00``. There is no header and no
quoting, so names never contain commas. Loading is lenient: lines that do not
yield all five fields are skipped and counted, never fatal.

Usage:
    from marina_billing.codec import load_all, save_all

    store = load_all("BoatData.csv")
    ...
    save_all(store, "BoatData.csv")
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from marina_billing.domain.errors import RecordParseError, StoreFullError, WriteFailureError
from marina_billing.domain.models import (
    DEFAULT_CAPACITY,
    MAX_LICENSE_TAG_LENGTH,
    MAX_NAME_LENGTH,
    BoatRecord,
    LandLocation,
    Location,
    LocationKind,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    location_detail,
    location_word,
)
from marina_billing.store import RecordStore
from marina_billing.utils.logging import get_logger

log = get_logger(__name__)

# Leading blanks are skipped before the name and before the two numbers. Text
# after the amount is ignored.
_LINE_RE = re.compile(
    r"\s*(?P<name>[^,\s][^,]*)"
    r",\s*(?P<length>[+-]?\d+)"
    r",(?P<kind>[^,]+)"
    r",(?P<detail>[^,]+)"
    r",\s*(?P<owed>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


@dataclass
class LoadReport:
    """Outcome of loading ledger lines into a store."""

    loaded: int = 0
    ignored: int = 0
    dropped: int = 0
    ignored_lines: List[int] = field(default_factory=list)


def parse_location_kind(word: str) -> LocationKind:
    """Map a ledger word to a location kind; unrecognized words mean a slip."""
    try:
        return LocationKind(word.lower())
    except ValueError:
        return LocationKind.SLIP


def _int_or_zero(text: str) -> int:
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _truncate_bytes(text: str, limit: int) -> str:
    return text.encode("utf-8")[:limit].decode("utf-8", errors="ignore")


def build_location(kind: LocationKind, detail: str) -> Location:
    """Interpret detail text according to the location kind."""
    if kind is LocationKind.SLIP:
        return SlipLocation(slip_number=_int_or_zero(detail))
    if kind is LocationKind.LAND:
        return LandLocation(bay_letter=detail[0])
    if kind is LocationKind.TRAILER:
        return TrailerLocation(license_tag=_truncate_bytes(detail, MAX_LICENSE_TAG_LENGTH))
    if kind is LocationKind.STORAGE:
        return StorageLocation(storage_number=_int_or_zero(detail))
    raise ValueError(f"Unsupported location kind: {kind!r}")


def parse_line(line: str) -> BoatRecord:
    """
    Parse one ledger line into a boat record.

    Raises
    ------
    RecordParseError
        If fewer than five fields can be extracted, or the fields do not make
        a valid record (for instance an amount that overflows to infinity).
    """
    match = _LINE_RE.match(line)
    if match is None:
        raise RecordParseError(line)
    kind = parse_location_kind(match.group("kind"))
    try:
        return BoatRecord(
            name=match.group("name")[:MAX_NAME_LENGTH],
            length=int(match.group("length")),
            location=build_location(kind, match.group("detail")),
            amount_owed=float(match.group("owed")),
        )
    except ValidationError as exc:
        raise RecordParseError(line, "fields do not form a valid record") from exc


def serialize_record(record: BoatRecord) -> str:
    """Render a record as a ledger line, without the trailing newline."""
    return (
        f"{record.name},{record.length},{location_word(record.location)},"
        f"{location_detail(record.location)},{record.amount_owed:.2f}"
    )


def load_lines(lines: Iterable[Union[str, bytes]], store: RecordStore) -> LoadReport:
    """
    Parse ``lines`` and add every valid record to ``store``.

    Byte lines are decoded as UTF-8 one at a time. Undecodable and malformed
    lines are ignored and records beyond the store's capacity are
    dropped; both are counted in the returned report.
    """
    report = LoadReport()
    for lineno, line in enumerate(lines, start=1):
        try:
            if isinstance(line, bytes):
                line = line.decode("utf-8")
            record = parse_line(line)
        except (UnicodeDecodeError, RecordParseError):
            report.ignored += 1
            report.ignored_lines.append(lineno)
            log.debug("Ledger line ignored", extra={"line": lineno})
            continue
        try:
            store.add(record)
        except StoreFullError:
            report.dropped += 1
            continue
        report.loaded += 1
    return report


def load_all(
    path: Path | str,
    capacity: int = DEFAULT_CAPACITY,
    rates: Optional[Mapping[LocationKind, float]] = None,
) -> RecordStore:
    """
    Build a store from the ledger file at ``path``.

    A missing file yields an empty store. The file is read as bytes so that a
    line which is not valid UTF-8 is skipped like any other malformed line.
    """
    store = RecordStore(capacity=capacity, rates=rates)
    source = Path(path)
    try:
        with source.open("rb") as f:
            report = load_lines(f, store)
    except FileNotFoundError:
        log.info("Ledger file not found, starting empty", extra={"path": str(source)})
        return store

    if report.ignored:
        log.warning(
            f"Ignored {report.ignored} malformed line(s) in {source}",
            extra={"path": str(source), "ignored_lines": report.ignored_lines},
        )
    if report.dropped:
        log.warning(
            f"Dropped {report.dropped} record(s) beyond capacity {store.capacity}",
            extra={"path": str(source), "dropped": report.dropped},
        )
    log.info("Ledger loaded", extra={"path": str(source), "records": report.loaded})
    return store


def save_all(store: RecordStore, path: Path | str) -> None:
    """
    Overwrite the ledger file at ``path`` with the store, in name order.

    Raises
    ------
    WriteFailureError
        If the file cannot be written.
    """
    destination = Path(path)
    try:
        with destination.open("w", encoding="utf-8") as f:
            for record in store.sorted_view():
                f.write(serialize_record(record) + "\n")
    except OSError as exc:
        log.error("Unable to write ledger", extra={"path": str(destination), "error": str(exc)})
        raise WriteFailureError(str(destination), exc) from exc
    log.info("Ledger saved", extra={"path": str(destination), "records": len(store)})


__all__ = [
    "LoadReport",
    "parse_location_kind",
    "build_location",
    "parse_line",
    "serialize_record",
    "load_lines",
    "load_all",
    "save_all",
]
