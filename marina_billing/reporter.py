from __future__ import annotations

from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from marina_billing.domain.models import (
    BoatRecord,
    LandLocation,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)
from marina_billing.store import RecordStore


def format_inventory_line(record: BoatRecord) -> str:
    """
    Render one record in the fixed-width inventory layout, e.g.

        Big Brother            20'    slip   # 27   Owes $1200.00
    """
    head = f"{record.name:<22} {record.length:2d}' "
    location = record.location
    owed = f"Owes ${record.amount_owed:7.2f}"
    if isinstance(location, SlipLocation):
        return f"{head}   slip   # {location.slip_number:2d}   {owed}"
    if isinstance(location, LandLocation):
        return f"{head}   land      {location.bay_letter}   {owed}"
    if isinstance(location, TrailerLocation):
        return f"{head}trailor {location.license_tag:>6}   {owed}"
    if isinstance(location, StorageLocation):
        return f"{head}storage   # {location.storage_number:2d}   {owed}"
    raise TypeError(f"Unsupported location type: {type(location).__name__}")


def format_inventory(records: Iterable[BoatRecord]) -> List[str]:
    return [format_inventory_line(record) for record in records]


def print_inventory(store: RecordStore, console: Optional[Console] = None) -> None:
    """
    Render the store as a rich table, alphabetically by boat name.
    """
    console = console or Console()

    if not len(store):
        console.print("[yellow]No boats in the ledger.[/yellow]")
        return

    table = Table(
        title="Marina Inventory",
        box=box.ROUNDED,
        caption=f"{len(store)} boat(s), sorted by name",
    )

    table.add_column("Boat", style="cyan", no_wrap=True)
    table.add_column("Length (ft)", justify="right", style="magenta")
    table.add_column("Location", style="blue")
    table.add_column("Detail", justify="right")
    table.add_column("Owes ($)", justify="right", style="bold green")
    table.add_column("Monthly ($)", justify="right", style="yellow")

    for record in store.sorted_view():
        location = record.location
        if isinstance(location, SlipLocation):
            detail = f"# {location.slip_number}"
        elif isinstance(location, LandLocation):
            detail = location.bay_letter
        elif isinstance(location, TrailerLocation):
            detail = location.license_tag
        else:
            detail = f"# {location.storage_number}"

        table.add_row(
            record.name,
            str(record.length),
            record.kind.value,
            detail,
            f"{record.amount_owed:,.2f}",
            f"{store.monthly_charge_for(record):,.2f}",
        )

    table.add_section()
    table.add_row("Total", "", "", "", f"{store.total_owed():,.2f}", "")

    console.print(table)


__all__ = ["format_inventory_line", "format_inventory", "print_inventory"]
