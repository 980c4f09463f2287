from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

import typer

from marina_billing.codec import load_all, parse_line, save_all
from marina_billing.config import get_settings
from marina_billing.domain.errors import (
    BoatNotFoundError,
    OverpaymentError,
    RecordParseError,
    StoreFullError,
    WriteFailureError,
)
from marina_billing.reporter import format_inventory, print_inventory
from marina_billing.store import RecordStore
from marina_billing.utils.logging import configure_logging

app = typer.Typer(help="Marina billing ledger CLI.")

MENU_PROMPT = "(I)nventory, (A)dd, (R)emove, (P)ayment, (M)onth, e(X)it"
PROMPT_WIDTH = 57

FileOption = typer.Option(
    None,
    "--file",
    "-f",
    help="Ledger file (defaults to MARINA_DATA_FILE).",
)


def _resolve_path(path: Optional[Path]) -> Path:
    return path or get_settings().data_file


def _load(path: Path) -> RecordStore:
    settings = get_settings()
    return load_all(path, capacity=settings.capacity, rates=settings.monthly_rates())


def _save(store: RecordStore, path: Path) -> bool:
    try:
        save_all(store, path)
    except WriteFailureError as exc:
        typer.echo(str(exc), err=True)
        return False
    return True


def _save_or_exit(store: RecordStore, path: Path) -> None:
    if not _save(store, path):
        raise typer.Exit(code=1)


def _ask(label: str, **kwargs: Any) -> Any:
    return typer.prompt(f"{label:<{PROMPT_WIDTH}}", prompt_suffix=": ", **kwargs)


@app.callback()
def _configure() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    rates = ", ".join(f"{kind.value}={rate:.2f}" for kind, rate in settings.monthly_rates().items())
    typer.echo(f"file={settings.data_file} | capacity={settings.capacity} | rates: {rates}")


@app.command()
def inventory(
    path: Optional[Path] = FileOption,
    plain: bool = typer.Option(False, "--plain", help="Fixed-width text instead of a table."),
) -> None:
    """
    List all boats alphabetically with what each owes.
    """
    store = _load(_resolve_path(path))
    if plain:
        for line in format_inventory(store.sorted_view()):
            typer.echo(line)
        return
    print_inventory(store)


@app.command()
def add(
    line: str = typer.Argument(..., help='Boat data, e.g. "Brooks,34,trailor,AAR666,99.00".'),
    path: Optional[Path] = FileOption,
) -> None:
    """
    Add a boat from a ledger-format line.
    """
    target = _resolve_path(path)
    store = _load(target)
    try:
        store.add(parse_line(line.strip()))
    except RecordParseError:
        typer.echo("Invalid CSV format.", err=True)
        raise typer.Exit(code=1)
    except StoreFullError:
        typer.echo("Cannot add new boat: array is full.", err=True)
        raise typer.Exit(code=1)
    _save_or_exit(store, target)


@app.command()
def remove(
    name: str = typer.Argument(..., help="Boat name (any case)."),
    path: Optional[Path] = FileOption,
) -> None:
    """
    Remove a boat by name.
    """
    target = _resolve_path(path)
    store = _load(target)
    try:
        store.remove(name.strip())
    except BoatNotFoundError:
        typer.echo("No boat with that name", err=True)
        raise typer.Exit(code=1)
    _save_or_exit(store, target)


@app.command()
def pay(
    name: str = typer.Argument(..., help="Boat name (any case)."),
    amount: float = typer.Argument(..., min=0.0, help="Amount paid."),
    path: Optional[Path] = FileOption,
) -> None:
    """
    Record a payment against a boat's balance.
    """
    target = _resolve_path(path)
    store = _load(target)
    try:
        record = store.apply_payment(name.strip(), amount)
    except BoatNotFoundError:
        typer.echo("No boat with that name", err=True)
        raise typer.Exit(code=1)
    except OverpaymentError as exc:
        typer.echo(f"That is more than the amount owed, ${exc.balance:.2f}", err=True)
        raise typer.Exit(code=1)
    _save_or_exit(store, target)
    typer.echo(f"{record.name} now owes ${record.amount_owed:.2f}")


@app.command()
def month(path: Optional[Path] = FileOption) -> None:
    """
    Apply one month of location charges to every boat.
    """
    target = _resolve_path(path)
    store = _load(target)
    total = store.apply_monthly_charge()
    _save_or_exit(store, target)
    typer.echo(f"Charged ${total:.2f} across {len(store)} boat(s)")


def _shell_add(store: RecordStore) -> None:
    line = _ask("Please enter the boat data in CSV format")
    try:
        record = parse_line(line.strip())
    except RecordParseError:
        typer.echo("Invalid CSV format.")
        return
    try:
        store.add(record)
    except StoreFullError:
        typer.echo("Cannot add new boat: array is full.")


def _shell_remove(store: RecordStore) -> None:
    name = _ask("Please enter the boat name")
    try:
        store.remove(name.strip())
    except BoatNotFoundError:
        typer.echo("No boat with that name")


def _shell_payment(store: RecordStore) -> None:
    name = _ask("Please enter the boat name").strip()
    if store.get(name) is None:
        typer.echo("No boat with that name")
        return
    amount = _ask("Please enter the amount to be paid", type=float)
    try:
        store.apply_payment(name, amount)
    except OverpaymentError as exc:
        typer.echo(f"That is more than the amount owed, ${exc.balance:.2f}")


@app.command()
def shell(path: Optional[Path] = FileOption) -> None:
    """
    Interactive menu: inventory, add, remove, payment, month, exit.

    The ledger is saved on exit, including end of input.
    """
    target = _resolve_path(path)
    store = _load(target)

    typer.echo("\nWelcome to the Boat Management System")
    typer.echo("-------------------------------------\n")

    while True:
        try:
            cmd = typer.prompt(MENU_PROMPT, default="", show_default=False, prompt_suffix=" : ")
        except typer.Abort:
            break
        cmd = cmd.strip()
        if not cmd:
            continue

        choice = cmd[0].lower()
        try:
            if choice == "i":
                for line in format_inventory(store.sorted_view()):
                    typer.echo(line)
            elif choice == "a":
                _shell_add(store)
            elif choice == "r":
                _shell_remove(store)
            elif choice == "p":
                _shell_payment(store)
            elif choice == "m":
                store.apply_monthly_charge()
            elif choice == "x":
                typer.echo("\nExiting the Boat Management System\n")
                break
            else:
                typer.echo(f"Invalid option {cmd}")
        except typer.Abort:
            break
        typer.echo("")

    _save_or_exit(store, target)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
