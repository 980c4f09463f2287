"""
Sample data generator for the marina billing ledger.

Writes a deterministic, seeded ledger file in the same one-line-per-boat format
the application reads, which is handy for demos and for exercising the CLI.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import typer

from marina_billing.codec import build_location, serialize_record
from marina_billing.config import get_settings
from marina_billing.domain.models import BoatRecord, LocationKind

app = typer.Typer(help="Generate a sample marina ledger file.")

_ADJECTIVES = ["Big", "Blue", "Lazy", "Salty", "Swift", "Golden", "Silent", "Wild", "Lucky", "Old"]
_NOUNS = ["Brother", "Gull", "Marlin", "Breeze", "Anchor", "Otter", "Tide", "Pelican", "Heron"]


def _boat_names(rng: random.Random, count: int) -> list[str]:
    names: list[str] = []
    seen: set[str] = set()
    while len(names) < count:
        name = f"{rng.choice(_ADJECTIVES)} {rng.choice(_NOUNS)}"
        if name.lower() in seen:
            name = f"{name} {len(names) + 1}"
        seen.add(name.lower())
        names.append(name)
    return names


def _detail_for(rng: random.Random, kind: LocationKind) -> str:
    if kind is LocationKind.LAND:
        return rng.choice("ABCDEFGH")
    if kind is LocationKind.TRAILER:
        letters = "".join(rng.choice("ABCDEFGHJKLMNPRSTUVWXYZ") for _ in range(3))
        return f"{letters}{rng.randint(100, 999)}"
    return str(rng.randint(1, 99))


def _generate_ledger(path: Path, boats: int, seed: int) -> int:
    rng = random.Random(seed)
    kinds = list(LocationKind)

    lines: list[str] = []
    for name in _boat_names(rng, boats):
        kind = rng.choice(kinds)
        record = BoatRecord(
            name=name,
            length=rng.randint(10, 60),
            location=build_location(kind, _detail_for(rng, kind)),
            amount_owed=round(rng.uniform(0, 2_000), 2),
        )
        lines.append(serialize_record(record))

    with path.open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
    return len(lines)


@app.command()
def main(
    boats: int = typer.Option(
        25,
        "--boats",
        "-n",
        min=0,
        help="Number of boats to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (defaults to MARINA_DATA_FILE).",
    ),
) -> None:
    """
    Generate a sample ledger file.
    """
    settings = get_settings()
    path = output or settings.data_file
    path.parent.mkdir(parents=True, exist_ok=True)

    if boats > settings.capacity:
        typer.echo(
            f"Warning: {boats} boats exceeds capacity {settings.capacity}; "
            "the extra records will be dropped on load.",
            err=True,
        )

    written = _generate_ledger(path, boats=boats, seed=seed)
    typer.echo(f"Wrote {written} boat(s) -> {path} (seed={seed})")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
