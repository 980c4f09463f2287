"""
Domain models for the marina billing ledger.

A boat is kept in exactly one of four ways (slip, land, trailer or storage) and
each way carries its own identifying detail. The location is modelled as a
closed, discriminated union so that a record can only ever hold the detail that
belongs to its kind.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, Literal, Union

from pydantic import BaseModel, Field, field_validator

MAX_NAME_LENGTH = 127
MAX_LICENSE_TAG_LENGTH = 31
DEFAULT_CAPACITY = 120
FIELD_DELIMITER = ","
LINE_BREAKS = ("\n", "\r")


class LocationKind(str, Enum):
    """Where a boat is kept. Values are the words used in the ledger file."""

    SLIP = "slip"
    LAND = "land"
    TRAILER = "trailor"
    STORAGE = "storage"


DEFAULT_MONTHLY_RATES: Dict[LocationKind, float] = {
    LocationKind.SLIP: 12.50,
    LocationKind.LAND: 14.00,
    LocationKind.TRAILER: 25.00,
    LocationKind.STORAGE: 11.20,
}


def _check_ledger_text(value: str, what: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError(f"{what} must be encodable as UTF-8") from None
    if FIELD_DELIMITER in value:
        raise ValueError(f"{what} must not contain a comma")
    if any(brk in value for brk in LINE_BREAKS):
        raise ValueError(f"{what} must not contain a line break")
    return value


class SlipLocation(BaseModel):
    kind: Literal["slip"] = "slip"
    slip_number: int = Field(..., description="Slip number at the dock.")


class LandLocation(BaseModel):
    kind: Literal["land"] = "land"
    bay_letter: str = Field(..., min_length=1, max_length=1, description="Bay letter.")

    @field_validator("bay_letter")
    @classmethod
    def _bay_letter_fits_ledger(cls, value: str) -> str:
        return _check_ledger_text(value, "bay letter")


class TrailerLocation(BaseModel):
    kind: Literal["trailor"] = "trailor"
    license_tag: str = Field(
        ..., min_length=1, max_length=MAX_LICENSE_TAG_LENGTH, description="Trailer license tag."
    )

    @field_validator("license_tag")
    @classmethod
    def _license_tag_fits_ledger(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_LICENSE_TAG_LENGTH:
            raise ValueError(f"license tag must fit in {MAX_LICENSE_TAG_LENGTH} bytes")
        return _check_ledger_text(value, "license tag")


class StorageLocation(BaseModel):
    kind: Literal["storage"] = "storage"
    storage_number: int = Field(..., description="Storage space number.")


Location = Annotated[
    Union[SlipLocation, LandLocation, TrailerLocation, StorageLocation],
    Field(discriminator="kind"),
]


class BoatRecord(BaseModel):
    """
    One tracked vessel.

    ``length`` is expected to be within 0..100 feet, but range checks belong to
    whoever collects the input; the ledger stores what it is given.
    """

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    length: int = Field(..., description="Vessel length in feet.")
    location: Location
    amount_owed: float = Field(
        0.0, allow_inf_nan=False, description="Balance owed to the marina."
    )

    @field_validator("name")
    @classmethod
    def _name_fits_ledger(cls, value: str) -> str:
        # The reader skips blanks ahead of the name.
        if value[:1].isspace():
            raise ValueError("boat name must not start with whitespace")
        return _check_ledger_text(value, "boat name")

    @property
    def kind(self) -> LocationKind:
        return LocationKind(self.location.kind)


def location_word(location: Location) -> str:
    """Return the ledger word for a location variant."""
    if isinstance(location, SlipLocation):
        return LocationKind.SLIP.value
    if isinstance(location, LandLocation):
        return LocationKind.LAND.value
    if isinstance(location, TrailerLocation):
        return LocationKind.TRAILER.value
    if isinstance(location, StorageLocation):
        return LocationKind.STORAGE.value
    # Unknown kind: unreachable while the union stays closed.
    return LocationKind.SLIP.value


def location_detail(location: Location) -> str:
    """Render the detail carried by a location as it appears in the ledger."""
    if isinstance(location, SlipLocation):
        return str(location.slip_number)
    if isinstance(location, LandLocation):
        return location.bay_letter
    if isinstance(location, TrailerLocation):
        return location.license_tag
    if isinstance(location, StorageLocation):
        return str(location.storage_number)
    raise TypeError(f"Unsupported location type: {type(location).__name__}")


__all__ = [
    "MAX_NAME_LENGTH",
    "MAX_LICENSE_TAG_LENGTH",
    "DEFAULT_CAPACITY",
    "DEFAULT_MONTHLY_RATES",
    "FIELD_DELIMITER",
    "LocationKind",
    "SlipLocation",
    "LandLocation",
    "TrailerLocation",
    "StorageLocation",
    "Location",
    "BoatRecord",
    "location_word",
    "location_detail",
]
