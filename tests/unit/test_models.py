from __future__ import annotations

import pytest
from pydantic import ValidationError

from marina_billing.domain.models import (
    BoatRecord,
    LandLocation,
    LocationKind,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
    location_detail,
    location_word,
)


def test_location_is_discriminated_by_kind():
    record = BoatRecord(
        name="Sea Sprite",
        length=18,
        location={"kind": "land", "bay_letter": "C"},
        amount_owed=10.0,
    )

    assert isinstance(record.location, LandLocation)
    assert record.kind is LocationKind.LAND


def test_location_rejects_detail_of_another_kind():
    with pytest.raises(ValidationError):
        BoatRecord(name="Sea Sprite", length=18, location={"kind": "land", "slip_number": 4})


def test_name_with_comma_is_rejected():
    with pytest.raises(ValidationError):
        BoatRecord(name="Big, Brother", length=20, location=SlipLocation(slip_number=1))


def test_name_length_is_bounded():
    BoatRecord(name="x" * 127, length=20, location=SlipLocation(slip_number=1))
    with pytest.raises(ValidationError):
        BoatRecord(name="x" * 128, length=20, location=SlipLocation(slip_number=1))


def test_empty_name_is_rejected():
    with pytest.raises(ValidationError):
        BoatRecord(name="", length=20, location=SlipLocation(slip_number=1))


def test_bay_letter_must_be_single_character():
    with pytest.raises(ValidationError):
        LandLocation(bay_letter="CD")


def test_license_tag_is_bounded():
    TrailerLocation(license_tag="T" * 31)
    with pytest.raises(ValidationError):
        TrailerLocation(license_tag="T" * 32)


@pytest.mark.parametrize("name", ["  Gull", "\tGull", "Gull\nWing", "Gull\rWing", "Gull\ud800"])
def test_name_that_cannot_be_written_back_is_rejected(name):
    with pytest.raises(ValidationError):
        BoatRecord(name=name, length=20, location=SlipLocation(slip_number=1))


@pytest.mark.parametrize("letter", [",", "\n", "\r"])
def test_bay_letter_rejects_delimiter_and_line_breaks(letter):
    with pytest.raises(ValidationError):
        LandLocation(bay_letter=letter)


@pytest.mark.parametrize("tag", ["", "AB,12", "AB\n12", "\u00e9" * 16])
def test_license_tag_rejects_text_the_ledger_cannot_hold(tag):
    with pytest.raises(ValidationError):
        TrailerLocation(license_tag=tag)


def test_license_tag_limit_counts_bytes():
    assert TrailerLocation(license_tag="\u00e9" * 15 + "A").license_tag == "\u00e9" * 15 + "A"


@pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
def test_amount_owed_must_be_finite(amount):
    with pytest.raises(ValidationError):
        BoatRecord(
            name="Gull", length=20, location=SlipLocation(slip_number=1), amount_owed=amount
        )


def test_length_is_not_range_checked():
    record = BoatRecord(name="Barge", length=250, location=StorageLocation(storage_number=3))
    assert record.length == 250


@pytest.mark.parametrize(
    ("location", "word", "detail"),
    [
        (SlipLocation(slip_number=27), "slip", "27"),
        (LandLocation(bay_letter="C"), "land", "C"),
        (TrailerLocation(license_tag="AAR666"), "trailor", "AAR666"),
        (StorageLocation(storage_number=12), "storage", "12"),
    ],
)
def test_location_word_and_detail(location, word, detail):
    assert location_word(location) == word
    assert location_detail(location) == detail


def test_location_kind_values_match_ledger_words():
    assert [kind.value for kind in LocationKind] == ["slip", "land", "trailor", "storage"]
