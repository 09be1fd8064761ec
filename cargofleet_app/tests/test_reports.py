"""Tests for text reports and pandas manifests."""

from __future__ import annotations

import pytest

from cargofleet_app.reports import (
    build_fleet_info_text,
    build_ship_info_text,
    fleet_manifest_frame,
    ship_manifest_frame,
)
from cargofleet_app.models import Ship
from cargofleet_app.reports.manifest import MANIFEST_COLUMNS


@pytest.fixture
def loaded_ship(ship1, sample_containers):
    for c, weight in zip(sample_containers, (800, 1400, 900)):
        ship1.load_container(c)
        c.load(weight)
    return ship1


def test_ship_info_text(loaded_ship):
    assert build_ship_info_text(loaded_ship) == "\n".join(
        [
            "Ship Info: Max Speed = 30 knots, Containers Count = 3",
            "  - KON-L-1, Load: 800/2000",
            "  - KON-G-2, Load: 1400/1500",
            "  - KON-C-3, Load: 900/1000",
        ]
    )


def test_ship_info_text_keeps_full_precision(factory):
    reefer = factory.refrigerated(2500000, "Grain", 12)
    ship = Ship(name="bulk", max_weight=3000000, max_container_count=2, max_speed=14.5)
    ship.load_container(reefer)
    reefer.load(1234567)
    gas = factory.gas(200, pressure=3)
    ship.load_container(gas)
    gas.load(12.25)
    assert build_ship_info_text(ship).splitlines() == [
        "Ship Info: Max Speed = 14.5 knots, Containers Count = 2",
        f"  - {reefer.serial_number}, Load: 1234567/2500000",
        f"  - {gas.serial_number}, Load: 12.25/200",
    ]


def test_empty_ship_info_text(ship2):
    assert build_ship_info_text(ship2) == "Ship Info: Max Speed = 28 knots, Containers Count = 0"


def test_fleet_info_text(loaded_ship, ship2):
    text = build_fleet_info_text([loaded_ship, ship2])
    assert text.count("Ship Info:") == 2


def test_ship_manifest_frame(loaded_ship):
    df = ship_manifest_frame(loaded_ship)
    assert list(df.columns) == MANIFEST_COLUMNS
    assert df["serial_number"].tolist() == ["KON-L-1", "KON-G-2", "KON-C-3"]
    assert df["kind"].tolist() == ["LIQUID", "GAS", "REFRIGERATED"]
    assert df["load_ratio"].iloc[2] == pytest.approx(0.9)


def test_fleet_manifest_frame(loaded_ship, ship2):
    loaded_ship.transfer_container("KON-C-3", ship2)
    df = fleet_manifest_frame([loaded_ship, ship2])
    assert len(df) == 3
    assert df.loc[df["serial_number"] == "KON-C-3", "ship"].item() == "ship2"


def test_empty_manifest_has_columns(ship2):
    df = ship_manifest_frame(ship2)
    assert df.empty
    assert list(df.columns) == MANIFEST_COLUMNS
