"""
Tabular manifests (pandas) of the containers aboard one or more ships.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from cargofleet_app.models import Ship

MANIFEST_COLUMNS = [
    "ship",
    "serial_number",
    "kind",
    "current_load",
    "max_load",
    "load_ratio",
]


def _rows(ship: Ship) -> list[dict]:
    snap = ship.snapshot()
    return [
        {
            "ship": snap.name,
            "serial_number": c.serial_number,
            "kind": c.kind,
            "current_load": c.current_load,
            "max_load": c.max_load,
            "load_ratio": c.load_ratio,
        }
        for c in snap.containers
    ]


def ship_manifest_frame(ship: Ship) -> pd.DataFrame:
    """One row per container, in arrival order."""
    return pd.DataFrame(_rows(ship), columns=MANIFEST_COLUMNS)


def fleet_manifest_frame(ships: Iterable[Ship]) -> pd.DataFrame:
    rows: list[dict] = []
    for ship in ships:
        rows.extend(_rows(ship))
    return pd.DataFrame(rows, columns=MANIFEST_COLUMNS)
