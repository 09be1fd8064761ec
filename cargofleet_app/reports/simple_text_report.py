"""
Simple text-based report builder for ships and their containers.
"""

from __future__ import annotations

from typing import Iterable

from cargofleet_app.models import Ship


def _num(value: float) -> str:
    """Whole numbers without a trailing .0, anything else at full precision."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def build_ship_info_text(ship: Ship) -> str:
    snap = ship.snapshot()
    lines: list[str] = []
    lines.append(
        f"Ship Info: Max Speed = {_num(snap.max_speed)} knots, Containers Count = {snap.container_count}"
    )
    for c in snap.containers:
        lines.append(f"  - {c.serial_number}, Load: {_num(c.current_load)}/{_num(c.max_load)}")
    return "\n".join(lines)


def build_fleet_info_text(ships: Iterable[Ship]) -> str:
    return "\n".join(build_ship_info_text(s) for s in ships)
