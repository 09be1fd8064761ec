"""
Read-only snapshots of ships and their containers for reports and tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from cargofleet_app.models import Container, Ship


@dataclass(slots=True, frozen=True)
class ContainerSnapshot:
    serial_number: str
    kind: str
    current_load: float
    max_load: float
    load_ratio: float

    @classmethod
    def from_container(cls, container: "Container") -> "ContainerSnapshot":
        return cls(
            serial_number=container.serial_number,
            kind=container.kind.name,
            current_load=container.current_load,
            max_load=container.max_load,
            load_ratio=container.load_ratio,
        )


@dataclass(slots=True, frozen=True)
class ShipSnapshot:
    name: str
    max_speed: float
    container_count: int
    total_max_load: float
    total_current_load: float
    containers: List[ContainerSnapshot] = field(default_factory=list)

    @classmethod
    def from_ship(cls, ship: "Ship") -> "ShipSnapshot":
        return cls(
            name=ship.name,
            max_speed=ship.max_speed,
            container_count=len(ship.containers),
            total_max_load=ship.total_max_load,
            total_current_load=ship.total_current_load,
            containers=[ContainerSnapshot.from_container(c) for c in ship.containers],
        )

    @property
    def serial_numbers(self) -> List[str]:
        return [c.serial_number for c in self.containers]
