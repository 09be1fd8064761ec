from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List

from cargofleet_app.models.container import Container
from cargofleet_app.services.validation import CapacityError, ShipValidationError, check_ship_capacity

if TYPE_CHECKING:
    from cargofleet_app.services.snapshot import ShipSnapshot

_LOG = logging.getLogger(__name__)


class TransferPolicy(Enum):
    # Put the container back where it was if the target ship rejects it
    RESTORE = "restore"
    # Leave it off both ships (legacy behaviour)
    STRAND = "strand"


@dataclass(slots=True)
class Ship:
    name: str = ""
    max_weight: float = 0.0
    max_container_count: int = 0
    max_speed: float = 0.0

    # Arrival order
    containers: List[Container] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_weight < 0:
            raise ShipValidationError("Max weight must not be negative.")
        if self.max_container_count < 0:
            raise ShipValidationError("Max container count must not be negative.")
        if self.max_speed < 0:
            raise ShipValidationError("Max speed must not be negative.")

    @property
    def total_max_load(self) -> float:
        return sum(c.max_load for c in self.containers)

    @property
    def total_current_load(self) -> float:
        return sum(c.current_load for c in self.containers)

    @property
    def remaining_weight(self) -> float:
        return self.max_weight - self.total_max_load

    @property
    def remaining_slots(self) -> int:
        return self.max_container_count - len(self.containers)

    def find_container(self, serial_number: str) -> Container | None:
        return next((c for c in self.containers if c.serial_number == serial_number), None)

    def load_container(self, container: Container) -> None:
        """Take ``container`` aboard. Raises CapacityError and leaves the ship unchanged if it does not fit."""
        check_ship_capacity(self.containers, container, self.max_weight, self.max_container_count)
        self.containers.append(container)
        _LOG.info("%s: loaded container %s", self.name or "ship", container.serial_number)

    def unload_container(self, serial_number: str) -> List[Container]:
        """Remove every container with ``serial_number``; no-op if none matches."""
        removed = [c for c in self.containers if c.serial_number == serial_number]
        if removed:
            self.containers[:] = [c for c in self.containers if c.serial_number != serial_number]
            _LOG.info("%s: unloaded container %s", self.name or "ship", serial_number)
        return removed

    def transfer_container(
        self,
        serial_number: str,
        target: "Ship",
        policy: TransferPolicy = TransferPolicy.RESTORE,
    ) -> Container | None:
        """
        Move a container from this ship to ``target``.

        Returns None without doing anything when the serial is not aboard.
        If ``target`` rejects the container the CapacityError propagates;
        with ``TransferPolicy.RESTORE`` the container is first put back at
        its original position, with ``TransferPolicy.STRAND`` it stays off
        both ships.
        """
        container = self.find_container(serial_number)
        if container is None:
            return None
        index = next(i for i, c in enumerate(self.containers) if c is container)
        self.containers.pop(index)
        try:
            target.load_container(container)
        except CapacityError:
            if policy is TransferPolicy.RESTORE:
                self.containers.insert(index, container)
                _LOG.warning(
                    "Transfer of %s to %s rejected; restored to %s",
                    serial_number, target.name or "ship", self.name or "ship",
                )
            else:
                _LOG.warning(
                    "Transfer of %s to %s rejected; container is on neither ship",
                    serial_number, target.name or "ship",
                )
            raise
        return container

    def snapshot(self) -> "ShipSnapshot":
        from cargofleet_app.services.snapshot import ShipSnapshot

        return ShipSnapshot.from_ship(self)
