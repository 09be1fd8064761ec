"""
Business logic for one fleet session: ships, containers and transfers.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from cargofleet_app.models import (
    AlertSink,
    Container,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
    Ship,
    TransferPolicy,
)
from cargofleet_app.services.serials import ContainerFactory, SerialCounter
from cargofleet_app.services.snapshot import ShipSnapshot
from cargofleet_app.services.validation import CapacityError, ShipValidationError

_LOG = logging.getLogger(__name__)


class FleetService:
    """
    Owns the ships and the container factory of a single simulation.

    Serial numbers restart with every new service, so two sessions never
    share counter state.
    """

    def __init__(
        self,
        transfer_policy: TransferPolicy = TransferPolicy.RESTORE,
        alert_sink: AlertSink | None = None,
        counter: SerialCounter | None = None,
    ) -> None:
        self._factory = ContainerFactory(counter=counter, alert_sink=alert_sink)
        self._ships: Dict[str, Ship] = {}
        self.transfer_policy = transfer_policy

    @property
    def factory(self) -> ContainerFactory:
        return self._factory

    def add_ship(self, name: str, max_weight: float, max_container_count: int, max_speed: float) -> Ship:
        if not name.strip():
            raise ShipValidationError("Ship name is required.")
        if name in self._ships:
            raise ShipValidationError(f"Ship {name!r} already exists.")
        ship = Ship(
            name=name,
            max_weight=max_weight,
            max_container_count=max_container_count,
            max_speed=max_speed,
        )
        self._ships[name] = ship
        _LOG.info("Added ship %s (max weight %g, %d slots)", name, max_weight, max_container_count)
        return ship

    def get_ship(self, name: str) -> Ship:
        ship = self._ships.get(name)
        if ship is None:
            raise ShipValidationError(f"Unknown ship {name!r}.")
        return ship

    def list_ships(self) -> List[Ship]:
        return list(self._ships.values())

    def new_liquid(self, max_load: float, is_hazardous: bool) -> LiquidContainer:
        return self._factory.liquid(max_load, is_hazardous)

    def new_gas(self, max_load: float, pressure: float) -> GasContainer:
        return self._factory.gas(max_load, pressure)

    def new_refrigerated(self, max_load: float, product_type: str, required_temperature: float) -> RefrigeratedContainer:
        return self._factory.refrigerated(max_load, product_type, required_temperature)

    def locate(self, serial_number: str) -> Optional[str]:
        """Name of the ship carrying ``serial_number``, or None."""
        for ship in self._ships.values():
            if ship.find_container(serial_number) is not None:
                return ship.name
        return None

    def load_container(self, ship_name: str, container: Container) -> None:
        ship = self.get_ship(ship_name)
        holder = self.locate(container.serial_number)
        if holder is not None and holder != ship_name:
            raise CapacityError(
                f"Container {container.serial_number} is aboard {holder}; transfer it instead.",
                reason="duplicate",
            )
        try:
            ship.load_container(container)
        except CapacityError as exc:
            _LOG.warning("Rejected %s on %s: %s", container.serial_number, ship_name, exc)
            raise

    def unload_container(self, ship_name: str, serial_number: str) -> List[Container]:
        return self.get_ship(ship_name).unload_container(serial_number)

    def transfer_container(self, serial_number: str, source_name: str, target_name: str) -> Container | None:
        source = self.get_ship(source_name)
        target = self.get_ship(target_name)
        moved = source.transfer_container(serial_number, target, policy=self.transfer_policy)
        if moved is None:
            _LOG.info("Transfer skipped: %s not aboard %s", serial_number, source_name)
        else:
            _LOG.info("Transferred %s from %s to %s", serial_number, source_name, target_name)
        return moved

    def snapshot(self) -> List[ShipSnapshot]:
        return [ship.snapshot() for ship in self._ships.values()]
