"""
Serial numbers and container construction.

A ``SerialCounter`` belongs to one session. All container kinds draw from the
same counter, so serials are unique and increase in creation order no matter
which variants are created.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Tuple

from cargofleet_app.config.limits import SERIAL_PREFIX
from cargofleet_app.models.container import (
    AlertSink,
    Container,
    ContainerKind,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)
from cargofleet_app.services.validation import ContainerValidationError

_LOG = logging.getLogger(__name__)

_SERIAL_RE = re.compile(rf"^{SERIAL_PREFIX}-([A-Z])-(\d+)$")


class SerialCounter:
    """Monotonic counter shared by every container kind in a session."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("Serial counter must start at 1 or above.")
        self._next = start

    @property
    def peek(self) -> int:
        return self._next

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value


def format_serial(kind: ContainerKind, number: int) -> str:
    return f"{SERIAL_PREFIX}-{kind.value}-{number}"


def parse_serial(serial_number: str) -> Tuple[ContainerKind, int]:
    """Split ``KON-<code>-<n>`` into its kind and number."""
    match = _SERIAL_RE.match(serial_number or "")
    if not match:
        raise ContainerValidationError(f"Malformed serial number {serial_number!r}.")
    code, number = match.groups()
    try:
        kind = ContainerKind(code)
    except ValueError:
        raise ContainerValidationError(f"Unknown container type code {code!r} in {serial_number!r}.") from None
    return kind, int(number)


class ContainerFactory:
    """Creates containers with serials from one counter."""

    def __init__(self, counter: SerialCounter | None = None, alert_sink: AlertSink | None = None) -> None:
        self._counter = counter or SerialCounter()
        self._alert_sink = alert_sink

    @property
    def counter(self) -> SerialCounter:
        return self._counter

    def _serial(self, kind: ContainerKind) -> str:
        return format_serial(kind, self._counter.next())

    def liquid(self, max_load: float, is_hazardous: bool) -> LiquidContainer:
        container = LiquidContainer(
            serial_number=self._serial(ContainerKind.LIQUID),
            max_load=max_load,
            is_hazardous=is_hazardous,
            alert_sink=self._alert_sink,
        )
        _LOG.debug("Created %s (hazardous=%s)", container.serial_number, is_hazardous)
        return container

    def gas(self, max_load: float, pressure: float) -> GasContainer:
        container = GasContainer(
            serial_number=self._serial(ContainerKind.GAS),
            max_load=max_load,
            pressure=pressure,
            alert_sink=self._alert_sink,
        )
        _LOG.debug("Created %s (pressure=%s)", container.serial_number, pressure)
        return container

    def refrigerated(self, max_load: float, product_type: str, required_temperature: float) -> RefrigeratedContainer:
        container = RefrigeratedContainer(
            serial_number=self._serial(ContainerKind.REFRIGERATED),
            max_load=max_load,
            product_type=product_type,
            required_temperature=required_temperature,
        )
        _LOG.debug("Created %s (%s at %s)", container.serial_number, product_type, required_temperature)
        return container

    def create(self, kind: ContainerKind, max_load: float, **options: Any) -> Container:
        if kind is ContainerKind.LIQUID:
            return self.liquid(max_load, bool(options.get("is_hazardous", False)))
        if kind is ContainerKind.GAS:
            return self.gas(max_load, float(options.get("pressure", 0.0)))
        return self.refrigerated(
            max_load,
            str(options.get("product_type", "")),
            float(options.get("required_temperature", 0.0)),
        )
