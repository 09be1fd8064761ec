"""
Container models: the shared load/unload contract and its three variants.

Serial numbers are assigned by ``services.serials.ContainerFactory``; the
models only store them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, ClassVar, List, Protocol, runtime_checkable

from cargofleet_app.config.limits import (
    GAS_RESIDUE_FRACTION,
    HAZARD_ATTEMPT_MESSAGE,
    HAZARDOUS_LIQUID_FILL_FRACTION,
    LIQUID_FILL_FRACTION,
)
from cargofleet_app.services.validation import (
    ContainerValidationError,
    check_overfill,
    check_weight,
    exceeds_limit,
)

_LOG = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ContainerKind(Enum):
    """Closed set of container kinds; the value is the serial type code."""

    LIQUID = "L"
    GAS = "G"
    REFRIGERATED = "C"


@dataclass(slots=True, frozen=True)
class HazardAlert:
    serial_number: str
    message: str
    created_at: datetime = field(default_factory=_utc_now)

    def __str__(self) -> str:
        return f"Hazard Alert [{self.serial_number}]: {self.message}"


AlertSink = Callable[[HazardAlert], None]


@runtime_checkable
class HazardNotifier(Protocol):
    """Capability of containers that may carry hazardous material."""

    def notify_hazard(self, message: str) -> HazardAlert:
        ...


@dataclass(slots=True, eq=False)
class Container:
    """Base container. Use one of the variants below."""

    kind: ClassVar[ContainerKind]

    serial_number: str
    max_load: float
    current_load: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if not hasattr(type(self), "kind"):
            raise TypeError("Container is abstract; create a Liquid, Gas or Refrigerated container.")
        if not self.serial_number:
            raise ContainerValidationError("Container serial number is required.")
        if not math.isfinite(self.max_load) or self.max_load <= 0:
            raise ContainerValidationError(
                f"Max load of {self.serial_number} must be a finite number greater than zero."
            )

    @property
    def effective_ceiling(self) -> float:
        return self.max_load

    @property
    def load_ratio(self) -> float:
        return self.current_load / self.max_load if self.max_load else 0.0

    def can_accept(self, weight: float) -> bool:
        """Whether ``weight`` fits under the effective ceiling. No side effects."""
        return not exceeds_limit(self.current_load, weight, self.effective_ceiling)

    def load(self, weight: float) -> bool:
        """
        Add ``weight`` to the current load.

        Raises OverfillError (current load unchanged) if the result would pass
        ``max_load``. Returns True once the weight is applied.
        """
        check_weight(weight)
        check_overfill(self, weight)
        # Rounding slack accepted by the check never lifts the load past max_load
        self.current_load = min(self.current_load + weight, self.max_load)
        _LOG.debug("Loaded %g into %s (%g/%g)", weight, self.serial_number, self.current_load, self.max_load)
        return True

    def unload(self) -> None:
        self.current_load = 0.0


class _HazardNotifierMixin:
    """Records, logs and forwards hazard alerts. Hosts declare alert_sink and hazard_alerts."""

    __slots__ = ()

    def notify_hazard(self, message: str) -> HazardAlert:
        alert = HazardAlert(serial_number=self.serial_number, message=message)  # type: ignore[attr-defined]
        self.hazard_alerts.append(alert)  # type: ignore[attr-defined]
        _LOG.warning("%s", alert)
        if self.alert_sink is not None:  # type: ignore[attr-defined]
            self.alert_sink(alert)  # type: ignore[attr-defined]
        return alert


@dataclass(slots=True, eq=False)
class LiquidContainer(_HazardNotifierMixin, Container):
    kind: ClassVar[ContainerKind] = ContainerKind.LIQUID

    is_hazardous: bool = False
    alert_sink: AlertSink | None = field(default=None, repr=False, compare=False)
    hazard_alerts: List[HazardAlert] = field(default_factory=list, init=False, repr=False, compare=False)

    @property
    def effective_ceiling(self) -> float:
        fraction = HAZARDOUS_LIQUID_FILL_FRACTION if self.is_hazardous else LIQUID_FILL_FRACTION
        return self.max_load * fraction

    def load(self, weight: float) -> bool:
        """
        Load unless the safety ceiling would be breached.

        A breach is not an error: a hazard alert is raised and the weight is
        dropped. Returns False in that case.
        """
        check_weight(weight)
        if not self.can_accept(weight):
            self.notify_hazard(HAZARD_ATTEMPT_MESSAGE)
            return False
        return Container.load(self, weight)


@dataclass(slots=True, eq=False)
class GasContainer(_HazardNotifierMixin, Container):
    kind: ClassVar[ContainerKind] = ContainerKind.GAS

    pressure: float = 0.0
    alert_sink: AlertSink | None = field(default=None, repr=False, compare=False)
    hazard_alerts: List[HazardAlert] = field(default_factory=list, init=False, repr=False, compare=False)

    def unload(self) -> None:
        # Residual gas stays in the container
        self.current_load = self.current_load * GAS_RESIDUE_FRACTION


@dataclass(slots=True, eq=False)
class RefrigeratedContainer(Container):
    kind: ClassVar[ContainerKind] = ContainerKind.REFRIGERATED

    product_type: str = ""
    required_temperature: float = 0.0
