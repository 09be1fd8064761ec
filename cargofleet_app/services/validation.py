"""
Error types and pure capacity checks for containers and ships.

Nothing here mutates a container or a ship; the models call these checks
before they change state so that a failed check leaves everything untouched.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from cargofleet_app.config.limits import EPS, REL_TOL

if TYPE_CHECKING:
    from cargofleet_app.models.container import Container


class CargoError(Exception):
    """Base class for cargo rule violations."""


@dataclass(slots=True, eq=False)
class OverfillError(CargoError):
    message: str
    serial_number: str = ""
    requested_load: float = 0.0
    limit: float = 0.0

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True, eq=False)
class CapacityError(CargoError):
    message: str
    reason: str = ""

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True, eq=False)
class ContainerValidationError(CargoError, ValueError):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True, eq=False)
class ShipValidationError(CargoError, ValueError):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


def exceeds_limit(current_load: float, weight: float, limit: float) -> bool:
    """
    True when adding ``weight`` to ``current_load`` would pass ``limit``.

    Totals within float rounding of the limit (relative, floored at EPS) count as fitting.
    """
    total = current_load + weight
    return total > limit and not math.isclose(total, limit, rel_tol=REL_TOL, abs_tol=EPS)


def check_weight(weight: float) -> None:
    """Reject negative, non-finite or non-numeric load weights."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ContainerValidationError(f"Load weight must be a number, got {weight!r}.")
    if not math.isfinite(weight):
        raise ContainerValidationError(f"Load weight must be finite, got {weight}.")
    if weight < 0:
        raise ContainerValidationError(f"Load weight must not be negative, got {weight}.")


def check_overfill(container: "Container", weight: float) -> None:
    """Raise OverfillError if ``weight`` does not fit under the container's max load."""
    if exceeds_limit(container.current_load, weight, container.max_load):
        raise OverfillError(
            f"Load of {weight:g} exceeds maximum capacity of {container.serial_number} "
            f"({container.current_load:g}/{container.max_load:g}).",
            serial_number=container.serial_number,
            requested_load=container.current_load + weight,
            limit=container.max_load,
        )


def check_ship_capacity(
    containers: Iterable["Container"],
    candidate: "Container",
    max_weight: float,
    max_container_count: int,
) -> None:
    """
    Raise CapacityError if ``candidate`` cannot join ``containers``.

    Weight is the sum of declared max loads, including the candidate's,
    never the live current loads.
    """
    aboard = list(containers)
    if any(c.serial_number == candidate.serial_number for c in aboard):
        raise CapacityError(
            f"A container with serial {candidate.serial_number} is already aboard.",
            reason="duplicate",
        )
    if len(aboard) + 1 > max_container_count:
        raise CapacityError(
            f"Ship overload or too many containers: cannot take {candidate.serial_number}, "
            f"limit is {max_container_count} containers.",
            reason="count",
        )
    aboard_weight = sum(c.max_load for c in aboard)
    total = aboard_weight + candidate.max_load
    if exceeds_limit(aboard_weight, candidate.max_load, max_weight):
        raise CapacityError(
            f"Ship overload or too many containers: {candidate.serial_number} would bring "
            f"total max load to {total:g}, limit is {max_weight:g}.",
            reason="weight",
        )
