"""
Domain models for the cargofleet app: containers and the ships carrying them.
"""

from cargofleet_app.models.container import (
    AlertSink,
    Container,
    ContainerKind,
    GasContainer,
    HazardAlert,
    HazardNotifier,
    LiquidContainer,
    RefrigeratedContainer,
)
from cargofleet_app.models.ship import Ship, TransferPolicy

__all__ = [
    "AlertSink",
    "Container",
    "ContainerKind",
    "GasContainer",
    "HazardAlert",
    "HazardNotifier",
    "LiquidContainer",
    "RefrigeratedContainer",
    "Ship",
    "TransferPolicy",
]
