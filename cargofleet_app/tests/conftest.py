"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from cargofleet_app.models import HazardAlert, Ship
from cargofleet_app.services.serials import ContainerFactory


@pytest.fixture
def alerts():
    """Collected hazard alerts from containers built by ``factory``."""
    return []


@pytest.fixture
def factory(alerts):
    """A fresh container factory whose alerts land in ``alerts``."""

    def _collect(alert: HazardAlert) -> None:
        alerts.append(alert)

    return ContainerFactory(alert_sink=_collect)


@pytest.fixture
def ship1():
    return Ship(name="ship1", max_weight=5000, max_container_count=10, max_speed=30)


@pytest.fixture
def ship2():
    return Ship(name="ship2", max_weight=6000, max_container_count=12, max_speed=28)


@pytest.fixture
def sample_containers(factory):
    """Hazardous liquid, gas and refrigerated containers, in that creation order."""
    return [
        factory.liquid(2000, is_hazardous=True),
        factory.gas(1500, pressure=5),
        factory.refrigerated(1000, "Bananas", 5),
    ]
