from __future__ import annotations

"""
Sample fleet used by the console app.

Run from the project root with:

    python -m cargofleet_app.init_demo_fleet

This will:
- create two ships,
- load a hazardous liquid, a gas and a refrigerated container on the first,
- fill them, then move the refrigerated container to the second ship.
"""

import sys
from dataclasses import dataclass
from typing import TextIO

from cargofleet_app.config.settings import Settings, init_logging
from cargofleet_app.models import GasContainer, HazardAlert, LiquidContainer, RefrigeratedContainer, Ship
from cargofleet_app.reports.simple_text_report import build_ship_info_text
from cargofleet_app.services.fleet_service import FleetService


@dataclass(slots=True)
class DemoFleet:
    service: FleetService
    ship1: Ship
    ship2: Ship
    liquid: LiquidContainer
    gas: GasContainer
    refrigerated: RefrigeratedContainer


def build_demo_fleet(settings: Settings | None = None, out: TextIO | None = None) -> DemoFleet:
    settings = settings or Settings.default()
    stream = out or sys.stdout

    def _echo_alert(alert: HazardAlert) -> None:
        print(alert, file=stream)

    service = FleetService(
        transfer_policy=settings.transfer_policy,
        alert_sink=_echo_alert if settings.echo_hazard_alerts else None,
    )
    ship1 = service.add_ship("ship1", max_weight=5000, max_container_count=10, max_speed=30)
    ship2 = service.add_ship("ship2", max_weight=6000, max_container_count=12, max_speed=28)

    liquid = service.new_liquid(2000, is_hazardous=True)
    gas = service.new_gas(1500, pressure=5)
    refrigerated = service.new_refrigerated(1000, "Bananas", 5)

    for container in (liquid, gas, refrigerated):
        service.load_container("ship1", container)

    liquid.load(800)
    gas.load(1400)
    refrigerated.load(900)

    return DemoFleet(
        service=service,
        ship1=ship1,
        ship2=ship2,
        liquid=liquid,
        gas=gas,
        refrigerated=refrigerated,
    )


def run_demo(settings: Settings | None = None, out: TextIO | None = None) -> DemoFleet:
    stream = out or sys.stdout
    demo = build_demo_fleet(settings, stream)

    print(build_ship_info_text(demo.ship1), file=stream)
    demo.service.transfer_container(demo.refrigerated.serial_number, "ship1", "ship2")

    print("After Transfer:", file=stream)
    print(build_ship_info_text(demo.ship1), file=stream)
    print(build_ship_info_text(demo.ship2), file=stream)
    return demo


if __name__ == "__main__":
    _settings = Settings.default()
    init_logging(_settings)
    run_demo(_settings)
