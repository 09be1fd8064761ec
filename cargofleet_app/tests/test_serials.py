"""Tests for serial numbers and container construction."""

from __future__ import annotations

import pytest

from cargofleet_app.models import ContainerKind, GasContainer, LiquidContainer, RefrigeratedContainer
from cargofleet_app.services.serials import ContainerFactory, SerialCounter, format_serial, parse_serial
from cargofleet_app.services.validation import ContainerValidationError


class TestSerialCounter:
    def test_counts_from_one(self):
        counter = SerialCounter()
        assert counter.peek == 1
        assert counter.next() == 1
        assert counter.next() == 2
        assert counter.peek == 3

    def test_start_must_be_positive(self):
        with pytest.raises(ValueError):
            SerialCounter(start=0)


class TestContainerFactory:
    def test_format_matches_kind(self, sample_containers):
        liquid, gas, refrigerated = sample_containers
        assert liquid.serial_number == "KON-L-1"
        assert gas.serial_number == "KON-G-2"
        assert refrigerated.serial_number == "KON-C-3"

    def test_counter_shared_across_kinds(self):
        factory = ContainerFactory()
        made = [
            factory.gas(100, pressure=1),
            factory.gas(100, pressure=1),
            factory.refrigerated(100, "Milk", 4),
            factory.liquid(100, is_hazardous=False),
            factory.gas(100, pressure=1),
        ]
        numbers = [parse_serial(c.serial_number)[1] for c in made]
        assert numbers == [1, 2, 3, 4, 5]
        assert len({c.serial_number for c in made}) == len(made)

    def test_sessions_do_not_share_counters(self):
        a = ContainerFactory()
        b = ContainerFactory()
        a.liquid(100, is_hazardous=False)
        assert b.liquid(100, is_hazardous=False).serial_number == "KON-L-1"

    def test_custom_counter(self):
        factory = ContainerFactory(counter=SerialCounter(start=40))
        assert factory.gas(100, pressure=2).serial_number == "KON-G-40"
        assert factory.counter.peek == 41

    def test_create_by_kind(self):
        factory = ContainerFactory()
        assert isinstance(factory.create(ContainerKind.LIQUID, 100, is_hazardous=True), LiquidContainer)
        assert isinstance(factory.create(ContainerKind.GAS, 100, pressure=3), GasContainer)
        reefer = factory.create(ContainerKind.REFRIGERATED, 100, product_type="Fish", required_temperature=-20)
        assert isinstance(reefer, RefrigeratedContainer)
        assert reefer.product_type == "Fish"


class TestParseSerial:
    def test_round_trip(self):
        assert parse_serial(format_serial(ContainerKind.GAS, 12)) == (ContainerKind.GAS, 12)

    @pytest.mark.parametrize("serial", ["", "KON-L", "KON-X-3", "ABC-L-1", "KON-L-x"])
    def test_malformed(self, serial):
        with pytest.raises(ContainerValidationError):
            parse_serial(serial)
