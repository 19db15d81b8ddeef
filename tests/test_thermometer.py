from __future__ import annotations

from typing import List

import pytest

from models.errors import NoDataError, NonZeroExitError
from models.records import TemperatureReading
from services.thermometer import CpuThermometer

SAMPLE_OUTPUT = r"""
CurrentTemperature   : 3120

InstanceName         : ACPI\ThermalZone\TZ00_0
"""


class CountingRunner:
    def __init__(self, output: str) -> None:
        self.output = output
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.output


def test_read_assembles_reading() -> None:
    runner = CountingRunner(SAMPLE_OUTPUT)

    reading = CpuThermometer(runner=runner).read()

    assert isinstance(reading, TemperatureReading)
    assert reading.celsius == pytest.approx(38.85, abs=0.01)
    assert reading.fahrenheit == pytest.approx(101.93, abs=0.01)
    assert runner.calls == 1


def test_query_failure_propagates_without_parsing(monkeypatch) -> None:
    parsed: List[str] = []
    monkeypatch.setattr("services.thermometer.extract_celsius", parsed.append)

    def failing() -> str:
        raise NonZeroExitError(5)

    thermometer = CpuThermometer(runner=failing)

    with pytest.raises(NonZeroExitError) as excinfo:
        thermometer.read()

    assert excinfo.value.exit_code == 5
    assert parsed == []


def test_parse_failure_propagates() -> None:
    thermometer = CpuThermometer(runner=CountingRunner(""))

    with pytest.raises(NoDataError):
        thermometer.read()


def test_each_read_runs_a_fresh_query() -> None:
    runner = CountingRunner(SAMPLE_OUTPUT)
    thermometer = CpuThermometer(runner=runner)

    first = thermometer.read()
    runner.output = "CurrentTemperature : 3300"
    second = thermometer.read()

    assert runner.calls == 2
    assert first != second
    assert second.celsius == pytest.approx(56.85)
