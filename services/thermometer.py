"""Assembles a temperature reading from the query and the extractor."""

from __future__ import annotations

from functools import lru_cache

from models.records import TemperatureReading
from services.extractor import extract_celsius
from services.query import PowerShellQueryRunner, QueryRunner
from settings import get_settings


class CpuThermometer:
    """Invoke, parse, assemble. Any failure propagates unchanged."""

    def __init__(self, runner: QueryRunner) -> None:
        self.runner = runner

    def read(self) -> TemperatureReading:
        raw_text = self.runner()
        celsius = extract_celsius(raw_text)
        return TemperatureReading(celsius=celsius)


@lru_cache
def build_default_thermometer() -> CpuThermometer:
    """Factory that wires the thermometer to the configured PowerShell."""
    settings = get_settings()
    return CpuThermometer(runner=PowerShellQueryRunner(settings.shell_executable))


def get_cpu_temperature() -> TemperatureReading:
    """Read the current CPU temperature from the Windows thermal zone."""
    return build_default_thermometer().read()
