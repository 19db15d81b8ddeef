"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5.0 + 32.0


@dataclass(frozen=True, slots=True)
class TemperatureReading:
    """A single CPU temperature reading.

    Only ``celsius`` is stored; ``fahrenheit`` is always derived from it, so
    the two values can never disagree.
    """

    celsius: float

    @property
    def fahrenheit(self) -> float:
        return celsius_to_fahrenheit(self.celsius)

    def as_dict(self) -> Dict[str, float]:
        return {"celsius": self.celsius, "fahrenheit": self.fahrenheit}
