"""Parsing of ``Format-List`` output from the thermal-zone query."""

from __future__ import annotations

import logging
import re

from models.errors import NoDataError, NoValidReadingError

logger = logging.getLogger(__name__)

TEMPERATURE_PATTERN = re.compile(r"^\s*CurrentTemperature\s*:\s*(\d+)", re.MULTILINE)

ABSOLUTE_ZERO_CELSIUS = 273.15
MIN_PLAUSIBLE_CELSIUS = -50.0
MAX_PLAUSIBLE_CELSIUS = 150.0


def kelvin_tenths_to_celsius(value: float) -> float:
    """Convert a raw sensor value in tenths of Kelvin to Celsius."""
    return (value / 10.0) - ABSOLUTE_ZERO_CELSIUS


def is_plausible(celsius: float) -> bool:
    return MIN_PLAUSIBLE_CELSIUS < celsius < MAX_PLAUSIBLE_CELSIUS


def extract_celsius(raw_text: str) -> float:
    """Return the first plausible ``CurrentTemperature`` value, in Celsius.

    Values outside the plausibility window, including digit runs too long to
    represent, are skipped and scanning carries on with the next match.
    Raises ``NoDataError`` for blank output and ``NoValidReadingError`` when
    nothing usable was found.
    """
    for match in TEMPERATURE_PATTERN.finditer(raw_text):
        raw_value = float(match.group(1))
        celsius = kelvin_tenths_to_celsius(raw_value)
        if is_plausible(celsius):
            return celsius
        logger.debug(
            "Skipping implausible thermal-zone value",
            extra={"raw_value": raw_value, "celsius": round(celsius, 2)},
        )

    if not raw_text.strip():
        raise NoDataError()
    raise NoValidReadingError()
