"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from pydantic import BaseModel, Field

from models.records import TemperatureReading


class TemperatureResponse(BaseModel):
    """Current CPU temperature in both supported units."""

    celsius: float = Field(..., description="Temperature in degrees Celsius.")
    fahrenheit: float = Field(..., description="Temperature in degrees Fahrenheit.")

    @classmethod
    def from_reading(cls, reading: TemperatureReading) -> "TemperatureResponse":
        return cls(celsius=reading.celsius, fahrenheit=reading.fahrenheit)
