from __future__ import annotations

import json

import typer

from models.errors import LaunchFailedError, NonZeroExitError, TemperatureError
from models.records import TemperatureReading


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def render_reading(reading: TemperatureReading, precision: int = 2) -> None:
    echo_heading("CPU Temperature")
    typer.echo(f"  Celsius: {reading.celsius:.{precision}f}°C")
    typer.echo(f"  Fahrenheit: {reading.fahrenheit:.{precision}f}°F")


def render_json(reading: TemperatureReading, precision: int = 2) -> None:
    payload = {key: round(value, precision) for key, value in reading.as_dict().items()}
    typer.echo(json.dumps(payload))


def _tips_for(error: TemperatureError) -> list[str]:
    if isinstance(error, LaunchFailedError):
        return [
            "Ensure you're running on Windows",
            "Check if PowerShell is available on PATH (or set CPU_TEMP_SHELL)",
        ]
    if isinstance(error, NonZeroExitError):
        return ["Try running as administrator"]
    return [
        "Try running as administrator",
        "Your firmware may not expose MSAcpi_ThermalZoneTemperature",
    ]


def render_error(error: TemperatureError) -> None:
    typer.secho(f"Error reading CPU temperature: {error}", fg=typer.colors.RED, err=True)
    typer.echo("", err=True)
    typer.echo("Troubleshooting tips:", err=True)
    for tip in _tips_for(error):
        typer.echo(f"- {tip}", err=True)
