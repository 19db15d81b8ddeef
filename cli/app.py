from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_error, render_json, render_reading
from logging_config import configure_logging
from models.errors import TemperatureError
from models.records import TemperatureReading
from services.extractor import extract_celsius
from services.thermometer import build_default_thermometer


@dataclass
class CLIState:
    config: CLIConfig


app = typer.Typer(
    help="Read the CPU temperature from Windows thermal-zone sensors.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _emit(reading: TemperatureReading, as_json: bool, precision: int) -> None:
    if as_json:
        render_json(reading, precision)
    else:
        render_reading(reading, precision)


@app.callback()
def main(
    ctx: typer.Context,
    precision: Optional[int] = typer.Option(
        None,
        "--precision",
        "-p",
        min=0,
        help="Decimal places to display (defaults to CPU_TEMP_PRECISION env or 2).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Entry point for the CLI."""
    configure_logging("DEBUG" if verbose else None)
    ctx.obj = CLIState(config=load_config(precision=precision))


@app.command("read")
def read_command(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the reading as JSON."),
) -> None:
    """Query this machine's thermal zone and print the temperature."""
    state = _get_state(ctx)
    try:
        reading = build_default_thermometer().read()
    except TemperatureError as exc:
        render_error(exc)
        raise typer.Exit(code=1)
    _emit(reading, as_json, state.config.precision)


@app.command("parse")
def parse_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Saved WMI Format-List output (reads stdin when omitted).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the reading as JSON."),
) -> None:
    """Extract the temperature from previously captured query output."""
    state = _get_state(ctx)
    if file is None:
        raw_text = typer.get_text_stream("stdin").read()
    else:
        raw_text = file.read_text(errors="replace")
    try:
        reading = TemperatureReading(celsius=extract_celsius(raw_text))
    except TemperatureError as exc:
        render_error(exc)
        raise typer.Exit(code=1)
    _emit(reading, as_json, state.config.precision)


@app.command("fetch")
def fetch_command(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Temperature service URL (defaults to CPU_TEMP_API_URL env or http://localhost:8000).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the reading as JSON."),
) -> None:
    """Read the temperature from a running HTTP service."""
    state = _get_state(ctx)
    url = base_url.rstrip("/") if base_url else state.config.api_url
    client = ApiClient(url)
    ctx.call_on_close(client.close)
    reading = client.get_temperature()
    _emit(reading, as_json, state.config.precision)
