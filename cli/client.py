from __future__ import annotations

import httpx
import typer

from models.records import TemperatureReading


class ApiClient:
    """Minimal HTTP client for a remote temperature service."""

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        self._client = httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def get_temperature(self) -> TemperatureReading:
        try:
            response = self._client.get("/temperature")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            typer.secho(f"Could not reach {self._client.base_url}: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

        payload = response.json()
        celsius = payload.get("celsius") if isinstance(payload, dict) else None
        if not isinstance(celsius, (int, float)):
            raise typer.BadParameter("Unexpected response payload when reading temperature.")
        return TemperatureReading(celsius=float(celsius))

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        try:
            data = exc.response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("detail"):
            detail = str(data["detail"])
        else:
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
