from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.api import get_thermometer
from app.main import create_app
from models.errors import LaunchFailedError
from services.thermometer import CpuThermometer

SAMPLE_OUTPUT = "CurrentTemperature   : 3120\n\nInstanceName         : ACPI\\ThermalZone\\TZ00_0\n"


def _client_with(thermometer: CpuThermometer) -> Iterator[TestClient]:
    app = create_app()
    app.dependency_overrides[get_thermometer] = lambda: thermometer
    with TestClient(app) as client:
        yield client


@pytest.fixture
def api_client() -> Iterator[TestClient]:
    yield from _client_with(CpuThermometer(runner=lambda: SAMPLE_OUTPUT))


@pytest.fixture
def failing_client() -> Iterator[TestClient]:
    def runner() -> str:
        raise LaunchFailedError("powershell", "[Errno 2] No such file or directory")

    yield from _client_with(CpuThermometer(runner=runner))


def test_read_temperature(api_client: TestClient) -> None:
    response = api_client.get("/temperature")

    assert response.status_code == 200
    payload = response.json()
    assert set(payload.keys()) == {"celsius", "fahrenheit"}
    assert payload["celsius"] == pytest.approx(38.85, abs=0.01)
    assert payload["fahrenheit"] == pytest.approx(101.93, abs=0.01)


def test_read_temperature_failure_returns_unavailable(failing_client: TestClient) -> None:
    response = failing_client.get("/temperature")

    assert response.status_code == 503
    assert "Failed to execute powershell" in response.json()["detail"]


def test_no_data_is_reported(api_client: TestClient) -> None:
    api_client.app.dependency_overrides[get_thermometer] = lambda: CpuThermometer(runner=lambda: "")

    response = api_client.get("/temperature")

    assert response.status_code == 503
    assert "No temperature data received" in response.json()["detail"]


def test_health_endpoints(api_client: TestClient) -> None:
    assert api_client.get("/health").json() == {"status": "ok"}

    root = api_client.get("/")
    assert root.status_code == 200
    assert root.json()["status"] == "ok"


def test_oversized_sensor_value_is_unavailable(api_client: TestClient) -> None:
    oversized = "CurrentTemperature : " + "9" * 5000
    api_client.app.dependency_overrides[get_thermometer] = lambda: CpuThermometer(runner=lambda: oversized)

    response = api_client.get("/temperature")

    assert response.status_code == 503
    assert "No valid temperature readings found" in response.json()["detail"]
