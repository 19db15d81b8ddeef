"""HTTP route definitions for the service."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.schemas import TemperatureResponse
from models.errors import TemperatureError
from services.thermometer import CpuThermometer, build_default_thermometer

router = APIRouter()


def get_thermometer() -> CpuThermometer:
    return build_default_thermometer()


@router.get(
    "/temperature",
    response_model=TemperatureResponse,
    summary="Read the current CPU temperature.",
)
def read_temperature(
    thermometer: CpuThermometer = Depends(get_thermometer),
) -> TemperatureResponse:
    # Blocking; runs in the FastAPI threadpool.
    try:
        reading = thermometer.read()
    except TemperatureError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(exc),
        ) from exc
    return TemperatureResponse.from_reading(reading)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /temperature for the current reading."}
