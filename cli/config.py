from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_PRECISION = 2

_API_URL_ENV = "CPU_TEMP_API_URL"
_PRECISION_ENV = "CPU_TEMP_PRECISION"


@dataclass(frozen=True)
class CLIConfig:
    api_url: str = DEFAULT_API_URL
    precision: int = DEFAULT_PRECISION


def _read_precision(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def load_config(
    api_url: Optional[str] = None,
    precision: Optional[int] = None,
) -> CLIConfig:
    url = api_url or os.getenv(_API_URL_ENV) or DEFAULT_API_URL
    if precision is None:
        precision = _read_precision(os.getenv(_PRECISION_ENV), DEFAULT_PRECISION)
    return CLIConfig(api_url=url.rstrip("/"), precision=precision)
