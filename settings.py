from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_SHELL_ENV = "CPU_TEMP_SHELL"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    shell_executable: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        shell_executable=_read_str_env(_SHELL_ENV, "powershell"),
        log_level=_read_log_level("WARNING"),
    )
