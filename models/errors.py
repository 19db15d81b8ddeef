"""Errors raised while reading the CPU temperature."""

from __future__ import annotations

from typing import Optional


class TemperatureError(Exception):
    """Base class for every failure of a temperature reading."""


class QueryError(TemperatureError):
    """The WMI query could not be run to completion."""


class LaunchFailedError(QueryError):
    def __init__(self, executable: str, detail: str) -> None:
        self.executable = executable
        self.detail = detail
        super().__init__(
            f"Failed to execute {executable}: {detail}. "
            "Ensure PowerShell is installed and accessible."
        )


class NonZeroExitError(QueryError):
    def __init__(self, exit_code: int, stderr: Optional[str] = None) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(
            f"WMI query failed with exit code: {exit_code}. "
            "You may need to run as administrator."
        )


class ParseError(TemperatureError):
    """The query output did not yield a usable temperature."""


class NoDataError(ParseError):
    def __init__(self) -> None:
        super().__init__(
            "No temperature data received from WMI query. "
            "Check if thermal sensors are available."
        )


class NoValidReadingError(ParseError):
    def __init__(self) -> None:
        super().__init__(
            "No valid temperature readings found in WMI output. "
            "The thermal zone sensors may not be accessible."
        )
