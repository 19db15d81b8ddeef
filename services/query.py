"""PowerShell invocation of the WMI thermal-zone query."""

from __future__ import annotations

import logging
import subprocess
from typing import Callable, List

from models.errors import LaunchFailedError, NonZeroExitError

logger = logging.getLogger(__name__)

THERMAL_ZONE_QUERY = (
    "Get-WmiObject MSAcpi_ThermalZoneTemperature -Namespace 'root/wmi' | Format-List"
)

# Anything that returns raw query text or raises QueryError.
QueryRunner = Callable[[], str]


class PowerShellQueryRunner:
    """Runs the thermal-zone query once per call and returns its stdout."""

    def __init__(self, executable: str = "powershell") -> None:
        self.executable = executable

    def command(self) -> List[str]:
        return [
            self.executable,
            "-NoProfile",
            "-NonInteractive",
            "-Command",
            THERMAL_ZONE_QUERY,
        ]

    def run(self) -> str:
        try:
            completed = subprocess.run(
                self.command(),
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            logger.error(
                "Could not launch query interpreter",
                extra={"executable": self.executable, "reason": exc.strerror or str(exc)},
            )
            raise LaunchFailedError(self.executable, str(exc)) from exc

        if completed.returncode != 0:
            logger.error(
                "Thermal-zone query exited unsuccessfully",
                extra={"executable": self.executable, "exit_code": completed.returncode},
            )
            raise NonZeroExitError(completed.returncode, stderr=completed.stderr or None)

        return completed.stdout or ""

    __call__ = run
