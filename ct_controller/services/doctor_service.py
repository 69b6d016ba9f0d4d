"""
Host prerequisite checks (doctor).

The executor drives containers through ``pct`` and therefore needs root on a
Proxmox VE node. ``require_host`` is the hard gate used before a run;
``check_host`` produces the full report shown by ``ct-executor doctor``.
"""

import os
import platform
import shutil
from typing import Callable, Optional

from ct_common.errors import ConfigurationError
from ct_controller.adapters.pct import PCT_BINARY
from ct_controller.settings import ExecutorSettings

from .doctor_types import DoctorCheck, DoctorCheckGroup, DoctorReport

ROOT_REQUIRED = "Run as root on a Proxmox node (pct required)."
PCT_MISSING = f"{PCT_BINARY} not found. Run on a Proxmox VE host."


def _is_root() -> bool:
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


class DoctorService:
    """Check that this host can drive containers."""

    def __init__(
        self,
        settings: Optional[ExecutorSettings] = None,
        is_root: Callable[[], bool] = _is_root,
        which: Callable[[str], Optional[str]] = shutil.which,
    ):
        self.settings = settings or ExecutorSettings.from_env()
        self._is_root = is_root
        self._which = which

    def _has(self, command: str) -> bool:
        return self._which(command) is not None

    def _host_group(self) -> DoctorCheckGroup:
        return DoctorCheckGroup(
            "Proxmox Host",
            [
                DoctorCheck("Running as root", self._is_root(), hint="re-run with sudo or as root"),
                DoctorCheck(
                    f"{PCT_BINARY} available",
                    self._has(PCT_BINARY),
                    hint="run on a Proxmox VE node",
                ),
            ],
        )

    def _operations_group(self) -> DoctorCheckGroup:
        ops_dir = self.settings.operations_dir
        return DoctorCheckGroup(
            "Operations",
            [
                DoctorCheck(
                    f"Operations directory ({ops_dir})",
                    ops_dir.is_dir(),
                    hint="set CT_OPERATIONS_DIR",
                ),
                DoctorCheck("bash (for local operation checks)", self._has("bash"), required=False),
            ],
        )

    def check_host(self) -> DoctorReport:
        info = (
            f"Python: {platform.python_version()} ({platform.python_implementation()}) "
            f"on {platform.system()} {platform.release()}"
        )
        return DoctorReport(
            groups=[self._host_group(), self._operations_group()],
            info_messages=[info],
        )

    def require_host(self) -> None:
        """Raise ConfigurationError unless ``pct`` can be used from here."""
        if not self._is_root():
            raise ConfigurationError(ROOT_REQUIRED)
        if not self._has(PCT_BINARY):
            raise ConfigurationError(PCT_MISSING, context={"binary": PCT_BINARY})
