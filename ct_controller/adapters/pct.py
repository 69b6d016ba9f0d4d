"""Proxmox ``pct`` command-line backend."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from ct_common.errors import InventoryError, RemoteExecutionError, StepTimeoutError
from ct_controller.models.types import ContainerRecord, ContainerStatus

logger = logging.getLogger(__name__)

PCT_BINARY = "pct"


def parse_pct_list(output: str) -> list[ContainerRecord]:
    """Parse ``pct list`` output into records, dropping the header row.

    ``pct list`` prints ``VMID Status [Lock] Name``; only the first two columns
    are used. Duplicate ids keep their first occurrence.
    """
    records: list[ContainerRecord] = []
    seen: set[str] = set()
    lines = output.splitlines()
    for line in lines[1:]:
        fields = line.split()
        if not fields:
            continue
        ct_id = fields[0]
        if ct_id in seen:
            continue
        seen.add(ct_id)
        status = fields[1] if len(fields) > 1 else None
        records.append(ContainerRecord(id=ct_id, status=ContainerStatus.parse(status)))
    return records


def parse_pct_status(output: str) -> ContainerStatus:
    """Parse ``pct status <id>`` output (``status: running``)."""
    fields = output.split()
    if len(fields) < 2:
        return ContainerStatus.UNKNOWN
    return ContainerStatus.parse(fields[1])


def _timeout_or_none(value: float | None) -> float | None:
    if value is None or value <= 0:
        return None
    return value


class PctBackend:
    """ContainerBackend implementation that shells out to ``pct``."""

    def __init__(
        self,
        binary: str = PCT_BINARY,
        *,
        status_timeout: float | None = 30.0,
        push_timeout: float | None = 120.0,
        exec_timeout: float | None = 3600.0,
    ) -> None:
        self.binary = binary
        self.status_timeout = _timeout_or_none(status_timeout)
        self.push_timeout = _timeout_or_none(push_timeout)
        self.exec_timeout = _timeout_or_none(exec_timeout)

    def is_available(self) -> bool:
        return shutil.which(self.binary) is not None

    def _run(
        self,
        args: Sequence[str],
        *,
        timeout: float | None,
        capture: bool = True,
    ) -> subprocess.CompletedProcess[str]:
        cmd = [self.binary, *args]
        logger.debug("Running %s", " ".join(cmd))
        if capture:
            return subprocess.run(
                cmd, capture_output=True, text=True, check=False, timeout=timeout
            )
        # Operation output goes straight to the operator's terminal.
        return subprocess.run(cmd, text=True, check=False, timeout=timeout)

    def list_containers(self) -> list[ContainerRecord]:
        if not self.is_available():
            raise InventoryError(
                f"{self.binary} not found. Run on a Proxmox VE host.",
                context={"binary": self.binary},
            )
        try:
            result = self._run(["list"], timeout=self.status_timeout)
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise InventoryError(
                f"Failed to list containers: {exc}", context={"binary": self.binary}, cause=exc
            ) from exc
        if result.returncode != 0:
            raise InventoryError(
                f"'{self.binary} list' failed: {(result.stderr or result.stdout).strip()}",
                context={"rc": result.returncode},
            )
        return parse_pct_list(result.stdout)

    def get_status(self, container_id: str) -> ContainerStatus:
        try:
            result = self._run(["status", container_id], timeout=self.status_timeout)
        except subprocess.TimeoutExpired:
            logger.warning("CT %s: status query timed out", container_id)
            return ContainerStatus.UNKNOWN
        except OSError as exc:
            raise RemoteExecutionError(
                f"Unable to query status of CT {container_id}: {exc}",
                context={"container": container_id},
                cause=exc,
            ) from exc
        if result.returncode != 0:
            return ContainerStatus.UNKNOWN
        return parse_pct_status(result.stdout)

    def push_file(self, container_id: str, local_path: Path, remote_path: str) -> bool:
        try:
            result = self._run(
                ["push", container_id, str(local_path), remote_path],
                timeout=self.push_timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning("CT %s: push of %s timed out", container_id, local_path)
            return False
        except OSError as exc:
            logger.warning("CT %s: push of %s failed: %s", container_id, local_path, exc)
            return False
        if result.returncode != 0:
            logger.warning(
                "CT %s: push of %s failed: %s",
                container_id,
                local_path,
                (result.stderr or "").strip(),
            )
            return False
        return True

    def exec_in_container(self, container_id: str, command: str) -> int:
        try:
            result = self._run(
                ["exec", container_id, "--", "bash", "-c", command],
                timeout=self.exec_timeout,
                capture=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise StepTimeoutError(
                f"CT {container_id}: command timed out after {self.exec_timeout}s",
                context={"container": container_id, "timeout": self.exec_timeout},
                cause=exc,
            ) from exc
        except OSError as exc:
            raise RemoteExecutionError(
                f"Unable to execute in CT {container_id}: {exc}",
                context={"container": container_id},
                cause=exc,
            ) from exc
        return result.returncode
