"""In-memory ContainerBackend used by unit tests."""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from ct_common.errors import InventoryError
from ct_controller.api import ContainerRecord, ContainerStatus


class FakeBackend:
    """Records every call and answers from configurable tables.

    ``live_status`` overrides the inventory status on ``get_status`` so tests
    can simulate a container stopping between inventory and execution.
    """

    def __init__(
        self,
        records: Optional[List[Tuple[str, str]]] = None,
        *,
        live_status: Optional[Dict[str, str]] = None,
        push_ok: Optional[Dict[str, bool]] = None,
        exec_rc: Optional[Dict[str, int]] = None,
        exec_error: Optional[Dict[str, Exception]] = None,
        exec_delay: float = 0.0,
        list_error: Optional[Exception] = None,
    ) -> None:
        self.records = [
            ContainerRecord(ct_id, ContainerStatus.parse(status))
            for ct_id, status in (records or [])
        ]
        self.live_status = live_status or {}
        self.push_ok = push_ok or {}
        self.exec_rc = exec_rc or {}
        self.exec_error = exec_error or {}
        self.exec_delay = exec_delay
        self.list_error = list_error

        self.pushes: List[Tuple[str, Path, str]] = []
        self.commands: List[Tuple[str, str]] = []
        self.status_queries: List[str] = []
        self.on_exec: Optional[Callable[[str, str], None]] = None

        self._lock = threading.Lock()
        self._in_flight = 0
        self.max_in_flight = 0

    def list_containers(self) -> List[ContainerRecord]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.records)

    def get_status(self, container_id: str) -> ContainerStatus:
        with self._lock:
            self.status_queries.append(container_id)
        if container_id in self.live_status:
            return ContainerStatus.parse(self.live_status[container_id])
        for record in self.records:
            if record.id == container_id:
                return record.status
        return ContainerStatus.UNKNOWN

    def push_file(self, container_id: str, local_path: Path, remote_path: str) -> bool:
        with self._lock:
            self.pushes.append((container_id, local_path, remote_path))
        return self.push_ok.get(container_id, True)

    def exec_in_container(self, container_id: str, command: str) -> int:
        with self._lock:
            self.commands.append((container_id, command))
        if command.startswith("rm -f"):
            return 0
        with self._lock:
            self._in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self._in_flight)
        try:
            if self.on_exec is not None:
                self.on_exec(container_id, command)
            if self.exec_delay:
                time.sleep(self.exec_delay)
            if container_id in self.exec_error:
                raise self.exec_error[container_id]
            return self.exec_rc.get(container_id, 0)
        finally:
            with self._lock:
                self._in_flight -= 1

    def executed_on(self) -> List[str]:
        """Container ids that received the operation (cleanup excluded)."""
        return [ct for ct, cmd in self.commands if not cmd.startswith("rm -f")]


def failing_inventory(message: str = "pct list failed") -> FakeBackend:
    return FakeBackend(list_error=InventoryError(message))
