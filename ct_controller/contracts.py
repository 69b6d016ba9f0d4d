"""Collaborator contracts the executor core depends on."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ct_controller.models.types import ContainerRecord, ContainerStatus


@runtime_checkable
class ContainerBackend(Protocol):
    """Minimal view of the hypervisor control plane.

    Implementations must be safe to call from several worker threads at once;
    the executor never shares any other state between jobs.
    """

    def list_containers(self) -> list[ContainerRecord]:
        """Return every known container with its current status."""
        ...

    def get_status(self, container_id: str) -> ContainerStatus:
        """Return the live status of a single container."""
        ...

    def push_file(self, container_id: str, local_path: Path, remote_path: str) -> bool:
        """Copy a host file into the container; True on success."""
        ...

    def exec_in_container(self, container_id: str, command: str) -> int:
        """Run a shell command inside the container and return its exit code."""
        ...
