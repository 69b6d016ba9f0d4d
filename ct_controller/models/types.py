"""Shared executor types and value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

MIN_PARALLEL = 1
MAX_PARALLEL = 20


class ContainerStatus(str, Enum):
    """Run status reported by the control plane."""

    RUNNING = "running"
    STOPPED = "stopped"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: str | None) -> "ContainerStatus":
        """Map a raw status string; only exact lowercase matches are recognised."""
        if raw == cls.RUNNING.value:
            return cls.RUNNING
        if raw == cls.STOPPED.value:
            return cls.STOPPED
        return cls.UNKNOWN


@dataclass(frozen=True)
class ContainerRecord:
    """One container as seen by a single inventory query."""

    id: str
    status: ContainerStatus

    @property
    def is_running(self) -> bool:
        return self.status is ContainerStatus.RUNNING


class JobResult(str, Enum):
    """Classification of a single fan-out job."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class JobOutcome:
    """Result of running the operation on one target."""

    target_id: str
    result: JobResult
    detail: Optional[str] = None


@dataclass(frozen=True)
class Operation:
    """A resolved operation payload on the host filesystem."""

    name: str
    path: Path

    @property
    def remote_path(self) -> str:
        """Well-known temporary path of the payload inside a container."""
        return f"/tmp/{self.path.name}"


@dataclass
class RunSummary:
    """Aggregated tally of a fan-out run."""

    success: int = 0
    skipped: int = 0
    failed: int = 0
    outcomes: list[JobOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success + self.skipped + self.failed

    @property
    def exit_code(self) -> int:
        return 2 if self.failed > 0 else 0
