"""Executor data models."""

from .run_config import RunConfiguration, build_run_configuration
from .types import (
    MAX_PARALLEL,
    MIN_PARALLEL,
    ContainerRecord,
    ContainerStatus,
    JobOutcome,
    JobResult,
    Operation,
    RunSummary,
)

__all__ = [
    "ContainerRecord",
    "ContainerStatus",
    "JobOutcome",
    "JobResult",
    "MAX_PARALLEL",
    "MIN_PARALLEL",
    "Operation",
    "RunConfiguration",
    "RunSummary",
    "build_run_configuration",
]
