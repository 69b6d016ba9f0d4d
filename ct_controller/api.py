"""Public controller API surface."""

from ct_controller.adapters.pct import PctBackend
from ct_controller.aggregator import aggregate
from ct_controller.contracts import ContainerBackend
from ct_controller.inventory import list_containers
from ct_controller.models import (
    MAX_PARALLEL,
    MIN_PARALLEL,
    ContainerRecord,
    ContainerStatus,
    JobOutcome,
    JobResult,
    Operation,
    RunConfiguration,
    RunSummary,
    build_run_configuration,
)
from ct_controller.operations import OperationCatalog
from ct_controller.runner import RemoteOperationRunner
from ct_controller.scheduler import JobScheduler, run_all
from ct_controller.services import (
    DoctorReport,
    DoctorService,
    FanOutPlan,
    FanOutService,
    RunAborted,
)
from ct_controller.settings import ExecutorSettings
from ct_controller.targeting import filter_targets, validate_selection
from ct_controller.ui_interfaces import NoOpUIAdapter, UIAdapter

__all__ = [
    "aggregate",
    "build_run_configuration",
    "ContainerBackend",
    "ContainerRecord",
    "ContainerStatus",
    "DoctorReport",
    "DoctorService",
    "ExecutorSettings",
    "FanOutPlan",
    "FanOutService",
    "filter_targets",
    "JobOutcome",
    "JobResult",
    "JobScheduler",
    "list_containers",
    "MAX_PARALLEL",
    "MIN_PARALLEL",
    "NoOpUIAdapter",
    "Operation",
    "OperationCatalog",
    "PctBackend",
    "RemoteOperationRunner",
    "RunAborted",
    "RunConfiguration",
    "run_all",
    "RunSummary",
    "UIAdapter",
    "validate_selection",
]
