"""End-to-end fan-out: inventory, selection, confirmation, execution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from ct_common.errors import CTError
from ct_common.logging import bind_run_context, clear_run_context
from ct_controller.aggregator import aggregate
from ct_controller.contracts import ContainerBackend
from ct_controller.inventory import list_containers
from ct_controller.models.run_config import RunConfiguration
from ct_controller.models.types import ContainerRecord, JobOutcome, Operation, RunSummary
from ct_controller.operations import OperationCatalog
from ct_controller.runner import RemoteOperationRunner
from ct_controller.scheduler import JobScheduler
from ct_controller.targeting import filter_targets
from ct_controller.ui_interfaces import NoOpUIAdapter, UIAdapter

logger = logging.getLogger(__name__)


class RunAborted(CTError):
    """The operator declined the confirmation prompt."""


@dataclass
class FanOutPlan:
    """Resolved operation and targets for one invocation."""

    operation: Operation
    config: RunConfiguration
    inventory: list[ContainerRecord] = field(default_factory=list)
    targets: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.targets


class FanOutService:
    """Coordinate one fan-out run against a container backend."""

    def __init__(
        self,
        backend: ContainerBackend,
        catalog: OperationCatalog,
        ui_adapter: UIAdapter | None = None,
    ) -> None:
        self.backend = backend
        self.catalog = catalog
        self.ui = ui_adapter or NoOpUIAdapter()

    def plan(self, config: RunConfiguration) -> FanOutPlan:
        """Resolve the operation and compute targets; no container is contacted."""
        operation = self.catalog.resolve(config.operation_name)
        inventory = list_containers(self.backend)
        plan = FanOutPlan(operation=operation, config=config, inventory=inventory)
        if not inventory:
            self.ui.show_warning("No containers found.")
            return plan
        plan.targets = filter_targets(inventory, config)
        if plan.is_empty:
            self.ui.show_warning("No matching containers (check filters and --all option).")
        return plan

    def confirm(self, plan: FanOutPlan) -> None:
        """Show the plan and ask for confirmation unless ``assume_yes`` is set."""
        args = " ".join(plan.config.operation_args)
        self.ui.show_info(f"Target containers: {' '.join(plan.targets)}")
        self.ui.show_info(f"Script: {plan.operation.name} {args}".rstrip())
        if plan.config.dry_run:
            self.ui.show_info("Dry run: nothing will be copied or executed.")
        if plan.config.assume_yes:
            return
        if not self.ui.confirm(
            f"Proceed with execution on {len(plan.targets)} container(s)?", default=False
        ):
            raise RunAborted("Aborted.", context={"targets": plan.targets})

    def execute(
        self,
        plan: FanOutPlan,
        on_outcome: Optional[Callable[[JobOutcome], None]] = None,
    ) -> RunSummary:
        """Run the operation on every planned target and tally the outcomes."""
        if plan.is_empty:
            return aggregate([])
        runner = RemoteOperationRunner(
            self.backend, plan.operation, plan.config, ui_adapter=self.ui
        )
        scheduler = JobScheduler(
            runner.run, plan.config.parallelism, on_outcome=on_outcome
        )
        bind_run_context(
            operation=plan.operation.name,
            parallelism=plan.config.parallelism,
            dry_run=plan.config.dry_run,
        )
        logger.info("Running on %d target(s)", len(plan.targets))
        try:
            summary = aggregate(scheduler.run_all(plan.targets))
        finally:
            clear_run_context()
        logger.info(
            "Run finished: success=%d skipped=%d failed=%d",
            summary.success,
            summary.skipped,
            summary.failed,
        )
        return summary

    def run(
        self,
        config: RunConfiguration,
        on_outcome: Optional[Callable[[JobOutcome], None]] = None,
    ) -> RunSummary:
        """Plan, confirm and execute; raises RunAborted if the operator declines."""
        plan = self.plan(config)
        if plan.is_empty:
            return aggregate([])
        self.confirm(plan)
        return self.execute(plan, on_outcome=on_outcome)
