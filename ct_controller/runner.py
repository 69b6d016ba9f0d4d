"""Run one operation inside one container."""

from __future__ import annotations

import logging
import shlex

from ct_common.errors import RemoteExecutionError, StepTimeoutError, error_to_payload
from ct_controller.contracts import ContainerBackend
from ct_controller.models.run_config import RunConfiguration
from ct_controller.models.types import ContainerStatus, JobOutcome, JobResult, Operation
from ct_controller.ui_interfaces import NoOpUIAdapter, UIAdapter

logger = logging.getLogger(__name__)

# Tells the invoked operation it runs under the executor (no banner, no prompts).
FANOUT_FLAG = "--multiple"

DETAIL_NOT_RUNNING = "not running"
DETAIL_COPY_FAILED = "copy failed"
DETAIL_TIMED_OUT = "timed out"


def build_exec_command(remote_path: str, args: tuple[str, ...]) -> str:
    """Shell command that marks the payload executable and runs it."""
    quoted = shlex.quote(remote_path)
    invocation = " ".join([quoted, FANOUT_FLAG, *(shlex.quote(arg) for arg in args)])
    return f"chmod +x {quoted} && {invocation}"


def build_cleanup_command(remote_path: str) -> str:
    return f"rm -f {shlex.quote(remote_path)}"


class RemoteOperationRunner:
    """Push, execute and clean up an operation on a single target."""

    def __init__(
        self,
        backend: ContainerBackend,
        operation: Operation,
        config: RunConfiguration,
        ui_adapter: UIAdapter | None = None,
    ) -> None:
        self.backend = backend
        self.operation = operation
        self.config = config
        self.ui = ui_adapter or NoOpUIAdapter()

    def describe(self) -> str:
        return " ".join([self.operation.name, *self.config.operation_args])

    def run(self, target_id: str) -> JobOutcome:
        header = f"CT {target_id}"

        # Status may have changed since the inventory snapshot.
        status = self.backend.get_status(target_id)
        if status is not ContainerStatus.RUNNING:
            self.ui.show_warning(f"{header}: not running, skipping")
            return JobOutcome(target_id, JobResult.SKIPPED, DETAIL_NOT_RUNNING)

        if self.config.dry_run:
            self.ui.show_info(f"{header}: would copy and execute -> {self.describe()}")
            return JobOutcome(target_id, JobResult.SUCCESS, "dry run")

        self.ui.show_info(f"{header}: copying and executing {self.operation.name}...")
        remote_path = self.operation.remote_path
        if not self.backend.push_file(target_id, self.operation.path, remote_path):
            self.ui.show_warning(f"{header}: failed to copy script")
            return JobOutcome(target_id, JobResult.FAILED, DETAIL_COPY_FAILED)

        try:
            rc = self.backend.exec_in_container(
                target_id, build_exec_command(remote_path, self.config.operation_args)
            )
        except StepTimeoutError as exc:
            logger.warning("%s: %s", header, exc, extra=error_to_payload(exc))
            self.ui.show_warning(f"{header}: execution timed out")
            return JobOutcome(target_id, JobResult.FAILED, DETAIL_TIMED_OUT)
        except RemoteExecutionError as exc:
            logger.warning("%s: %s", header, exc, extra=error_to_payload(exc))
            self.ui.show_warning(f"{header}: execution failed ({exc})")
            return JobOutcome(target_id, JobResult.FAILED, str(exc))
        finally:
            self._cleanup(target_id, remote_path)

        if rc != 0:
            self.ui.show_warning(f"{header}: execution failed (exit code: {rc})")
            return JobOutcome(target_id, JobResult.FAILED, f"exit code {rc}")

        self.ui.show_success(f"{header}: execution complete")
        return JobOutcome(target_id, JobResult.SUCCESS)

    def _cleanup(self, target_id: str, remote_path: str) -> None:
        """Best-effort removal of the payload; never affects the outcome."""
        try:
            rc = self.backend.exec_in_container(target_id, build_cleanup_command(remote_path))
        except RemoteExecutionError as exc:
            logger.warning("CT %s: cleanup of %s failed: %s", target_id, remote_path, exc)
            return
        if rc != 0:
            logger.warning(
                "CT %s: cleanup of %s exited with %s", target_id, remote_path, rc
            )
