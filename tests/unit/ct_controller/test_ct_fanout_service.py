import pytest

from ct_common.errors import ConfigurationError, InventoryError
from ct_controller.api import (
    FanOutService,
    JobResult,
    OperationCatalog,
    RunAborted,
    build_run_configuration,
)
from tests.helpers.fake_backend import FakeBackend, failing_inventory

pytestmark = [pytest.mark.unit_controller]


class ScriptedUI:
    def __init__(self, answer=True):
        self.answer = answer
        self.messages = []
        self.prompts = []

    def show_info(self, message):
        self.messages.append(message)

    show_warning = show_error = show_success = show_info

    def confirm(self, prompt, default=False):
        self.prompts.append(prompt)
        return self.answer


def _service(backend, operations_dir, answer=True):
    return FanOutService(backend, OperationCatalog(operations_dir), ScriptedUI(answer))


def test_plan_filters_inventory(operations_dir):
    backend = FakeBackend([("101", "running"), ("102", "stopped"), ("103", "running")])
    service = _service(backend, operations_dir)

    plan = service.plan(build_run_configuration("ct-update.sh", exclude_ids=frozenset({"103"})))

    assert plan.targets == ["101"]
    assert plan.operation.name == "ct-update.sh"
    assert backend.status_queries == []


def test_plan_warns_on_empty_inventory(operations_dir):
    service = _service(FakeBackend([]), operations_dir)

    plan = service.plan(build_run_configuration("ct-update.sh"))

    assert plan.is_empty
    assert "No containers found." in service.ui.messages


def test_plan_warns_when_nothing_matches(operations_dir):
    service = _service(FakeBackend([("102", "stopped")]), operations_dir)

    plan = service.plan(build_run_configuration("ct-update.sh"))

    assert plan.is_empty
    assert "No matching containers (check filters and --all option)." in service.ui.messages


def test_plan_unknown_operation(operations_dir):
    service = _service(FakeBackend([("101", "running")]), operations_dir)

    with pytest.raises(ConfigurationError, match="Script not found"):
        service.plan(build_run_configuration("missing.sh"))


def test_plan_inventory_failure_propagates(operations_dir):
    service = _service(failing_inventory(), operations_dir)

    with pytest.raises(InventoryError):
        service.plan(build_run_configuration("ct-update.sh"))


def test_run_asks_and_aborts_when_declined(operations_dir):
    backend = FakeBackend([("101", "running"), ("103", "running")])
    service = _service(backend, operations_dir, answer=False)

    with pytest.raises(RunAborted):
        service.run(build_run_configuration("ct-update.sh"))

    assert service.ui.prompts == ["Proceed with execution on 2 container(s)?"]
    assert backend.commands == []


def test_run_assume_yes_skips_prompt(operations_dir):
    backend = FakeBackend([("101", "running"), ("102", "running")], exec_rc={"102": 1})
    service = _service(backend, operations_dir, answer=False)
    seen = []

    summary = service.run(
        build_run_configuration("ct-update.sh", assume_yes=True, parallelism=2),
        on_outcome=seen.append,
    )

    assert service.ui.prompts == []
    assert (summary.success, summary.failed) == (1, 1)
    assert summary.exit_code == 2
    assert len(seen) == 2


def test_run_with_no_targets_does_not_prompt(operations_dir):
    service = _service(FakeBackend([("102", "stopped")]), operations_dir)

    summary = service.run(build_run_configuration("ct-update.sh"))

    assert summary.total == 0
    assert summary.exit_code == 0
    assert service.ui.prompts == []


def test_execute_dry_run(operations_dir):
    backend = FakeBackend([("101", "running"), ("102", "stopped")])
    service = _service(backend, operations_dir)
    plan = service.plan(
        build_run_configuration("ct-update.sh", include_stopped=True, dry_run=True)
    )

    summary = service.execute(plan)

    results = {o.target_id: o.result for o in summary.outcomes}
    assert results == {"101": JobResult.SUCCESS, "102": JobResult.SKIPPED}
    assert backend.pushes == []
