"""Presenters for run results, inventories and operation listings."""

from __future__ import annotations

from typing import Sequence

from ct_controller.api import ContainerRecord, JobResult, Operation, RunSummary
from ct_ui.tui.core.theme import status_text
from ct_ui.tui.system.models import TableModel
from ct_ui.tui.system.protocols import UI


def build_summary_table(summary: RunSummary) -> TableModel:
    return TableModel(
        title="Summary",
        columns=["Result", "Count"],
        rows=[
            ["Success", str(summary.success)],
            ["Skipped", str(summary.skipped)],
            ["Failed", str(summary.failed)],
        ],
    )


def build_outcome_table(summary: RunSummary) -> TableModel:
    """Per-target rows for anything that did not succeed, sorted by id."""
    rows = [
        [outcome.target_id, status_text(outcome.result.value), outcome.detail or "-"]
        for outcome in sorted(summary.outcomes, key=lambda o: o.target_id)
        if outcome.result is not JobResult.SUCCESS
    ]
    return TableModel(title="Problems", columns=["CT", "Result", "Detail"], rows=rows)


def render_summary(ui: UI, summary: RunSummary) -> None:
    """Print the final tally; per-target problems are listed when present."""
    ui.present.rule("Summary")
    ui.tables.show(build_summary_table(summary))
    problems = build_outcome_table(summary)
    if not problems.is_empty:
        ui.tables.show(problems)


def build_inventory_table(records: Sequence[ContainerRecord]) -> TableModel:
    return TableModel(
        title="Containers",
        columns=["CT", "Status"],
        rows=[[record.id, status_text(record.status.value)] for record in records],
    )


def build_operations_table(operations: Sequence[Operation]) -> TableModel:
    return TableModel(
        title="Available Operations",
        columns=["Name", "Path"],
        rows=[[operation.name, str(operation.path)] for operation in operations],
    )
