"""Tally job outcomes into a run summary."""

from __future__ import annotations

from typing import Iterable

from ct_controller.models.types import JobOutcome, JobResult, RunSummary


def aggregate(outcomes: Iterable[JobOutcome]) -> RunSummary:
    """Count outcomes by result; ``exit_code`` is 2 when anything failed."""
    summary = RunSummary()
    for outcome in outcomes:
        summary.outcomes.append(outcome)
        if outcome.result is JobResult.SUCCESS:
            summary.success += 1
        elif outcome.result is JobResult.SKIPPED:
            summary.skipped += 1
        else:
            summary.failed += 1
    return summary
