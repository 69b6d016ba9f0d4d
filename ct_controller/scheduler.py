"""Bounded fan-out of a per-target job across worker threads."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Callable, Iterable, Optional

from ct_controller.models.types import JobOutcome, JobResult

logger = logging.getLogger(__name__)

JobCallable = Callable[[str], JobOutcome]
OutcomeCallback = Callable[[JobOutcome], None]


def _safe_run(job: JobCallable, target_id: str) -> JobOutcome:
    """Run ``job`` and turn unexpected exceptions into a failed outcome."""
    try:
        return job(target_id)
    except Exception as exc:
        logger.exception("CT %s: job crashed", target_id)
        return JobOutcome(target_id, JobResult.FAILED, f"error: {exc}")


class JobScheduler:
    """Dispatch ``job`` for each target with at most ``parallelism`` in flight.

    With ``parallelism <= 1`` jobs run sequentially on the calling thread.
    Otherwise each job gets its own worker thread and reports exactly one
    outcome through a result queue; the controller thread is the only reader.
    Dispatched jobs always run to completion.
    """

    def __init__(
        self,
        job: JobCallable,
        parallelism: int = 1,
        on_outcome: Optional[OutcomeCallback] = None,
    ) -> None:
        self._job = job
        self.parallelism = max(1, int(parallelism))
        self._on_outcome = on_outcome

    def run_all(self, targets: Iterable[str]) -> list[JobOutcome]:
        target_list = list(targets)
        if self.parallelism <= 1:
            return self._run_sequential(target_list)
        return self._run_parallel(target_list)

    def _collect(self, outcome: JobOutcome, outcomes: list[JobOutcome]) -> None:
        outcomes.append(outcome)
        if self._on_outcome:
            self._on_outcome(outcome)

    def _run_sequential(self, targets: list[str]) -> list[JobOutcome]:
        outcomes: list[JobOutcome] = []
        for target_id in targets:
            self._collect(_safe_run(self._job, target_id), outcomes)
        return outcomes

    def _run_parallel(self, targets: list[str]) -> list[JobOutcome]:
        results: "queue.Queue[JobOutcome]" = queue.Queue()
        outcomes: list[JobOutcome] = []
        in_flight = 0

        def _worker(target_id: str) -> None:
            results.put(_safe_run(self._job, target_id))

        for target_id in targets:
            while in_flight >= self.parallelism:
                self._collect(results.get(), outcomes)
                in_flight -= 1
            thread = threading.Thread(
                target=_worker,
                args=(target_id,),
                name=f"ct-job-{target_id}",
                daemon=True,
            )
            thread.start()
            in_flight += 1

        while in_flight > 0:
            self._collect(results.get(), outcomes)
            in_flight -= 1
        return outcomes


def run_all(
    job: JobCallable,
    targets: Iterable[str],
    parallelism: int = 1,
    on_outcome: Optional[OutcomeCallback] = None,
) -> list[JobOutcome]:
    """Convenience wrapper around :class:`JobScheduler`."""
    return JobScheduler(job, parallelism, on_outcome=on_outcome).run_all(targets)
