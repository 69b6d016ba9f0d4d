"""Interactive prompts used when `run` is given no executor options."""

from __future__ import annotations

from dataclasses import dataclass, field

from ct_common.config.env import parse_id_list
from ct_controller.api import MAX_PARALLEL, MIN_PARALLEL, ExecutorSettings
from ct_ui.tui.system.protocols import UI


@dataclass
class WizardAnswers:
    include_stopped: bool = False
    parallelism: int = MIN_PARALLEL
    include_ids: frozenset[str] = field(default_factory=frozenset)
    exclude_ids: frozenset[str] = field(default_factory=frozenset)
    dry_run: bool = False


def _parse_parallel(raw: str, fallback: int) -> int:
    value = raw.strip()
    if not value.isdigit():
        return fallback
    parsed = int(value)
    if MIN_PARALLEL <= parsed <= MAX_PARALLEL:
        return parsed
    return fallback


def run_config_wizard(
    ui: UI,
    operation_name: str,
    operation_args: tuple[str, ...],
    settings: ExecutorSettings,
) -> WizardAnswers:
    """Ask for each executor option; blank answers keep the defaults.

    An include list takes precedence: the exclude prompt is only shown when
    no include list was given, so the two can never both be set here.
    """
    ui.present.info("Container Executor Configuration")
    ui.present.info(f"Script: {operation_name}")
    ui.present.info(f"Script args: {' '.join(operation_args) or 'none'}")
    ui.present.info("Press Enter for defaults, or specify custom values.")

    answers = WizardAnswers()
    answers.include_stopped = ui.form.confirm(
        "Include stopped containers?", default=settings.default_include_all
    )
    answers.parallelism = _parse_parallel(
        ui.form.ask(
            f"Number of parallel executions ({MIN_PARALLEL}-{MAX_PARALLEL})",
            default=str(settings.default_parallel),
        ),
        settings.default_parallel,
    )
    include = parse_id_list(
        ui.form.ask("Include only specific container IDs (comma-separated, e.g., 101,105)")
    )
    if include:
        answers.include_ids = include
    else:
        answers.exclude_ids = parse_id_list(
            ui.form.ask("Exclude specific container IDs (comma-separated, e.g., 101,105)")
        )
    answers.dry_run = ui.form.confirm(
        "Dry run (show what would be done without executing)?", default=False
    )
    return answers
