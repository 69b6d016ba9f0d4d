from __future__ import annotations

import itertools
from typing import Optional

import typer
from typer.core import TyperCommand

from ct_common.config.env import parse_id_list
from ct_common.errors import CTError, ConfigurationError, InventoryError
from ct_controller.api import (
    JobOutcome,
    JobResult,
    RunAborted,
    RunConfiguration,
    build_run_configuration,
)
from ct_ui.flows.config_wizard import run_config_wizard
from ct_ui.presenters.summary import render_summary
from ct_ui.wiring.dependencies import UIContext

FORWARDED_ARGS_KEY = "ct_forwarded_args"

# Executor options; any other token, even a cluster such as `-fd`, belongs to
# the operation and is forwarded whole.
FLAG_OPTIONS = frozenset(
    {"--all", "-a", "--yes", "-y", "--dry-run", "-d", "--help", "-h"}
)
VALUE_OPTIONS = frozenset(
    {"--parallel", "-p", "--exclude", "-e", "--include", "-i"}
)


def split_forwarded_args(args: list[str]) -> tuple[list[str], list[str]]:
    """Split raw `run` arguments into executor arguments and forwarded ones.

    Only exact executor flags, their values and the first positional (the
    operation name) stay with the executor. Everything after `--` is forwarded.
    """
    own: list[str] = []
    forwarded: list[str] = []
    have_operation = False
    tokens = iter(args)
    for token in tokens:
        if token == "--":
            forwarded.extend(tokens)
            break
        if token in FLAG_OPTIONS:
            own.append(token)
        elif token in VALUE_OPTIONS:
            own.append(token)
            own.extend(itertools.islice(tokens, 1))
        elif token.startswith("--") and token.split("=", 1)[0] in VALUE_OPTIONS:
            own.append(token)
        elif not token.startswith("-") and not have_operation:
            own.append(token)
            have_operation = True
        else:
            forwarded.append(token)
    return own, forwarded


class ForwardingCommand(TyperCommand):
    """`run` command that hands unknown tokens to the operation untouched."""

    def parse_args(self, ctx, args):
        own, forwarded = split_forwarded_args(list(args))
        ctx.meta[FORWARDED_ARGS_KEY] = tuple(forwarded)
        return super().parse_args(ctx, own)


def register_run_command(
    app: typer.Typer,
    ctx: UIContext,
) -> None:
    """Register the fan-out run command on the given Typer app."""

    def _build_config(
        operation: str,
        operation_args: tuple[str, ...],
        *,
        include_all: bool,
        parallel: Optional[int],
        exclude: Optional[str],
        include: Optional[str],
        yes: bool,
        dry_run: bool,
    ) -> RunConfiguration:
        explicit = (
            include_all
            or yes
            or dry_run
            or parallel is not None
            or exclude is not None
            or include is not None
        )
        if not explicit and ctx.interactive:
            answers = run_config_wizard(ctx.ui, operation, operation_args, ctx.settings)
            return build_run_configuration(
                operation,
                operation_args,
                include_stopped=answers.include_stopped,
                parallelism=answers.parallelism,
                include_ids=answers.include_ids,
                exclude_ids=answers.exclude_ids,
                dry_run=answers.dry_run,
            )

        settings = ctx.settings
        exclude_ids = parse_id_list(exclude)
        include_ids = parse_id_list(include)
        # Configured default lists only apply when neither list was given.
        if exclude is None and include is None:
            exclude_ids = settings.default_exclude
            include_ids = settings.default_include
        return build_run_configuration(
            operation,
            operation_args,
            include_stopped=include_all or settings.default_include_all,
            parallelism=settings.default_parallel if parallel is None else parallel,
            exclude_ids=exclude_ids,
            include_ids=include_ids,
            assume_yes=yes,
            dry_run=dry_run,
        )

    @app.command("run", cls=ForwardingCommand)
    def run(
        typer_ctx: typer.Context,
        operation: str = typer.Argument(
            ...,
            help="Operation script name in the operations directory (e.g. ct-update.sh).",
        ),
        include_all: bool = typer.Option(
            False,
            "--all",
            "-a",
            help="Include stopped containers.",
        ),
        parallel: Optional[int] = typer.Option(
            None,
            "--parallel",
            "-p",
            help="Run up to N containers in parallel (1-20).",
        ),
        exclude: Optional[str] = typer.Option(
            None,
            "--exclude",
            "-e",
            help="Comma-separated CTIDs to exclude (e.g., 101,105).",
        ),
        include: Optional[str] = typer.Option(
            None,
            "--include",
            "-i",
            help="Comma-separated CTIDs to include only (e.g., 101,105).",
        ),
        yes: bool = typer.Option(
            False,
            "--yes",
            "-y",
            help="Skip confirmation prompt.",
        ),
        dry_run: bool = typer.Option(
            False,
            "--dry-run",
            "-d",
            help="Show what would be executed without running.",
        ),
    ) -> None:
        """Execute an operation across LXC containers.

        Unrecognized options are passed to the operation; everything after
        `--` is passed through untouched.
        """
        operation_args = typer_ctx.meta.get(FORWARDED_ARGS_KEY, ())
        try:
            ctx.doctor_service.require_host()
            ctx.catalog.resolve(operation)
            config = _build_config(
                operation,
                operation_args,
                include_all=include_all,
                parallel=parallel,
                exclude=exclude,
                include=include,
                yes=yes,
                dry_run=dry_run,
            )
            service = ctx.fanout_service
            ctx.ui.present.rule(f"PVE: Execute {operation} on LXC Containers")
            plan = service.plan(config)
            if plan.is_empty:
                raise typer.Exit(0)
            service.confirm(plan)
        except RunAborted as exc:
            ctx.ui.present.warning(str(exc))
            raise typer.Exit(exc.exit_code)
        except (ConfigurationError, InventoryError) as exc:
            ctx.ui.present.error(str(exc))
            raise typer.Exit(exc.exit_code)

        total = len(plan.targets)
        completed: list[JobOutcome] = []

        def _on_outcome(outcome: JobOutcome) -> None:
            completed.append(outcome)
            if config.parallelism > 1 and outcome.result is not JobResult.SUCCESS:
                ctx.ui.present.info(
                    f"[{len(completed)}/{total}] CT {outcome.target_id}: "
                    f"{outcome.result.value} ({outcome.detail or '-'})"
                )

        try:
            summary = service.execute(plan, on_outcome=_on_outcome)
        except CTError as exc:
            ctx.ui.present.error(str(exc))
            raise typer.Exit(exc.exit_code)

        render_summary(ctx.ui, summary)
        raise typer.Exit(summary.exit_code)
