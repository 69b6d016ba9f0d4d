from __future__ import annotations

import typer

from ct_ui.presenters.doctor import render_doctor_report
from ct_ui.wiring.dependencies import UIContext


def register_doctor_command(app: typer.Typer, ctx: UIContext) -> None:
    """Register the host health check command."""

    @app.command("doctor")
    def doctor() -> None:
        """Check host prerequisites (root, pct, operations directory)."""
        report = ctx.doctor_service.check_host()
        ok = render_doctor_report(ctx.ui, report)
        if not ok:
            raise typer.Exit(1)
