from __future__ import annotations

import typer

from ct_common.errors import InventoryError
from ct_controller.api import list_containers
from ct_ui.presenters.summary import build_inventory_table, build_operations_table
from ct_ui.wiring.dependencies import UIContext


def register_inventory_commands(app: typer.Typer, ctx: UIContext) -> None:
    """Register read-only listing commands (containers, operations)."""

    @app.command("containers")
    def containers(
        include_all: bool = typer.Option(
            False,
            "--all",
            "-a",
            help="Include containers that are not running.",
        ),
    ) -> None:
        """List containers known to this node."""
        try:
            records = list_containers(ctx.backend)
        except InventoryError as exc:
            ctx.ui.present.error(str(exc))
            raise typer.Exit(exc.exit_code)
        if not include_all:
            records = [record for record in records if record.is_running]
        if not records:
            ctx.ui.present.warning("No containers found.")
            return
        ctx.ui.tables.show(build_inventory_table(records))

    @app.command("operations")
    def operations() -> None:
        """List operations available in the operations directory."""
        catalog = ctx.catalog
        if not catalog.exists():
            ctx.ui.present.error(f"Operations directory not found: {catalog.directory}")
            raise typer.Exit(1)
        available = catalog.list()
        if not available:
            ctx.ui.present.warning(f"No operations found in {catalog.directory}")
            return
        ctx.ui.tables.show(build_operations_table(available))
