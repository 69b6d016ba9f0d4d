"""
Command-line interface for pve-ct-executor.

Runs operation scripts across Proxmox VE LXC containers and inspects the node.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from ct_ui.cli.commands.doctor import register_doctor_command
from ct_ui.cli.commands.inventory import register_inventory_commands
from ct_ui.cli.commands.run import register_run_command
from ct_ui.wiring.dependencies import UIContext, configure_logging

# typer may ship its own copy of click; take the base class from typer itself.
ClickException: type[Exception] = next(
    cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "ClickException"
)

# Initialize global context (lazy)
ctx_store = UIContext()

app = typer.Typer(
    help="Run maintenance operations across Proxmox VE LXC containers.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def entry(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable verbose debug logging.",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write logs to this file.",
    ),
) -> None:
    """Global options shared by every command."""
    configure_logging(
        debug=debug,
        log_file=str(log_file) if log_file else None,
        force=True,
    )


register_run_command(app, ctx_store)
register_inventory_commands(app, ctx_store)
register_doctor_command(app, ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app).

    Usage errors exit with 1 so that 2 stays reserved for failed targets.
    """
    try:
        rc = app(standalone_mode=False)
    except typer.Abort:
        ctx_store.ui.present.warning("Aborted.")
        sys.exit(1)
    except ClickException as exc:
        exc.show()
        sys.exit(1)
    sys.exit(rc if isinstance(rc, int) else 0)


if __name__ == "__main__":
    main()
