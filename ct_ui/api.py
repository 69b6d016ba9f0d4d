"""Public API surface for ct_ui."""

from ct_ui.presenters.summary import (
    build_inventory_table,
    build_operations_table,
    build_outcome_table,
    build_summary_table,
    render_summary,
)
from ct_ui.tui.system.headless import HeadlessUI
from ct_ui.wiring.dependencies import UIContext

__all__ = [
    "build_inventory_table",
    "build_operations_table",
    "build_outcome_table",
    "build_summary_table",
    "HeadlessUI",
    "render_summary",
    "UIContext",
]
