from rich import box
from rich.console import Console
from rich.table import Table

from ct_ui.tui.core import theme
from ct_ui.tui.system.models import TableModel
from ct_ui.tui.system.protocols import TablePresenter


def build_rich_table(model: TableModel) -> Table:
    """Build a Rich Table from a TableModel; cells may carry rich markup."""
    rich_table = Table(
        title=model.title,
        show_lines=False,
        box=box.ROUNDED,
        border_style=theme.RICH_BORDER_STYLE,
        header_style=theme.RICH_ACCENT_BOLD,
        title_style=theme.RICH_ACCENT_BOLD,
    )
    for column in model.columns:
        rich_table.add_column(column)
    for row in model.rows:
        rich_table.add_row(*[str(cell) for cell in row])
    return rich_table


class RichTablePresenter(TablePresenter):
    def __init__(self, console: Console):
        self._console = console

    def show(self, table: TableModel) -> None:
        self._console.print(build_rich_table(table))
