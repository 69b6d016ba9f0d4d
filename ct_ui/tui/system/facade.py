from rich.console import Console

from ct_ui.tui.system.components.form import RichForm
from ct_ui.tui.system.components.presenter import RichPresenter
from ct_ui.tui.system.components.table import RichTablePresenter
from ct_ui.tui.system.protocols import UI, Form, Presenter, TablePresenter


class TUI(UI):
    def __init__(self, console: Console | None = None):
        self._console = console or Console()
        self.tables: TablePresenter = RichTablePresenter(self._console)
        self.present: Presenter = RichPresenter(self._console)
        self.form: Form = RichForm(self._console)
