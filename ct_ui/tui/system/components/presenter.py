from rich.console import Console
from rich.rule import Rule

from ct_ui.tui.core.theme import PRESENTER_TEMPLATES, RICH_ACCENT
from ct_ui.tui.system.components.presenter_base import MessageLevel, PresenterBase


class _ConsoleSink:
    def __init__(self, console: Console) -> None:
        self._console = console

    def emit(self, level: MessageLevel, message: str) -> None:
        self._console.print(PRESENTER_TEMPLATES[level.value].format(message=message))

    def emit_rule(self, title: str) -> None:
        self._console.print(Rule(title, style=RICH_ACCENT))


class RichPresenter(PresenterBase):
    def __init__(self, console: Console) -> None:
        super().__init__(_ConsoleSink(console))
