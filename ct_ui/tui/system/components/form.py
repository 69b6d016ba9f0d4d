from rich.console import Console
from rich.prompt import Confirm, Prompt

from ct_ui.tui.system.protocols import Form


class RichForm(Form):
    def __init__(self, console: Console):
        self._console = console

    def ask(self, prompt: str, default: str | None = None) -> str:
        try:
            if default is None:
                return Prompt.ask(prompt, console=self._console, default="", show_default=False)
            return Prompt.ask(prompt, console=self._console, default=default)
        except EOFError:
            return default or ""

    def confirm(self, prompt: str, default: bool = True) -> bool:
        # Closed stdin answers with the default, like an empty reply.
        try:
            return Confirm.ask(prompt, console=self._console, default=default)
        except EOFError:
            return default
