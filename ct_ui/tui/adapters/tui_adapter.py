from ct_controller.api import UIAdapter
from ct_ui.tui.system.protocols import UI


class TUIAdapter(UIAdapter):
    """Feeds controller progress into the UI facade."""

    def __init__(self, tui: UI):
        self.tui = tui

    def show_info(self, message: str) -> None:
        self.tui.present.info(message)

    def show_warning(self, message: str) -> None:
        self.tui.present.warning(message)

    def show_error(self, message: str) -> None:
        self.tui.present.error(message)

    def show_success(self, message: str) -> None:
        self.tui.present.success(message)

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return self.tui.form.confirm(prompt, default=default)
