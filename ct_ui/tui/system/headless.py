from dataclasses import dataclass, field

from ct_ui.tui.system.components.presenter_base import MessageLevel, PresenterBase
from ct_ui.tui.system.models import TableModel
from ct_ui.tui.system.protocols import UI, Form, TablePresenter


@dataclass
class RecordedTable:
    model: TableModel


@dataclass
class HeadlessUI(UI):
    recorded_tables: list[RecordedTable] = field(default_factory=list)
    recorded_messages: list[str] = field(default_factory=list)
    recorded_prompts: list[str] = field(default_factory=list)

    # Scripted answers, consumed in order; the single values are the fallback.
    form_responses: list[str] = field(default_factory=list)
    confirm_responses: list[bool] = field(default_factory=list)
    next_form_response: str = ""
    next_confirm_response: bool = True

    def __post_init__(self):
        self.tables = _HeadlessTablePresenter(self)
        self.present = _HeadlessPresenter(self)
        self.form = _HeadlessForm(self)


class _HeadlessTablePresenter(TablePresenter):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def show(self, table: TableModel) -> None:
        self._ui.recorded_tables.append(RecordedTable(table))


class _RecordingSink:
    def __init__(self, ui: HeadlessUI) -> None:
        self._ui = ui

    def emit(self, level: MessageLevel, message: str) -> None:
        self._ui.recorded_messages.append(f"{level.name}: {message}")

    def emit_rule(self, title: str) -> None:
        self._ui.recorded_messages.append(f"RULE: {title}")


class _HeadlessPresenter(PresenterBase):
    def __init__(self, ui: HeadlessUI) -> None:
        super().__init__(_RecordingSink(ui))


class _HeadlessForm(Form):
    def __init__(self, ui: HeadlessUI):
        self._ui = ui

    def ask(self, prompt: str, default: str | None = None) -> str:
        self._ui.recorded_prompts.append(prompt)
        if self._ui.form_responses:
            return self._ui.form_responses.pop(0)
        return self._ui.next_form_response

    def confirm(self, prompt: str, default: bool = True) -> bool:
        self._ui.recorded_prompts.append(prompt)
        if self._ui.confirm_responses:
            return self._ui.confirm_responses.pop(0)
        return self._ui.next_confirm_response
