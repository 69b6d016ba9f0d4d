"""Structural types for the UI facade; rich and headless implementations satisfy them."""

from typing import Protocol

from ct_ui.tui.system.models import TableModel


class TablePresenter(Protocol):
    def show(self, table: TableModel) -> None: ...


class Presenter(Protocol):
    """One-line status messages plus section rules."""

    def info(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def success(self, message: str) -> None: ...
    def rule(self, title: str) -> None: ...


class Form(Protocol):
    """Prompts; a closed stdin answers with the default."""

    def ask(self, prompt: str, default: str | None = None) -> str: ...
    def confirm(self, prompt: str, default: bool = True) -> bool: ...


class UI(Protocol):
    tables: TablePresenter
    present: Presenter
    form: Form
