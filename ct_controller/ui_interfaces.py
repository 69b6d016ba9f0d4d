"""Presentation hooks the controller calls into."""

from __future__ import annotations

from typing import Protocol


class UIAdapter(Protocol):
    """Where the runner and services send progress messages and questions.

    The runner calls the ``show_*`` methods from scheduler worker threads, so
    implementations must tolerate concurrent calls.
    """

    def show_info(self, message: str) -> None: ...

    def show_warning(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def show_success(self, message: str) -> None: ...

    def confirm(self, prompt: str, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...


class NoOpUIAdapter:
    """Discards output and answers every question with "no"."""

    def show_info(self, message: str) -> None:
        pass

    show_warning = show_error = show_success = show_info

    def confirm(self, prompt: str, default: bool = False) -> bool:
        return False
