from __future__ import annotations

import threading
from enum import Enum
from typing import Protocol

from ct_ui.tui.system.protocols import Presenter


class MessageLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


class PresenterSink(Protocol):
    def emit(self, level: MessageLevel, message: str) -> None: ...

    def emit_rule(self, title: str) -> None: ...


class PresenterBase(Presenter):
    """Presenter that forwards to a sink, one message at a time.

    Worker threads report progress concurrently; the lock keeps each message
    on its own line.
    """

    def __init__(self, sink: PresenterSink) -> None:
        self._sink = sink
        self._lock = threading.Lock()

    def _emit(self, level: MessageLevel, message: str) -> None:
        with self._lock:
            self._sink.emit(level, message)

    def info(self, message: str) -> None:
        self._emit(MessageLevel.INFO, message)

    def warning(self, message: str) -> None:
        self._emit(MessageLevel.WARNING, message)

    def error(self, message: str) -> None:
        self._emit(MessageLevel.ERROR, message)

    def success(self, message: str) -> None:
        self._emit(MessageLevel.SUCCESS, message)

    def rule(self, title: str) -> None:
        with self._lock:
            self._sink.emit_rule(title)
