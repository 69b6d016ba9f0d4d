"""Typed failures raised by the executor.

Every error carries a JSON-friendly ``context`` mapping so it can be logged as
structured fields, and an ``exit_code`` the CLI uses when the error is fatal.
"""

from __future__ import annotations

from typing import Any, Mapping


def _jsonable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted(_jsonable(item) for item in value)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


class CTError(Exception):
    """Base class for executor failures."""

    exit_code = 1

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = _jsonable(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ConfigurationError(CTError):
    """Invalid options, a missing operation, or a host that cannot run pct."""


class InventoryError(CTError):
    """The container listing could not be obtained."""


class RemoteExecutionError(CTError):
    """A per-container control-plane call failed outright."""


class StepTimeoutError(RemoteExecutionError):
    """A per-container step ran past its timeout."""


def error_to_payload(error: CTError) -> dict[str, Any]:
    """Flatten an error into ``extra`` fields for a log record."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
