"""Public API surface for ct_common."""

from ct_common.errors import (
    ConfigurationError,
    CTError,
    InventoryError,
    RemoteExecutionError,
    StepTimeoutError,
    error_to_payload,
)
from ct_common.logging import bind_run_context, clear_run_context, configure_logging

__all__ = [
    "bind_run_context",
    "clear_run_context",
    "configure_logging",
    "ConfigurationError",
    "CTError",
    "error_to_payload",
    "InventoryError",
    "RemoteExecutionError",
    "StepTimeoutError",
]
