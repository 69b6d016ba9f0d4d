"""Shared logging configuration using structlog."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Any

import structlog

from ct_common.config.env import parse_bool_env

DEFAULT_LEVEL = logging.WARNING


@dataclass(frozen=True)
class _LoggingOptions:
    level: int
    json: bool
    log_file: str | None


def _level_from(value: str | int | None) -> int:
    if value is None:
        return DEFAULT_LEVEL
    if isinstance(value, int) or value.isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value.upper(), DEFAULT_LEVEL)


def _resolve_options(
    level: str | int | None,
    debug: bool,
    log_file: str | None,
    json: bool | None,
) -> _LoggingOptions:
    """Merge explicit arguments with ``CT_LOG_LEVEL``/``CT_LOG_JSON``/``CT_LOG_FILE``."""
    env_json = parse_bool_env(os.environ.get("CT_LOG_JSON"))
    return _LoggingOptions(
        level=logging.DEBUG if debug else _level_from(level or os.environ.get("CT_LOG_LEVEL")),
        json=bool(env_json if json is None else json),
        log_file=os.environ.get("CT_LOG_FILE") if log_file is None else log_file,
    )


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_formatter(json: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        # ExtraAdder surfaces ``extra=`` fields such as error payloads.
        foreign_pre_chain=[*_shared_processors(), structlog.stdlib.ExtraAdder()],
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> None:
    """Route stdlib logging through a structlog formatter on stderr.

    The terminal belongs to the rich presenter, so only warnings and above are
    logged unless a level is requested. Without ``force`` an already configured
    root logger is left alone.
    """
    _configure_structlog()
    root = logging.getLogger()
    if root.handlers and not force:
        return

    options = _resolve_options(level, debug, log_file, json)
    formatter = _build_formatter(options.json)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if options.log_file:
        handlers.append(logging.FileHandler(options.log_file))

    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(options.level)


def bind_run_context(**values: Any) -> None:
    """Attach fields (operation, parallelism, ...) to every record of this run."""
    structlog.contextvars.bind_contextvars(**values)


def clear_run_context() -> None:
    structlog.contextvars.clear_contextvars()
