"""Environment-driven executor defaults."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, Field

from ct_common.config.env import parse_bool_env, parse_float_env, parse_id_list, parse_int_env

from ct_controller.models.types import MAX_PARALLEL, MIN_PARALLEL

DEFAULT_OPERATIONS_DIR = Path("./ct-scripts")


class ExecutorSettings(BaseModel):
    """Defaults applied when some executor options are given on the command line.

    Timeouts are in seconds; ``0`` disables the timeout for that step.
    """

    operations_dir: Path = Field(default=DEFAULT_OPERATIONS_DIR)
    default_include_all: bool = False
    default_parallel: int = Field(default=1, ge=MIN_PARALLEL, le=MAX_PARALLEL)
    default_exclude: frozenset[str] = Field(default_factory=frozenset)
    default_include: frozenset[str] = Field(default_factory=frozenset)
    status_timeout: float = Field(default=30.0, ge=0)
    push_timeout: float = Field(default=120.0, ge=0)
    exec_timeout: float = Field(default=3600.0, ge=0)

    model_config = {"extra": "ignore", "frozen": True}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ExecutorSettings":
        """Build settings from ``CT_*`` variables, ignoring unparsable values."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        operations_dir = env.get("CT_OPERATIONS_DIR")
        if operations_dir:
            values["operations_dir"] = Path(operations_dir)

        include_all = parse_bool_env(env.get("CT_DEFAULT_INCLUDE_ALL"))
        if include_all is not None:
            values["default_include_all"] = include_all

        parallel = parse_int_env(env.get("CT_DEFAULT_PARALLEL"))
        if parallel is not None and MIN_PARALLEL <= parallel <= MAX_PARALLEL:
            values["default_parallel"] = parallel

        values["default_exclude"] = parse_id_list(env.get("CT_DEFAULT_EXCLUDE"))
        values["default_include"] = parse_id_list(env.get("CT_DEFAULT_INCLUDE"))

        for key, var in (
            ("status_timeout", "CT_STATUS_TIMEOUT"),
            ("push_timeout", "CT_PUSH_TIMEOUT"),
            ("exec_timeout", "CT_EXEC_TIMEOUT"),
        ):
            parsed = parse_float_env(env.get(var))
            if parsed is not None and parsed >= 0:
                values[key] = parsed

        return cls(**values)
