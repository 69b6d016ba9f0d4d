"""Immutable configuration of a single fan-out run."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ct_common.errors import ConfigurationError

from .types import MAX_PARALLEL, MIN_PARALLEL


class RunConfiguration(BaseModel):
    """Options resolved from CLI flags or interactive prompts."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    operation_name: str = Field(min_length=1, description="Operation to distribute")
    operation_args: tuple[str, ...] = Field(
        default=(), description="Arguments forwarded verbatim to the operation"
    )
    include_stopped: bool = Field(
        default=False, description="Target containers that are not running"
    )
    parallelism: int = Field(
        default=MIN_PARALLEL,
        ge=MIN_PARALLEL,
        le=MAX_PARALLEL,
        description="Maximum number of containers processed at once",
    )
    exclude_ids: frozenset[str] = Field(
        default_factory=frozenset, description="Container ids never targeted"
    )
    include_ids: frozenset[str] = Field(
        default_factory=frozenset, description="If set, the only container ids targeted"
    )
    assume_yes: bool = Field(default=False, description="Skip the confirmation prompt")
    dry_run: bool = Field(default=False, description="Report actions without executing")

    @model_validator(mode="after")
    def _validate_selection(self) -> "RunConfiguration":
        if self.include_ids and self.exclude_ids:
            raise ValueError("Cannot use both --exclude and --include")
        return self


def _describe_validation_error(exc: ValidationError, values: Mapping[str, Any]) -> str:
    for item in exc.errors():
        loc = item.get("loc") or ()
        if loc and loc[0] == "parallelism":
            return (
                f"Parallel value must be between {MIN_PARALLEL} and {MAX_PARALLEL}: "
                f"{values.get('parallelism')}"
            )
    first = exc.errors()[0]
    message = str(first.get("msg", "invalid configuration"))
    return message.removeprefix("Value error, ")


def build_run_configuration(
    operation_name: str,
    operation_args: Iterable[str] = (),
    **options: Any,
) -> RunConfiguration:
    """Validate options into a RunConfiguration, raising ConfigurationError."""
    values: dict[str, Any] = {
        "operation_name": operation_name,
        "operation_args": tuple(operation_args),
        **options,
    }
    try:
        return RunConfiguration(**values)
    except ValidationError as exc:
        raise ConfigurationError(
            _describe_validation_error(exc, values),
            context={"operation": operation_name},
            cause=exc,
        ) from exc
