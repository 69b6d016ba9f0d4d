"""Target selection from an inventory snapshot."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from ct_common.errors import ConfigurationError
from ct_controller.models.run_config import RunConfiguration
from ct_controller.models.types import ContainerRecord


def validate_selection(include_ids: AbstractSet[str], exclude_ids: AbstractSet[str]) -> None:
    """Reject configurations that set both an allow-list and a deny-list."""
    if include_ids and exclude_ids:
        raise ConfigurationError(
            "Cannot use both --exclude and --include",
            context={"include": sorted(include_ids), "exclude": sorted(exclude_ids)},
        )


def is_target(record: ContainerRecord, config: RunConfiguration) -> bool:
    """Apply exclusion, inclusion and status rules to one record."""
    if config.exclude_ids and record.id in config.exclude_ids:
        return False
    if config.include_ids and record.id not in config.include_ids:
        return False
    if not config.include_stopped and not record.is_running:
        return False
    return True


def filter_targets(
    records: Iterable[ContainerRecord], config: RunConfiguration
) -> list[str]:
    """Return the ids of records selected by ``config``, in inventory order."""
    validate_selection(config.include_ids, config.exclude_ids)
    return [record.id for record in records if is_target(record, config)]
