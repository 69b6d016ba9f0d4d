"""Container inventory queries."""

from __future__ import annotations

import logging

from ct_controller.contracts import ContainerBackend
from ct_controller.models.types import ContainerRecord

logger = logging.getLogger(__name__)


def list_containers(backend: ContainerBackend) -> list[ContainerRecord]:
    """Query the control plane once and return its containers in listing order.

    Errors from an unavailable control plane propagate as InventoryError; an
    empty fleet is returned as an empty list.
    """
    records = backend.list_containers()
    logger.debug(
        "Inventory: %d container(s), %d running",
        len(records),
        sum(1 for record in records if record.is_running),
    )
    return list(records)
