"""Catalog of operation payloads available for fan-out."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ct_common.errors import ConfigurationError
from ct_controller.models.types import Operation

logger = logging.getLogger(__name__)

OPERATION_GLOB = "*.sh"


class OperationCatalog:
    """Resolve operation names against a directory of scripts."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def exists(self) -> bool:
        return self.directory.is_dir()

    def list(self) -> list[Operation]:
        """Return available operations sorted by name."""
        if not self.exists():
            return []
        return [
            Operation(name=path.name, path=path)
            for path in sorted(self.directory.glob(OPERATION_GLOB))
            if path.is_file()
        ]

    def resolve(self, name: str) -> Operation:
        """Return the operation called ``name``, making it executable if needed."""
        if not name or Path(name).name != name:
            raise ConfigurationError(
                f"Invalid operation name: {name!r}", context={"operation": name}
            )
        path = self.directory / name
        if not path.is_file():
            raise ConfigurationError(
                f"Script not found: {path}",
                context={"operation": name, "directory": self.directory},
            )
        if not os.access(path, os.X_OK):
            logger.warning("Making script executable: %s", path)
            mode = path.stat().st_mode
            path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return Operation(name=name, path=path)
