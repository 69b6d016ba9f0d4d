from pathlib import Path

import pytest


@pytest.fixture
def operations_dir(tmp_path: Path) -> Path:
    """Operations directory holding an executable ``ct-update.sh``."""
    ops = tmp_path / "ct-scripts"
    ops.mkdir()
    script = ops / "ct-update.sh"
    script.write_text("#!/bin/bash\necho updated\n")
    script.chmod(0o755)
    return ops
