import os

import pytest

from ct_common.errors import ConfigurationError
from ct_controller.api import OperationCatalog

pytestmark = [pytest.mark.unit_controller]


def test_list_returns_sorted_scripts(operations_dir):
    (operations_dir / "a-first.sh").write_text("#!/bin/bash\n")
    (operations_dir / "README.md").write_text("docs")
    (operations_dir / "nested.sh").mkdir()

    names = [op.name for op in OperationCatalog(operations_dir).list()]

    assert names == ["a-first.sh", "ct-update.sh"]


def test_missing_directory(tmp_path):
    catalog = OperationCatalog(tmp_path / "absent")

    assert not catalog.exists()
    assert catalog.list() == []


def test_resolve_existing(operations_dir):
    op = OperationCatalog(operations_dir).resolve("ct-update.sh")

    assert op.path == operations_dir / "ct-update.sh"
    assert op.remote_path == "/tmp/ct-update.sh"


def test_resolve_missing_script(operations_dir):
    with pytest.raises(ConfigurationError, match="Script not found"):
        OperationCatalog(operations_dir).resolve("nope.sh")


@pytest.mark.parametrize("name", ["", "../etc/passwd", "sub/ct-update.sh"])
def test_resolve_rejects_paths(operations_dir, name):
    with pytest.raises(ConfigurationError):
        OperationCatalog(operations_dir).resolve(name)


def test_resolve_makes_script_executable(operations_dir):
    script = operations_dir / "plain.sh"
    script.write_text("#!/bin/bash\n")
    script.chmod(0o644)

    OperationCatalog(operations_dir).resolve("plain.sh")

    assert os.access(script, os.X_OK)
