from pathlib import Path

import pytest

from ct_controller.api import ExecutorSettings

pytestmark = [pytest.mark.unit_controller]


def test_defaults_without_environment():
    settings = ExecutorSettings.from_env({})

    assert settings.operations_dir == Path("./ct-scripts")
    assert settings.default_parallel == 1
    assert not settings.default_include_all
    assert settings.default_exclude == frozenset()
    assert settings.exec_timeout == 3600.0


def test_values_read_from_environment():
    settings = ExecutorSettings.from_env(
        {
            "CT_OPERATIONS_DIR": "/srv/ops",
            "CT_DEFAULT_INCLUDE_ALL": "yes",
            "CT_DEFAULT_PARALLEL": "4",
            "CT_DEFAULT_EXCLUDE": "101, 102",
            "CT_EXEC_TIMEOUT": "0",
            "CT_PUSH_TIMEOUT": "15.5",
        }
    )

    assert settings.operations_dir == Path("/srv/ops")
    assert settings.default_include_all
    assert settings.default_parallel == 4
    assert settings.default_exclude == frozenset({"101", "102"})
    assert settings.exec_timeout == 0
    assert settings.push_timeout == 15.5


@pytest.mark.parametrize("raw", ["0", "21", "many"])
def test_invalid_parallel_falls_back(raw):
    assert ExecutorSettings.from_env({"CT_DEFAULT_PARALLEL": raw}).default_parallel == 1


def test_negative_timeout_is_ignored():
    assert ExecutorSettings.from_env({"CT_STATUS_TIMEOUT": "-1"}).status_timeout == 30.0


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("CT_DEFAULT_INCLUDE", "105")

    assert ExecutorSettings.from_env().default_include == frozenset({"105"})
