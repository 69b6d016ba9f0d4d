import pytest
from pydantic import ValidationError

from ct_common.errors import ConfigurationError
from ct_controller.api import (
    ContainerRecord,
    ContainerStatus,
    RunConfiguration,
    build_run_configuration,
)
from ct_controller.models.types import Operation

pytestmark = [pytest.mark.unit_controller]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("running", ContainerStatus.RUNNING),
        ("stopped", ContainerStatus.STOPPED),
        ("Running", ContainerStatus.UNKNOWN),
        ("paused", ContainerStatus.UNKNOWN),
        (None, ContainerStatus.UNKNOWN),
    ],
)
def test_status_parse_only_accepts_exact_values(raw, expected):
    assert ContainerStatus.parse(raw) is expected


def test_record_is_running():
    assert ContainerRecord("101", ContainerStatus.RUNNING).is_running
    assert not ContainerRecord("102", ContainerStatus.UNKNOWN).is_running


def test_operation_remote_path_uses_tmp(tmp_path):
    op = Operation(name="ct-update.sh", path=tmp_path / "ct-update.sh")
    assert op.remote_path == "/tmp/ct-update.sh"


def test_build_run_configuration_defaults():
    config = build_run_configuration("ct-update.sh", ["--force"])

    assert config.operation_args == ("--force",)
    assert config.parallelism == 1
    assert not config.include_stopped
    assert not config.dry_run
    assert config.exclude_ids == frozenset()


@pytest.mark.parametrize("value", [0, 21, -3])
def test_parallelism_out_of_range_is_configuration_error(value):
    with pytest.raises(ConfigurationError) as excinfo:
        build_run_configuration("x.sh", parallelism=value)
    assert str(excinfo.value) == f"Parallel value must be between 1 and 20: {value}"


@pytest.mark.parametrize("value", [1, 20])
def test_parallelism_bounds_are_inclusive(value):
    assert build_run_configuration("x.sh", parallelism=value).parallelism == value


def test_include_and_exclude_together_rejected():
    with pytest.raises(ConfigurationError, match="Cannot use both --exclude and --include"):
        build_run_configuration(
            "x.sh", include_ids=frozenset({"101"}), exclude_ids=frozenset({"102"})
        )


def test_configuration_is_frozen():
    config = build_run_configuration("x.sh")
    with pytest.raises(ValidationError):
        config.parallelism = 5


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        RunConfiguration(operation_name="x.sh", retries=3)
