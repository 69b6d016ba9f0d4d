import pytest

from ct_common.errors import ConfigurationError
from ct_controller.api import DoctorService, ExecutorSettings

pytestmark = [pytest.mark.unit_controller]


def _which(available):
    return lambda name: f"/usr/bin/{name}" if name in available else None


def test_all_checks_pass(operations_dir):
    service = DoctorService(
        settings=ExecutorSettings(operations_dir=operations_dir),
        is_root=lambda: True,
        which=_which({"pct", "bash"}),
    )

    report = service.check_host()

    assert report.total_failures == 0
    assert [g.title for g in report.groups] == ["Proxmox Host", "Operations"]
    assert report.info_messages[0].startswith("Python: ")


def test_optional_items_do_not_count_as_failures(tmp_path):
    service = DoctorService(
        settings=ExecutorSettings(operations_dir=tmp_path / "missing"),
        is_root=lambda: False,
        which=_which(set()),
    )

    report = service.check_host()

    # root, pct and the operations directory are required; bash is not.
    assert report.total_failures == 3


def test_require_host_needs_root(tmp_path):
    service = DoctorService(
        settings=ExecutorSettings(operations_dir=tmp_path),
        is_root=lambda: False,
        which=_which({"pct"}),
    )

    with pytest.raises(ConfigurationError, match="Run as root"):
        service.require_host()


def test_require_host_needs_pct(tmp_path):
    service = DoctorService(
        settings=ExecutorSettings(operations_dir=tmp_path),
        is_root=lambda: True,
        which=_which(set()),
    )

    with pytest.raises(ConfigurationError, match="pct not found"):
        service.require_host()


def test_require_host_ok(tmp_path):
    DoctorService(
        settings=ExecutorSettings(operations_dir=tmp_path),
        is_root=lambda: True,
        which=_which({"pct"}),
    ).require_host()
