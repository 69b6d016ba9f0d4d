import pytest
from rich.console import Console

from ct_controller.api import (
    ContainerRecord,
    ContainerStatus,
    DoctorReport,
    JobOutcome,
    JobResult,
    Operation,
    aggregate,
)
from ct_controller.services.doctor_types import DoctorCheck, DoctorCheckGroup
from ct_ui.api import (
    HeadlessUI,
    build_inventory_table,
    build_operations_table,
    build_outcome_table,
    build_summary_table,
    render_summary,
)
from ct_ui.presenters.doctor import build_doctor_tables, render_doctor_report
from ct_ui.tui.system.facade import TUI

pytestmark = [pytest.mark.unit_ui]


def _summary():
    return aggregate(
        [
            JobOutcome("103", JobResult.FAILED, "exit code 1"),
            JobOutcome("101", JobResult.SUCCESS),
            JobOutcome("102", JobResult.SKIPPED, "not running"),
        ]
    )


def test_build_summary_table():
    table = build_summary_table(_summary())

    assert table.title == "Summary"
    assert table.rows == [["Success", "1"], ["Skipped", "1"], ["Failed", "1"]]


def test_outcome_table_lists_problems_sorted():
    table = build_outcome_table(_summary())

    assert [row[0] for row in table.rows] == ["102", "103"]
    assert table.rows[1][2] == "exit code 1"


def test_render_summary_without_problems_shows_only_tally():
    ui = HeadlessUI()

    render_summary(ui, aggregate([JobOutcome("101", JobResult.SUCCESS)]))

    assert ui.recorded_messages == ["RULE: Summary"]
    assert [t.model.title for t in ui.recorded_tables] == ["Summary"]


def test_render_summary_with_problems():
    ui = HeadlessUI()

    render_summary(ui, _summary())

    assert [t.model.title for t in ui.recorded_tables] == ["Summary", "Problems"]


def test_inventory_and_operations_tables(tmp_path):
    inventory = build_inventory_table(
        [ContainerRecord("101", ContainerStatus.RUNNING), ContainerRecord("102", ContainerStatus.STOPPED)]
    )
    operations = build_operations_table([Operation("a.sh", tmp_path / "a.sh")])

    assert inventory.columns == ["CT", "Status"]
    assert inventory.rows[0] == ["101", "[green]running[/green]"]
    assert operations.rows == [["a.sh", str(tmp_path / "a.sh")]]


def test_doctor_report_rendering():
    report = DoctorReport(
        groups=[
            DoctorCheckGroup(
                "Proxmox Host",
                [
                    DoctorCheck("Running as root", True),
                    DoctorCheck("pct available", False, hint="run on a Proxmox VE node"),
                    DoctorCheck("bash", False, required=False),
                ],
            )
        ],
        info_messages=["Python: 3.12"],
    )
    ui = HeadlessUI()

    rows = build_doctor_tables(report)[0].rows
    assert rows[0] == ["Running as root", "[green]ok[/green]", ""]
    assert rows[1] == ["pct available", "[red]failed[/red]", "run on a Proxmox VE node"]
    assert rows[2][1] == "[yellow]optional[/yellow]"
    assert render_doctor_report(ui, report) is False
    assert ui.recorded_messages == ["INFO: Python: 3.12", "ERROR: 1 required check(s) failed."]


def test_tui_renders_to_console():
    console = Console(record=True, width=100, color_system=None)
    tui = TUI(console)

    tui.present.rule("Summary")
    tui.tables.show(build_summary_table(_summary()))
    tui.present.warning("careful")

    output = console.export_text()
    assert "Summary" in output
    assert "Skipped" in output
    assert "careful" in output
