"""Presenter for doctor reports."""

from __future__ import annotations

from ct_controller.api import DoctorReport
from ct_controller.services.doctor_types import DoctorCheck
from ct_ui.tui.core.theme import status_text
from ct_ui.tui.system.models import TableModel
from ct_ui.tui.system.protocols import UI


def _status_cell(check: DoctorCheck) -> str:
    if check.ok:
        return status_text("ok")
    return status_text("failed" if check.required else "optional")


def build_doctor_tables(report: DoctorReport) -> list[TableModel]:
    """One table per check group."""
    tables = []
    for group in report.groups:
        table = TableModel(title=group.title, columns=["Check", "Status", "Hint"])
        for check in group.checks:
            table.add_row(check.label, _status_cell(check), "" if check.ok else check.hint or "")
        tables.append(table)
    return tables


def render_doctor_report(ui: UI, report: DoctorReport) -> bool:
    """Show the report; returns True when every required check passed."""
    for table in build_doctor_tables(report):
        ui.tables.show(table)
    for message in report.info_messages:
        ui.present.info(message)

    if not report.ok:
        ui.present.error(f"{report.total_failures} required check(s) failed.")
        return False
    ui.present.success("All checks passed.")
    return True
