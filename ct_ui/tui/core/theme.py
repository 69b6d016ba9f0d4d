from __future__ import annotations

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

RICH_STATUS_COLORS: dict[str, str] = {
    "failed": "red",
    "running": "green",
    "stopped": "dim",
    "skipped": "yellow",
    "success": "green",
    "unknown": "yellow",
    "ok": "green",
    "optional": "yellow",
}

PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}


def status_text(status: str) -> str:
    color = RICH_STATUS_COLORS.get(status)
    if not color:
        return status
    return f"[{color}]{status}[/{color}]"
