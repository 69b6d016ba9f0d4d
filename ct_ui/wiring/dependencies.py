from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

from ct_common.api import configure_logging
from ct_controller.api import (
    ContainerBackend,
    DoctorService,
    ExecutorSettings,
    FanOutService,
    OperationCatalog,
    PctBackend,
    UIAdapter,
)
from ct_ui.tui.adapters.tui_adapter import TUIAdapter
from ct_ui.tui.system.facade import TUI
from ct_ui.tui.system.protocols import UI

__all__ = ["UIContext", "configure_logging"]


@dataclass
class UIContext:
    """Container for UI services and state, initialized lazily."""
    headless: bool = False

    # Lazily initialized services
    _ui: Optional[UI] = None
    _ui_adapter: Optional[UIAdapter] = None
    _settings: Optional[ExecutorSettings] = None
    _backend: Optional[ContainerBackend] = None
    _doctor_service: Optional[DoctorService] = None
    _interactive: Optional[bool] = None

    @property
    def ui(self) -> UI:
        if self._ui is None:
            if self.headless:
                from ct_ui.tui.system.headless import HeadlessUI
                self._ui = HeadlessUI(next_confirm_response=False)
            else:
                self._ui = TUI()
        return self._ui

    @ui.setter
    def ui(self, value: UI):
        self._ui = value
        self._ui_adapter = None

    @property
    def ui_adapter(self) -> UIAdapter:
        if self._ui_adapter is None:
            self._ui_adapter = TUIAdapter(self.ui)
        return self._ui_adapter

    @property
    def settings(self) -> ExecutorSettings:
        if self._settings is None:
            self._settings = ExecutorSettings.from_env()
        return self._settings

    @settings.setter
    def settings(self, value: ExecutorSettings):
        self._settings = value

    @property
    def backend(self) -> ContainerBackend:
        if self._backend is None:
            self._backend = PctBackend(
                status_timeout=self.settings.status_timeout,
                push_timeout=self.settings.push_timeout,
                exec_timeout=self.settings.exec_timeout,
            )
        return self._backend

    @backend.setter
    def backend(self, value: ContainerBackend):
        self._backend = value

    @property
    def catalog(self) -> OperationCatalog:
        return OperationCatalog(self.settings.operations_dir)

    @property
    def doctor_service(self) -> DoctorService:
        if self._doctor_service is None:
            self._doctor_service = DoctorService(settings=self.settings)
        return self._doctor_service

    @doctor_service.setter
    def doctor_service(self, value: DoctorService):
        self._doctor_service = value

    @property
    def fanout_service(self) -> FanOutService:
        return FanOutService(self.backend, self.catalog, ui_adapter=self.ui_adapter)

    @property
    def interactive(self) -> bool:
        """Whether prompts can be shown (stdin attached to a terminal)."""
        if self._interactive is None:
            return (not self.headless) and sys.stdin.isatty()
        return self._interactive

    @interactive.setter
    def interactive(self, value: bool):
        self._interactive = value
