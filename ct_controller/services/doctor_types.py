"""Result types for host prerequisite checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class DoctorCheck:
    label: str
    ok: bool
    required: bool = True
    hint: Optional[str] = None

    @property
    def blocking(self) -> bool:
        return self.required and not self.ok


@dataclass
class DoctorCheckGroup:
    title: str
    checks: list[DoctorCheck] = field(default_factory=list)

    @property
    def failures(self) -> int:
        return sum(1 for check in self.checks if check.blocking)


@dataclass
class DoctorReport:
    groups: list[DoctorCheckGroup] = field(default_factory=list)
    info_messages: list[str] = field(default_factory=list)

    @property
    def total_failures(self) -> int:
        return sum(group.failures for group in self.groups)

    @property
    def ok(self) -> bool:
        return self.total_failures == 0
