from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..config import Settings
from ..document import Document, HtmlDocument
from ..layouts import ReportLayout


class CheckStatus(Enum):
    OK = "OK"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True, slots=True)
class DoctorCheck:
    subject: str
    status: CheckStatus
    detail: Optional[str] = None

    def __str__(self) -> str:
        if self.detail:
            return f"{self.subject}: {self.status.value} ({self.detail})"
        return f"{self.subject}: {self.status.value}"


@dataclass(slots=True)
class DoctorReport:
    checks: list[DoctorCheck]

    @property
    def ok(self) -> bool:
        return all(check.status is not CheckStatus.ERROR for check in self.checks)

    def lines(self) -> list[str]:
        return [str(check) for check in self.checks]


def check_layout(layout: ReportLayout, probe: Document) -> DoctorCheck:
    """Evaluate every path of ``layout`` against an empty document."""
    invalid: list[str] = []
    for key, path in layout.paths().items():
        try:
            probe.select(path)
        except ValueError:
            invalid.append(key)
    subject = f"Layout {layout.name}"
    if invalid:
        return DoctorCheck(subject, CheckStatus.ERROR, f"invalid paths: {', '.join(invalid)}")
    if layout.console is None:
        return DoctorCheck(subject, CheckStatus.OK, "console and version split from one node")
    return DoctorCheck(subject, CheckStatus.OK)


def run(settings: Settings, *, config_path: Optional[Path] = None) -> DoctorReport:
    checks: list[DoctorCheck] = []
    if config_path is None:
        checks.append(DoctorCheck("Config", CheckStatus.WARNING, "none found, using defaults"))
    else:
        checks.append(DoctorCheck("Config", CheckStatus.OK, str(config_path)))

    layouts = settings.parser.report_layouts()
    probe = HtmlDocument.from_string("<html><body></body></html>")
    checks.extend(check_layout(layout, probe) for layout in layouts)

    names = [layout.name for layout in layouts]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        checks.append(
            DoctorCheck("Layout names", CheckStatus.WARNING, f"duplicated: {', '.join(duplicates)}")
        )

    log_path = settings.logging.warnings_log
    if log_path is not None and not log_path.parent.exists():
        checks.append(
            DoctorCheck("Warnings log", CheckStatus.ERROR, f"directory missing: {log_path.parent}")
        )
    return DoctorReport(checks=checks)
