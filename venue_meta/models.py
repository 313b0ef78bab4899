from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from .channels import clean_name
from .hardware import Hardware


class ReportKind(Enum):
    """Which export produced the document."""
    PATCH_LIST = "Patch List"
    SYSTEM_INFO = "System Info"


@dataclass(frozen=True, slots=True)
class Channel:
    name: str

    @property
    def clean_name(self) -> str:
        return clean_name(self.name)


@dataclass(frozen=True, slots=True)
class Device:
    name: str
    type: Hardware
    inputs: tuple[Channel, ...] = ()
    outputs: tuple[Channel, ...] = ()

    @property
    def num_inputs(self) -> int:
        return len(self.inputs)

    @property
    def num_outputs(self) -> int:
        return len(self.outputs)

    def to_record(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "type": str(self.type),
            "num_inputs": self.num_inputs,
            "num_outputs": self.num_outputs,
        }


@dataclass
class Venue:
    """Show metadata and device registry recovered from one report."""

    console: str = ""
    version: str = ""
    show: str = ""
    report: Optional[ReportKind] = None
    devices: Dict[str, Device] = field(default_factory=dict)

    def attach_devices(self, devices: Dict[str, Device]) -> None:
        self.devices = dict(devices)

    def to_record(self) -> Dict[str, object]:
        return {
            "console": self.console,
            "version": self.version,
            "show": self.show,
            "report": self.report.value if self.report else None,
            "devices": {name: dev.to_record() for name, dev in self.devices.items()},
        }


class ReportError(Exception):
    """Raised when a report cannot be interpreted; the whole parse is abandoned."""


class MissingFieldError(ReportError):
    def __init__(self, field_name: str, detail: Optional[str] = None) -> None:
        self.field = field_name
        message = f"missing {field_name}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MalformedTableError(ReportError):
    def __init__(self, device: str, table: str, detail: str) -> None:
        self.device = device
        self.table = table
        super().__init__(f"{device}: malformed {table} table: {detail}")


class UnknownDeviceTypeError(ReportError):
    def __init__(self, device: str) -> None:
        self.device = device
        super().__init__(f"cannot classify device {device!r}")


class DuplicateDeviceError(ReportError):
    def __init__(self, device: str) -> None:
        self.device = device
        super().__init__(f"device {device!r} listed more than once")
