from __future__ import annotations

from enum import IntEnum


class Hardware(IntEnum):
    """Physical or logical class of an I/O device attached to the console."""

    STAGE_BOX = 0
    LOCAL = 1
    PRO_TOOLS = 2

    def __str__(self) -> str:
        return _LABELS[self]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    @classmethod
    def parse(cls, label: str) -> "Hardware":
        for member, text in _LABELS.items():
            if text == label:
                return member
        raise ValueError(f"Unknown hardware label {label!r}")


_LABELS = {
    Hardware.STAGE_BOX: "StageBox",
    Hardware.LOCAL: "Local",
    Hardware.PRO_TOOLS: "ProTools",
}
