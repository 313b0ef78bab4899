"""
Where things live in each console generation's reports.

VENUE 4.x/5.x software (S3L-X, Profile) writes console and version into
adjacent header cells and one ``<div class="device">`` per I/O device.
The older D-Show software concatenates console and version into a single
header paragraph and renders each device as a ``<table class="device">``
with separate row groups for inputs and outputs. Both generations write
the same layout into their Patch List and System Info exports; the report
kind is only visible in the document title.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .document import Document
from .models import MissingFieldError, ReportKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportLayout:
    name: str
    identification: str
    show: str
    device_blocks: str
    # Relative to a device block.
    device_name: str
    input_rows: str
    output_rows: str
    # Relative to a row.
    row_cells: str = "./td"
    # Set when console and version sit in separate nodes; otherwise the
    # identification text is split.
    console: Optional[str] = None
    version: Optional[str] = None

    def paths(self) -> dict[str, str]:
        paths = {
            "identification": self.identification,
            "show": self.show,
            "device_blocks": self.device_blocks,
            "device_name": self.device_name,
            "input_rows": self.input_rows,
            "output_rows": self.output_rows,
            "row_cells": self.row_cells,
        }
        for key in ("console", "version"):
            value = getattr(self, key)
            if value is not None:
                paths[key] = value
        return paths


VENUE_LAYOUT = ReportLayout(
    name="venue",
    identification="//table[@id='console']//td[@class='product' or @class='version']",
    show="//table[@id='console']//td[@class='show']",
    device_blocks="//div[@class='device']",
    device_name="./h3",
    input_rows="./table[@class='inputs']//tr[td]",
    output_rows="./table[@class='outputs']//tr[td]",
    console="//table[@id='console']//td[@class='product']",
    version="//table[@id='console']//td[@class='version']",
)

DSHOW_LAYOUT = ReportLayout(
    name="d-show",
    identification="//div[@id='header']/p[@class='console']",
    show="//div[@id='header']/p[@class='show']/span",
    device_blocks="//table[@class='device']",
    device_name="./caption",
    input_rows="./tbody[@class='inputs']/tr[td]",
    output_rows="./tbody[@class='outputs']/tr[td]",
)

DEFAULT_LAYOUTS: tuple[ReportLayout, ...] = (VENUE_LAYOUT, DSHOW_LAYOUT)

TITLE_PATH = "//head/title"


def detect_layout(document: Document, layouts: Sequence[ReportLayout] = DEFAULT_LAYOUTS) -> ReportLayout:
    for layout in layouts:
        if document.select(layout.identification):
            logger.debug("Using %s report layout", layout.name)
            return layout
    tried = ", ".join(layout.name for layout in layouts)
    raise MissingFieldError("console", f"no known report layout matched (tried {tried})")


def detect_report_kind(document: Document) -> Optional[ReportKind]:
    for node in document.select(TITLE_PATH):
        title = document.text(node)
        for kind in ReportKind:
            if kind.value in title:
                return kind
    return None
