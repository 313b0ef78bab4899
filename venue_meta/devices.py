from __future__ import annotations

import logging
import re
from typing import Any, Dict, Sequence

from .document import Document
from .hardware import Hardware
from .layouts import DEFAULT_LAYOUTS, ReportLayout, detect_layout
from .models import (
    Channel,
    Device,
    DuplicateDeviceError,
    MalformedTableError,
    MissingFieldError,
    UnknownDeviceTypeError,
)

logger = logging.getLogger(__name__)

STAGE_BOX_PATTERN = re.compile(r"^Stage \d+$")
LOCAL_NAMES = frozenset({"Console", "Local", "Engine"})
PRO_TOOLS_MARKER = "Pro Tools"


def classify_device(name: str) -> Hardware:
    if STAGE_BOX_PATTERN.match(name):
        return Hardware.STAGE_BOX
    if name in LOCAL_NAMES:
        return Hardware.LOCAL
    if PRO_TOOLS_MARKER in name:
        return Hardware.PRO_TOOLS
    raise UnknownDeviceTypeError(name)


def _read_channels(
    document: Document,
    layout: ReportLayout,
    block: Any,
    rows_path: str,
    device: str,
    table: str,
) -> tuple[Channel, ...]:
    channels: list[Channel] = []
    for index, row in enumerate(document.select(rows_path, context=block), start=1):
        cells = [document.text(cell) for cell in document.select(layout.row_cells, context=row)]
        if len(cells) < 2:
            raise MalformedTableError(device, table, f"row {index} has {len(cells)} cell(s)")
        if not cells[0]:
            raise MalformedTableError(device, table, f"row {index} has no channel number")
        channels.append(Channel(name=cells[1]))
    return tuple(channels)


def discover_devices(
    document: Document,
    layouts: Sequence[ReportLayout] = DEFAULT_LAYOUTS,
) -> Dict[str, Device]:
    """Build the device registry of a report, keyed by device name.

    Any unreadable block aborts discovery for the whole document.
    """
    layout = detect_layout(document, layouts)
    devices: Dict[str, Device] = {}
    for position, block in enumerate(document.select(layout.device_blocks), start=1):
        names = [document.text(node) for node in document.select(layout.device_name, context=block)]
        name = next((n for n in names if n), "")
        if not name:
            raise MissingFieldError("device name", f"device block {position}")
        if name in devices:
            raise DuplicateDeviceError(name)
        device = Device(
            name=name,
            type=classify_device(name),
            inputs=_read_channels(document, layout, block, layout.input_rows, name, "inputs"),
            outputs=_read_channels(document, layout, block, layout.output_rows, name, "outputs"),
        )
        logger.debug(
            "Found %s %s: %d in / %d out",
            device.type,
            device.name,
            device.num_inputs,
            device.num_outputs,
        )
        devices[name] = device
    logger.info("Discovered %d device(s)", len(devices))
    return devices
