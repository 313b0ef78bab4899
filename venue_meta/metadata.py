from __future__ import annotations

import logging
import re
from typing import Sequence

from .document import Document
from .layouts import DEFAULT_LAYOUTS, ReportLayout, detect_layout, detect_report_kind
from .models import MissingFieldError, Venue

logger = logging.getLogger(__name__)

# "<product> <software> <dotted version>", e.g. "Avid VENUE D-Show 3.1.1".
IDENTIFICATION_PATTERN = re.compile(
    r"^(?P<console>.+?)\s+(?P<version>\S+\s+v?\d+(?:\.\d+)*)$"
)


def split_identification(text: str) -> tuple[str, str]:
    # The console name may itself contain spaces, so anchor on the version.
    match = IDENTIFICATION_PATTERN.match(text)
    if not match:
        raise MissingFieldError("version", f"cannot split {text!r} into console and version")
    return match.group("console"), match.group("version")


def _required_text(document: Document, path: str, field_name: str) -> str:
    nodes = document.select(path)
    if not nodes:
        raise MissingFieldError(field_name)
    text = " ".join(t for t in (document.text(node) for node in nodes) if t)
    if not text:
        raise MissingFieldError(field_name, "empty")
    return text


def parse_metadata(
    document: Document,
    venue: Venue,
    layouts: Sequence[ReportLayout] = DEFAULT_LAYOUTS,
) -> Venue:
    """Populate console, version and show on ``venue`` from a loaded report.

    Nothing is written unless every field could be read.
    """
    layout = detect_layout(document, layouts)
    if layout.console and layout.version:
        console = _required_text(document, layout.console, "console")
        version = _required_text(document, layout.version, "version")
    else:
        console, version = split_identification(
            _required_text(document, layout.identification, "console")
        )
    show = _required_text(document, layout.show, "show")

    venue.console = console
    venue.version = version
    venue.show = show
    venue.report = detect_report_kind(document)
    logger.info("%s (%s): show %s", venue.console, venue.version, venue.show)
    return venue
