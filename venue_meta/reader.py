from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import Settings
from .devices import discover_devices
from .document import load_document
from .metadata import parse_metadata
from .models import Venue

logger = logging.getLogger(__name__)


def read_report(path: Path, settings: Optional[Settings] = None) -> Venue:
    """Load one exported report and return its fully populated venue."""
    if settings is None:
        settings = Settings()
    layouts = settings.parser.report_layouts()
    document = load_document(path, encoding=settings.parser.encoding)
    venue = parse_metadata(document, Venue(), layouts)
    venue.attach_devices(discover_devices(document, layouts))
    logger.debug("Read %s: %d device(s)", path, len(venue.devices))
    return venue
