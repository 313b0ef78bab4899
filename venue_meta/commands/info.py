from __future__ import annotations

import json

from ..models import Venue


def run(venue: Venue, *, json_output: bool = False) -> None:
    if json_output:
        record = venue.to_record()
        record.pop("devices")
        print(json.dumps(record, indent=2, sort_keys=True))
        return
    print(f"Console: {venue.console}")
    print(f"Version: {venue.version}")
    print(f"Show:    {venue.show}")
    if venue.report is not None:
        print(f"Report:  {venue.report.value}")
