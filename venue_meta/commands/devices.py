from __future__ import annotations

import json
from typing import Optional

from ..hardware import Hardware
from ..models import Venue


def run(venue: Venue, *, json_output: bool = False, hardware: Optional[Hardware] = None) -> None:
    names = sorted(
        name for name, device in venue.devices.items() if hardware is None or device.type is hardware
    )
    if json_output:
        print(json.dumps([venue.devices[name].to_record() for name in names], indent=2))
        return
    if not names:
        print("No devices found.")
        return
    width = max(len(name) for name in names)
    for name in names:
        device = venue.devices[name]
        print(
            f"{name:<{width}}  {device.type:<8}  "
            f"{device.num_inputs:>3} in  {device.num_outputs:>3} out"
        )
