from __future__ import annotations

from typing import Optional

from ..models import Channel, Venue


def _label(channel: Channel, clean: bool) -> str:
    return channel.clean_name if clean else channel.name


def run(venue: Venue, *, device: Optional[str] = None, clean: bool = False) -> None:
    names = sorted(venue.devices)
    if device is not None:
        if device not in venue.devices:
            raise SystemExit(f"No device named {device!r}")
        names = [device]
    for name in names:
        dev = venue.devices[name]
        print(f"{name} ({dev.type})")
        for direction, channels in (("in", dev.inputs), ("out", dev.outputs)):
            for number, channel in enumerate(channels, start=1):
                print(f"  {direction} {number:>3}: {_label(channel, clean)}")
