from __future__ import annotations

import argparse
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from .commands import channels as cmd_channels
from .commands import devices as cmd_devices
from .commands import doctor as cmd_doctor
from .commands import info as cmd_info
from .config import Settings, find_config
from .hardware import Hardware
from .models import ReportError
from .reader import read_report

logger = logging.getLogger("venue_meta")

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


class WarningBufferHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.records: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
        except Exception:  # pragma: no cover
            msg = record.getMessage()
        self.records.append(msg)


def configure_logging(settings: Settings, level_name: str | None) -> WarningBufferHandler:
    level = getattr(logging, (level_name or settings.logging.level).upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    color_handler = logging.StreamHandler()
    color_handler.setFormatter(ColorFormatter(LOG_FORMAT))
    root_logger.addHandler(color_handler)

    warn_buffer = WarningBufferHandler()
    warn_buffer.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(warn_buffer)

    if settings.logging.warnings_log is not None:
        file_handler = logging.FileHandler(settings.logging.warnings_log, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.WARNING)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)
    return warn_buffer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract show and device data from Avid VENUE reports")
    parser.add_argument("--config", type=Path, help="Path to config.yaml")
    parser.add_argument("--log-level", default=None, help="Python logging level (overrides config)")

    subparsers = parser.add_subparsers(dest="command", required=True)
    info_parser = subparsers.add_parser("info", help="Show console, version and show path")
    info_parser.add_argument("files", type=Path, nargs="+", help="Patch List or System Info HTML export")
    info_parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON to stdout")

    devices_parser = subparsers.add_parser("devices", help="List I/O devices and channel counts")
    devices_parser.add_argument("files", type=Path, nargs="+", help="Patch List or System Info HTML export")
    devices_parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON to stdout")
    devices_parser.add_argument(
        "--type",
        dest="hardware",
        type=Hardware.parse,
        choices=list(Hardware),
        default=None,
        help="Only list devices of this class (StageBox, Local, ProTools)",
    )

    channels_parser = subparsers.add_parser("channels", help="List channel names per device")
    channels_parser.add_argument("files", type=Path, nargs="+", help="Patch List or System Info HTML export")
    channels_parser.add_argument("--device", default=None, help="Only list this device")
    channels_parser.add_argument(
        "--clean",
        action="store_true",
        help="Collapse stereo pairs (Name-L, Name-R) into their base name",
    )

    subparsers.add_parser("doctor", help="Check configuration and report layouts")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config_path = find_config(args.config)
        settings = Settings.load(config_path) if config_path else Settings()
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        configure_logging(Settings(), args.log_level)
        logger.error("Cannot load configuration: %s", exc)
        return 2
    warn_buffer = configure_logging(settings, args.log_level)

    if args.command == "doctor":
        report = cmd_doctor.run(settings, config_path=config_path)
        for line in report.lines():
            print(line)
        return 0 if report.ok else 1

    failures = 0
    for path in args.files:
        try:
            venue = read_report(path, settings)
        except (ReportError, OSError, ValueError) as exc:
            failures += 1
            logger.error("%s: %s", path, exc)
            continue
        if len(args.files) > 1:
            print(f"== {path}")
        match args.command:
            case "info":
                cmd_info.run(venue, json_output=args.json)
            case "devices":
                cmd_devices.run(venue, json_output=args.json, hardware=args.hardware)
            case "channels":
                cmd_channels.run(venue, device=args.device, clean=args.clean)
            case _:
                parser.error("Unknown command")

    if warn_buffer.records:
        print("\n\033[33mWarnings/Errors summary:\033[0m")
        for line in warn_buffer.records:
            print(f" - {line}")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
