from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .layouts import DEFAULT_LAYOUTS, ReportLayout


class LayoutSettings(BaseModel):
    name: str
    identification: str
    show: str
    device_blocks: str
    device_name: str
    input_rows: str
    output_rows: str
    row_cells: str = "./td"
    console: Optional[str] = None
    version: Optional[str] = None

    @field_validator(
        "identification",
        "show",
        "device_blocks",
        "device_name",
        "input_rows",
        "output_rows",
        "row_cells",
        "console",
        "version",
    )
    @classmethod
    def _non_empty(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        if not value.strip():
            raise ValueError("path expression must not be empty")
        return value.strip()

    @model_validator(mode="after")
    def _console_with_version(self) -> "LayoutSettings":
        if (self.console is None) != (self.version is None):
            raise ValueError("console and version paths must be set together")
        return self

    def to_layout(self) -> ReportLayout:
        return ReportLayout(**self.model_dump())


class ParserSettings(BaseModel):
    encoding: str = "utf-8"
    layouts: List[LayoutSettings] = Field(default_factory=list)

    def report_layouts(self) -> tuple[ReportLayout, ...]:
        # Configured layouts take precedence over the built-in ones.
        return tuple(item.to_layout() for item in self.layouts) + DEFAULT_LAYOUTS


class LoggingSettings(BaseModel):
    level: str = "INFO"
    warnings_log: Optional[Path] = None

    @field_validator("warnings_log", mode="before")
    @classmethod
    def _expand_log(cls, value: Optional[str | Path]) -> Optional[Path]:
        if value is None:
            return None
        return Path(value).expanduser().resolve()


class Settings(BaseModel):
    parser: ParserSettings = ParserSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        if not explicit_path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit_path}")
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "config.yaml", cwd / "config.yml"):
        if candidate.exists():
            return candidate
    return None
