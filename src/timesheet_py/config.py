# src/timesheet_py/config.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

# Defaults if config/timesheet.yml is missing or partial
_DEFAULTS = {
    "store": {
        "path": "Timesheet.xlsx",
        "timing_sheet": "Timing",
        "completed_sheet": "Completed",
    },
    "backup": {
        "dir": "Archive",  # created next to the store file
        "name": "Timesheet",  # <name>-<DDMMYYYY>-<HH>-<mm>-<ss>.<ext>
    },
    "ui": {
        "clear_screen": True,
        "pause_seconds": 1.5,  # after an invalid-input message
    },
    "logging": {
        "file": "timesheet.log",  # next to the store; empty disables
        "level": "INFO",
    },
}


@dataclass(frozen=True)
class TimesheetConfig:
    store_path: Path
    timing_sheet: str
    completed_sheet: str
    backup_dir: str
    backup_name: str
    clear_screen: bool
    pause_seconds: float
    log_file: str
    log_level: str

    @property
    def archive_dir(self) -> Path:
        return self.store_path.parent / self.backup_dir

    @property
    def log_path(self) -> Path | None:
        if not self.log_file:
            return None
        return self.store_path.parent / self.log_file

    def with_store(self, path: str | Path) -> TimesheetConfig:
        return replace(self, store_path=Path(path).resolve())


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"cannot parse {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(config_dir: Path | None = None) -> TimesheetConfig:
    """
    Loads config from config/timesheet.yml or config/timesheet.yaml.
    Falls back to defaults if not found or keys are missing.
    """
    base = Path(config_dir) if config_dir else Path("config")
    yml = base / "timesheet.yml"
    yaml_ = base / "timesheet.yaml"

    user_cfg = _load_yaml(yml if yml.exists() else yaml_) if base.exists() else {}

    # Merge shallowly against defaults
    merged = {
        section: {**defaults, **(user_cfg.get(section) or {})}
        for section, defaults in _DEFAULTS.items()
    }

    level = str(merged["logging"]["level"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"unknown logging.level: {merged['logging']['level']!r}")

    try:
        pause = float(merged["ui"]["pause_seconds"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"ui.pause_seconds must be a number: {e}") from e

    return TimesheetConfig(
        store_path=Path(str(merged["store"]["path"])).resolve(),
        timing_sheet=str(merged["store"]["timing_sheet"]),
        completed_sheet=str(merged["store"]["completed_sheet"]),
        backup_dir=str(merged["backup"]["dir"]),
        backup_name=str(merged["backup"]["name"]),
        clear_screen=bool(merged["ui"]["clear_screen"]),
        pause_seconds=max(0.0, pause),
        log_file=str(merged["logging"]["file"] or ""),
        log_level=level,
    )
