from __future__ import annotations

import logging
import os
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path

import pandas as pd

from .backup import backup_store
from .config import TimesheetConfig
from .records import COMPLETED_COLUMNS, TIMING_COLUMNS, CompletedRecord, TimingRecord
from .store import SpreadsheetStore
from .tables import rewrite_timing, without_project
from .utils.durations import format_duration

logger = logging.getLogger(__name__)


def clear_terminal() -> None:
    if sys.stdout.isatty():
        os.system("cls" if os.name == "nt" else "clear")


@dataclass
class Session:
    """Store, config and console hooks shared by every command."""

    config: TimesheetConfig
    store: SpreadsheetStore
    read_line: Callable[[str], str] = input
    write: Callable[[str], None] = print
    now: Callable[[], datetime] = datetime.now
    pause: Callable[[float], None] = time.sleep
    clear: Callable[[], None] = clear_terminal

    @classmethod
    def from_config(cls, cfg: TimesheetConfig, **hooks) -> Session:
        return cls(config=cfg, store=SpreadsheetStore(cfg.store_path), **hooks)

    def backup(self) -> Path | None:
        cfg = self.config
        return backup_store(cfg.store_path, cfg.archive_dir, cfg.backup_name, self.now())

    def timing_rows(self) -> pd.DataFrame | None:
        return self.store.read_table(self.config.timing_sheet)

    def completed_rows(self) -> pd.DataFrame | None:
        return self.store.read_table(self.config.completed_sheet)

    def invalid(self, message: str = "Invalid input.") -> None:
        self.write(message)
        self.pause(self.config.pause_seconds)


def start_timing(session: Session, project_name: str) -> TimingRecord | None:
    name = project_name.strip()
    if not name:
        session.invalid("Project name cannot be empty.")
        return None

    session.backup()
    started = session.now()
    session.write(f"Timing {name} since {started:%H:%M:%S}. Press Enter to stop.")
    logger.info("timing started: %s", name)
    session.read_line("")
    stopped = max(session.now(), started)

    record = TimingRecord(name, started, stopped)
    session.store.append_row(session.config.timing_sheet, record.to_row(), TIMING_COLUMNS)
    elapsed = format_duration(record.overall_time)
    session.write(f"{name}: {elapsed} recorded.")
    logger.info("timing stopped: %s (%s)", name, elapsed)
    return record


def add_project(session: Session) -> TimingRecord | None:
    name = session.read_line("New project name (0 to cancel): ").strip()
    if name == "0":
        return None
    if not name:
        session.invalid("Project name cannot be empty.")
        return None
    return start_timing(session, name)


def _select(session: Session, projects: list[str], verb: str) -> str | None:
    """1-based pick from `projects`; None on 0 (cancel) or bad input."""
    choice = session.read_line(f"Number of the project to {verb} (0 to cancel): ").strip()
    try:
        index = int(choice)
    except ValueError:
        session.invalid()
        return None
    if index == 0:
        return None
    if not 1 <= index <= len(projects):
        session.invalid()
        return None
    return projects[index - 1]


def complete_project(
    session: Session, projects: list[str], durations: dict[str, timedelta]
) -> CompletedRecord | None:
    selected = _select(session, projects, "complete")
    if selected is None:
        return None
    total = durations.get(selected, timedelta(0))

    session.backup()
    record = CompletedRecord(selected, total, session.now().date())
    cfg = session.config
    session.store.append_row(cfg.completed_sheet, record.to_row(), COMPLETED_COLUMNS)
    rows = rewrite_timing(session.timing_rows(), without_project(selected))
    session.store.replace_table(cfg.timing_sheet, rows)

    session.write(f"{selected} completed ({format_duration(total)}).")
    logger.info("project completed: %s (%s)", selected, format_duration(total))
    return record


def remove_project(
    session: Session, projects: list[str], durations: dict[str, timedelta]
) -> str | None:
    selected = _select(session, projects, "remove")
    if selected is None:
        return None
    answer = session.read_line(f"Remove all records of {selected}? (Y/N): ").strip()
    if answer not in ("Y", "y"):
        session.write("Nothing removed.")
        return None

    session.backup()
    rows = rewrite_timing(session.timing_rows(), without_project(selected))
    session.store.replace_table(session.config.timing_sheet, rows)

    total = durations.get(selected, timedelta(0))
    session.write(f"{selected} removed.")
    logger.info("project removed: %s (%s discarded)", selected, format_duration(total))
    return selected
