from __future__ import annotations

import logging
from datetime import timedelta

import pandas as pd

from .commands import Session, add_project, complete_project, remove_project, start_timing
from .projects import aggregate, project_names
from .utils.durations import format_date, format_duration, parse_duration

logger = logging.getLogger(__name__)

COMMANDS = "[P] Add project   [C] Complete project   [R] Remove project   [X] Exit"


def completed_entries(rows: pd.DataFrame | None) -> list[tuple[str, str, str]]:
    """(name, total hh:mm:ss, YYYY-MM-DD) per Completed row, in stored order."""
    if rows is None or rows.empty:
        return []
    names = project_names(rows)
    out = []
    for i, name in names.items():
        if not name:
            continue
        raw_total = str(rows.at[i, "Total_Time"]) if "Total_Time" in rows.columns else ""
        raw_date = rows.at[i, "Completed_Date"] if "Completed_Date" in rows.columns else ""
        total = parse_duration(raw_total)
        shown = raw_total if total is None else format_duration(total)
        out.append((name, shown, format_date(raw_date)))
    return out


def render_menu(
    projects: list[str],
    durations: dict[str, timedelta],
    completed: list[tuple[str, str, str]],
) -> str:
    lines = ["Projects", ""]
    if projects:
        for i, name in enumerate(projects, start=1):
            total = format_duration(durations.get(name, timedelta(0)))
            lines.append(f"  {name} ({total}) [{i}]")
    else:
        lines.append("  (no active projects)")
    lines += ["", f"  {COMMANDS}", "", "Completed", ""]
    for name, total, day in completed:
        lines.append(f"  {name} ({total}) [{day}]")
    return "\n".join(lines)


def run_menu(session: Session) -> None:
    """Render, read one choice, dispatch; repeat until X."""
    while True:
        projects, durations = aggregate(session.timing_rows())
        completed = completed_entries(session.completed_rows())

        if session.config.clear_screen:
            session.clear()
        session.write(render_menu(projects, durations, completed))

        choice = session.read_line("\nChoice: ").strip()
        key = choice.upper()
        if key == "X":
            logger.info("exit requested")
            return
        if key == "P":
            add_project(session)
        elif key == "C":
            complete_project(session, projects, durations)
        elif key == "R":
            remove_project(session, projects, durations)
        elif choice.isdecimal() and 1 <= int(choice) <= len(projects):
            start_timing(session, projects[int(choice) - 1])
        else:
            session.invalid()
