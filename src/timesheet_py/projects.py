from __future__ import annotations

from datetime import timedelta

import pandas as pd

from .utils.durations import parse_duration


def _seconds(value: object) -> float:
    d = parse_duration(value)
    return 0.0 if d is None else d.total_seconds()


def project_names(rows: pd.DataFrame) -> pd.Series:
    """Stripped Project_Name column ("" where missing)."""
    if "Project_Name" not in rows.columns:
        return pd.Series("", index=rows.index, dtype=str)
    return rows["Project_Name"].fillna("").astype(str).str.strip()


def aggregate(rows: pd.DataFrame | None) -> tuple[list[str], dict[str, timedelta]]:
    """
    Active projects and their cumulative durations from the Timing rows.

    Names keep first-seen row order; rows without a name are ignored.
    Unparseable Overall_Time values count as zero, so a project whose
    rows are all unparseable still shows up with 00:00:00.
    """
    if rows is None or rows.empty:
        return [], {}

    names = project_names(rows)
    if "Overall_Time" in rows.columns:
        secs = rows["Overall_Time"].map(_seconds).astype(float)
    else:
        secs = pd.Series(0.0, index=rows.index)

    mask = names != ""
    frame = pd.DataFrame({"name": names[mask], "secs": secs[mask]})
    totals = frame.groupby("name", sort=False)["secs"].sum()

    projects = [str(n) for n in totals.index]
    durations = {str(n): timedelta(seconds=float(s)) for n, s in totals.items()}
    return projects, durations
