from __future__ import annotations

from collections.abc import Callable

import pandas as pd

from .projects import project_names
from .records import TIMING_COLUMNS

RowPredicate = Callable[[pd.Series], bool]


def placeholder(columns: list[str]) -> pd.DataFrame:
    """
    A single all-empty row handed to the store so the sheet keeps its
    headers when it has no data. Only the headers survive on disk: the
    blank row itself reads back as zero rows.
    """
    return pd.DataFrame([[""] * len(columns)], columns=columns)


def rewrite_timing(rows: pd.DataFrame | None, keep: RowPredicate) -> pd.DataFrame:
    """
    Rows of the Timing table that satisfy `keep`. Rows without a project
    name are always dropped. Never returns an empty frame: when nothing is
    left a placeholder row is written instead.
    """
    if rows is None or rows.empty:
        cols = list(rows.columns) if rows is not None and len(rows.columns) else TIMING_COLUMNS
        return placeholder(cols)

    rows = rows.fillna("")
    named = project_names(rows) != ""
    kept = pd.Series([bool(keep(r)) for _, r in rows.iterrows()], index=rows.index)
    out = rows.loc[named & kept].reset_index(drop=True)
    if out.empty:
        return placeholder(list(rows.columns))
    return out


def without_project(name: str) -> RowPredicate:
    name = name.strip()

    def keep(row: pd.Series) -> bool:
        return str(row.get("Project_Name", "")).strip() != name

    return keep
