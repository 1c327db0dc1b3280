from __future__ import annotations

from datetime import date, datetime, timedelta

import pandas as pd

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"
DATE_FMT = "%Y-%m-%d"


def format_duration(value: timedelta | float | int) -> str:
    """Render a duration as hh:mm:ss. Hours are not wrapped at 24."""
    if isinstance(value, timedelta):
        seconds = value.total_seconds()
    else:
        seconds = float(value)
    neg = seconds < 0
    seconds = int(abs(seconds))
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    sign = "-" if neg else ""
    return f"{sign}{h:02d}:{m:02d}:{s:02d}"


def parse_duration(value: object) -> timedelta | None:
    """Parse h:mm:ss or h:mm into a timedelta. Return None if invalid."""
    if not isinstance(value, str):
        return None
    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        return None
    try:
        h = int(parts[0])
        m = int(parts[1])
        s = int(parts[2]) if len(parts) == 3 else 0
    except ValueError:
        return None
    if h < 0 or not (0 <= m < 60 and 0 <= s < 60):
        return None
    return timedelta(hours=h, minutes=m, seconds=s)


def format_timestamp(ts: datetime) -> str:
    return ts.strftime(TIMESTAMP_FMT)


def format_date(value: object) -> str:
    """
    Calendar-date text for a stored value. Tolerates values that still carry
    a time component (e.g. a cell edited by hand in a spreadsheet app) and
    falls back to the raw text when it is not date-like.
    """
    if isinstance(value, (datetime, date)):
        return value.strftime(DATE_FMT)
    text = "" if value is None else str(value).strip()
    if not text:
        return ""
    t = pd.to_datetime(text, errors="coerce")
    if pd.isna(t):
        return text
    return t.strftime(DATE_FMT)
