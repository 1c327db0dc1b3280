from __future__ import annotations

import logging
import zipfile
from collections.abc import Mapping, Sequence
from pathlib import Path

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from .errors import StoreError

logger = logging.getLogger(__name__)

# openpyxl/zipfile raise a mix of these for missing, locked or corrupt workbooks
_IO_ERRORS = (OSError, ValueError, KeyError, zipfile.BadZipFile, InvalidFileException)


def _force_text(ws) -> None:
    """openpyxl stores "=..." strings as formulas; keep them as plain text cells."""
    for row in ws.iter_rows():
        for cell in row:
            if isinstance(cell.value, str) and cell.value.startswith("="):
                cell.data_type = "s"


def _drop_blank_rows(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return df
    return df.loc[(df != "").any(axis=1)].reset_index(drop=True)


class SpreadsheetStore:
    """
    Sheet-level access to a single .xlsx workbook.

    Every cell is read back as text (empty cells as ""). Reads never raise:
    a missing file, missing sheet or unreadable workbook is "no table".
    Writes replace one sheet at a time and leave the other sheets intact;
    failures surface as StoreError.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file() and self.path.stat().st_size > 0

    def list_tables(self) -> set[str]:
        if not self.exists():
            return set()
        try:
            with pd.ExcelFile(self.path, engine="openpyxl") as xl:
                return {str(s) for s in xl.sheet_names}
        except _IO_ERRORS as e:
            logger.warning("cannot read workbook %s: %s", self.path, e)
            return set()

    def read_table(self, name: str) -> pd.DataFrame | None:
        if name not in self.list_tables():
            logger.debug("sheet %r not found in %s", name, self.path)
            return None
        try:
            # literal text: names such as "NA" or "null" must not become NaN
            df = pd.read_excel(
                self.path,
                sheet_name=name,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
                engine="openpyxl",
            )
        except _IO_ERRORS as e:
            logger.warning("cannot read sheet %r from %s: %s", name, self.path, e)
            return None
        df.columns = [str(c).strip() for c in df.columns]
        return df.fillna("")

    def append_row(
        self, name: str, row: Mapping[str, object], columns: Sequence[str]
    ) -> None:
        """Append one row, creating the workbook/sheet with `columns` as headers if needed."""
        current = self.read_table(name)
        cols = list(current.columns) if current is not None and len(current.columns) else []
        cols += [c for c in columns if c not in cols]

        record = pd.DataFrame([[str(row.get(c, "")) for c in cols]], columns=cols)
        if current is None:
            out = record
        else:
            # a header-keeping placeholder row is dropped once real data arrives
            current = _drop_blank_rows(current.reindex(columns=cols, fill_value=""))
            out = record if current.empty else pd.concat([current, record], ignore_index=True)
        self.replace_table(name, out)

    def replace_table(self, name: str, rows: pd.DataFrame) -> None:
        exists = self.exists()
        mode = "a" if exists else "w"
        extra = {"if_sheet_exists": "replace"} if exists else {}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with pd.ExcelWriter(self.path, engine="openpyxl", mode=mode, **extra) as xw:
                rows.to_excel(xw, sheet_name=name, index=False)
                _force_text(xw.sheets[name])
        except _IO_ERRORS as e:
            raise StoreError(f"cannot write sheet {name!r} to {self.path}: {e}") from e
        logger.debug("wrote %d row(s) to %s!%s", len(rows), self.path.name, name)
