from __future__ import annotations

import logging
import shutil
from datetime import datetime
from pathlib import Path

from .errors import BackupError

logger = logging.getLogger(__name__)


def backup_filename(name: str, suffix: str, when: datetime) -> str:
    """<name>-<DDMMYYYY>-<HH>-<mm>-<ss><suffix>, e.g. Timesheet-20012026-10-02-30.xlsx"""
    return f"{name}-{when:%d%m%Y}-{when:%H}-{when:%M}-{when:%S}{suffix}"


def backup_store(
    store_path: Path, archive_dir: Path, name: str, when: datetime | None = None
) -> Path | None:
    """
    Copy the store file into `archive_dir` under a timestamped name.

    Returns the backup path, or None when there is no store file yet (first
    run). Any failure raises BackupError so the caller can abort before
    touching the store. Two backups in the same second get -2, -3, ...
    """
    store_path = Path(store_path)
    if not store_path.exists():
        logger.debug("no store at %s yet; nothing to back up", store_path)
        return None

    when = when or datetime.now()
    base = backup_filename(name, "", when)
    dest = Path(archive_dir) / f"{base}{store_path.suffix}"
    n = 2
    while dest.exists():
        dest = Path(archive_dir) / f"{base}-{n}{store_path.suffix}"
        n += 1

    try:
        Path(archive_dir).mkdir(parents=True, exist_ok=True)
        shutil.copy2(store_path, dest)
    except OSError as e:
        raise BackupError(f"backup of {store_path} to {archive_dir} failed: {e}") from e

    logger.info("backup written: %s", dest)
    return dest
