from __future__ import annotations

import logging

from .config import TimesheetConfig
from .errors import ConfigError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(cfg: TimesheetConfig) -> logging.Logger:
    """
    Configure the package logger. Output goes to a file only, so the
    interactive menu on stdout stays clean.
    """
    logger = logging.getLogger("timesheet_py")
    logger.setLevel(cfg.log_level)

    path = cfg.log_path
    if path is None:
        logger.addHandler(logging.NullHandler())
        return logger

    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"cannot open log file {path}: {e}") from e
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
