from __future__ import annotations


class TimesheetError(Exception):
    """Base class for errors that end the current command."""


class ConfigError(TimesheetError):
    pass


class StoreError(TimesheetError):
    """Writing to the workbook failed (file locked, disk full, bad format)."""


class BackupError(TimesheetError):
    """The archive copy could not be written; nothing was mutated."""
