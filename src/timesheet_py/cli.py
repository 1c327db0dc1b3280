from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .commands import Session
from .config import load_config
from .errors import TimesheetError
from .logging_setup import setup_logging
from .menu import run_menu

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="timesheet",
        description="Stopwatch per project; totals are kept in a spreadsheet.",
    )
    ap.add_argument(
        "--config-dir",
        default=None,
        help="Directory holding timesheet.yml (default: ./config).",
    )
    ap.add_argument(
        "--store",
        default=None,
        help="Workbook path (overrides YAML store.path).",
    )
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging_ready = False
    try:
        cfg = load_config(Path(args.config_dir) if args.config_dir else None)
        if args.store:
            cfg = cfg.with_store(args.store)
        setup_logging(cfg)
        logging_ready = True
        logger.info("store: %s", cfg.store_path)
        run_menu(Session.from_config(cfg))
    except TimesheetError as e:
        if logging_ready:
            logger.exception("aborted: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
        return 130
    except EOFError:
        # stdin closed (e.g. piped input ran out)
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
