"""Movie DMS — command-line entry point.

Invariants:
    - Logging configured once, from settings, before the store is built
    - --csv preloads a file through the same MovieStore.load_csv path as menu option 1
    - Returns a process exit code instead of calling sys.exit itself

Design Decisions:
    - argparse for the few startup flags; everything else is interactive
"""

import argparse
import logging
from collections.abc import Sequence

from moviedms.config import get_settings
from moviedms.infrastructure.observability import setup_logging
from moviedms.cli.menu import MovieMenu
from moviedms.cli.prompts import Prompter
from moviedms.services.movie_store import MovieStore

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="moviedms", description="In-memory movie manager (CLI)",
    )
    ap.add_argument("--csv", help="CSV file to load before the menu starts")
    ap.add_argument(
        "--log-level",
        help="Override MOVIEDMS_LOG_LEVEL (DEBUG, INFO, WARNING, ...)",
    )
    return ap.parse_args(argv)


def main(argv: Sequence[str] | None = None, prompter: Prompter | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, settings.log_format)

    store = MovieStore()
    menu = MovieMenu(store=store, prompter=prompter, settings=settings)
    if args.csv:
        menu.print_report(store.load_csv(args.csv))

    logger.info("Movie DMS started")
    try:
        menu.run()
    except KeyboardInterrupt:
        menu.prompter.say("")
        logger.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
