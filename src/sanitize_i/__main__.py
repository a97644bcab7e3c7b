from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .cleaner import clean
from .config import Settings
from .console import ConsoleUI, escape
from .exceptions import NothingToCleanError
from .locator import resolve_save

logger = logging.getLogger("sanitize_i")


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def run(settings: Settings, ui: ConsoleUI) -> int:
    """Locate a save, clean it and print the summary."""
    try:
        selection = resolve_save(settings.saves_root, ui)
    except NothingToCleanError as exc:
        logger.info("%s", exc)
        return 0

    ui.print_info(f"\nProcessing save: [bold]{escape(selection.organisation_name)}[/bold]")
    stats = clean(selection.save_path, ui)

    ui.print_banner("Cleaning Complete")
    ui.print_plain(
        f"Summary: Cleaned [bold green]{stats.trash_items_count}[/bold green] trash items "
        f"and [bold green]{stats.generators_count}[/bold green] generators"
    )
    return 0


def main(argv: list[str] | None = None, ui: ConsoleUI | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sanitize-i",
        description="Clear accumulated trash and generator items from a Schedule I save",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--saves-root",
        type=Path,
        default=None,
        help="Saves directory to use instead of %%USERPROFILE%%/AppData/LocalLow/TVGS/Schedule I/Saves",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    ui = ui or ConsoleUI()
    ui.print_header("Sanitize I")

    try:
        settings = Settings.from_env(saves_root=args.saves_root)
        return run(settings, ui)
    except Exception as exc:
        logger.debug("Run failed", exc_info=True)
        ui.print_fatal(escape(str(exc)))
        return 1


if __name__ == "__main__":
    sys.exit(main())
