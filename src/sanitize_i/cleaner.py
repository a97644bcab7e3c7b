from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import LAYOUT
from .console import ConsoleUI, escape
from .schemas import GENERATOR_SCHEMA, TRASH_SCHEMA
from .utils.json_loader import JsonLoaderError, load_json_file, write_json_file

__all__ = [
    "CleanStats",
    "clean_trash",
    "clean_generators",
    "clean",
]

logger = logging.getLogger(__name__)


@dataclass
class CleanStats:
    trash_items_count: int = 0
    generators_count: int = 0


def clean_trash(save_path: Path, ui: ConsoleUI) -> int:
    """Empty the item list of Trash/Trash.json and return how many items it held.

    An empty or missing list leaves the file unwritten.
    """
    trash_path = LAYOUT.trash_path(save_path)
    name = LAYOUT.trash_file
    if not trash_path.exists():
        ui.print_warning(f"{name} not found")
        return 0

    try:
        data = load_json_file(trash_path, schema=TRASH_SCHEMA)
        items = data.get(LAYOUT.trash_items_field) or []
        if not items:
            ui.print_muted(f"No items found in {name}")
            return 0
        count = len(items)
        data[LAYOUT.trash_items_field] = []
        write_json_file(trash_path, data)
    except (JsonLoaderError, OSError) as exc:
        logger.warning("Failed to clean %s: %s", trash_path, exc)
        ui.print_error(f"Error cleaning {name}: {escape(str(exc))}")
        return 0

    ui.print_success(f"Cleaned [bold]{count}[/bold] items from {name}")
    return count


def _clean_generator_file(path: Path) -> bool:
    """Empty one generator's item list. Returns True if the file was rewritten."""
    data = load_json_file(path, schema=GENERATOR_SCHEMA)
    if not data.get(LAYOUT.generated_items_field):
        return False
    data[LAYOUT.generated_items_field] = []
    write_json_file(path, data)
    return True


def clean_generators(save_path: Path, ui: ConsoleUI) -> int:
    """Empty GeneratedItems in every Trash/Generators/Generator_*.json.

    Returns the number of generator files that had items. A file that cannot
    be read or written is skipped without stopping the others.
    """
    generators_dir = LAYOUT.generators_path(save_path)
    if not generators_dir.exists():
        ui.print_warning("Generators directory not found")
        return 0

    count = 0
    try:
        names = sorted(entry.name for entry in generators_dir.iterdir() if LAYOUT.is_generator_file(entry.name))
        for name in names:
            path = generators_dir / name
            try:
                if _clean_generator_file(path):
                    count += 1
            except (JsonLoaderError, OSError) as exc:
                logger.debug("Skipping generator %s: %s", path, exc)
    except OSError as exc:
        logger.warning("Failed to list %s: %s", generators_dir, exc)
        ui.print_error(f"Error cleaning generators: {escape(str(exc))}")
        return count

    if count > 0:
        ui.print_success(f"Cleaned [bold]{count}[/bold] generator files")
    else:
        ui.print_muted("No items found in generator files")
    return count


def clean(save_path: Path, ui: ConsoleUI) -> CleanStats:
    """Clean the trash and generator documents of one save directory."""
    save_path = Path(save_path)
    ui.print_section("Cleaning Process Started")
    stats = CleanStats()
    stats.trash_items_count = clean_trash(save_path, ui)
    stats.generators_count = clean_generators(save_path, ui)
    logger.info(
        "Cleaned %s: %d trash item(s), %d generator(s)",
        save_path,
        stats.trash_items_count,
        stats.generators_count,
    )
    return stats
