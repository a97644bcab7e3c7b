from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .config import LAYOUT
from .console import ConsoleUI, escape
from .exceptions import NoPlayersFoundError, NoSavesFoundError, SaveNotFoundError, SaveRootError
from .schemas import GAME_SCHEMA
from .utils.json_loader import JsonLoaderError, load_json_file

__all__ = [
    "Player",
    "SaveSlot",
    "SaveSelection",
    "list_players",
    "read_save_slot",
    "list_save_slots",
    "select_player",
    "select_save",
    "match_save",
    "resolve_save",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Player:
    """A player profile directory, named after the platform account id (STEAM64ID)."""

    player_id: str


@dataclass(frozen=True)
class SaveSlot:
    directory_name: str
    organisation_name: str


@dataclass(frozen=True)
class SaveSelection:
    player_id: str
    save_directory_name: str
    organisation_name: str
    save_path: Path


def _list_dir(path: Path) -> List[str]:
    return sorted(entry.name for entry in path.iterdir())


def list_players(saves_root: Path) -> List[Player]:
    """Return the player directories under `saves_root`, minus the placeholder."""
    try:
        names = _list_dir(saves_root)
    except FileNotFoundError as exc:
        raise SaveRootError(f"Saves directory not found: {saves_root}") from exc
    except NotADirectoryError as exc:
        raise SaveRootError(f"Saves root is not a directory: {saves_root}") from exc
    players = [Player(name) for name in names if name != LAYOUT.placeholder_player]
    logger.info("Found %d player(s) under %s", len(players), saves_root)
    return players


def read_save_slot(slot_dir: Path) -> Optional[SaveSlot]:
    """Build a SaveSlot from `slot_dir`/Game.json, or None if it is not a usable save."""
    try:
        game = load_json_file(slot_dir / LAYOUT.metadata_file, schema=GAME_SCHEMA)
    except JsonLoaderError as exc:
        logger.debug("Skipping %s: %s", slot_dir, exc)
        return None
    except OSError as exc:
        logger.debug("Skipping %s: cannot read metadata: %s", slot_dir, exc)
        return None
    return SaveSlot(directory_name=slot_dir.name, organisation_name=game[LAYOUT.organisation_field])


def list_save_slots(player_dir: Path) -> List[SaveSlot]:
    saves: List[SaveSlot] = []
    for name in _list_dir(player_dir):
        if name == LAYOUT.write_test_file:
            continue
        slot = read_save_slot(player_dir / name)
        if slot is not None:
            saves.append(slot)
    logger.info("Found %d save(s) under %s", len(saves), player_dir)
    return saves


def select_player(players: Sequence[Player], ui: ConsoleUI) -> Player:
    if len(players) == 1:
        player = players[0]
        ui.print_info(f"Selected player: [bold]{escape(player.player_id)}[/bold]")
        return player
    return ui.select("Select player (STEAM64ID):", [(p.player_id, p) for p in players])


def match_save(saves: Sequence[SaveSlot], value: str) -> SaveSlot:
    """Find the save a prompt answer refers to.

    Returns the first save whose organisation name or directory name equals
    `value`. Saves sharing an organisation name resolve to the first of them,
    and an earlier save whose directory is named `value` wins over a later
    save with that organisation name.
    """
    for save in saves:
        if save.organisation_name == value or save.directory_name == value:
            return save
    raise SaveNotFoundError(f"No save matches {value!r}")


def select_save(saves: Sequence[SaveSlot], ui: ConsoleUI) -> SaveSlot:
    if len(saves) == 1:
        save = saves[0]
        ui.print_info(f"Selected save: [bold]{escape(save.organisation_name)}[/bold]")
        return save
    answer = ui.select("Select save:", [(s.organisation_name, s.organisation_name) for s in saves])
    return match_save(saves, answer)


def resolve_save(saves_root: Path, ui: ConsoleUI) -> SaveSelection:
    """Walk the user from the saves root to a single save directory.

    Raises NoPlayersFoundError / NoSavesFoundError after telling the user,
    when a stage has nothing to offer.
    """
    players = list_players(saves_root)
    if not players:
        ui.print_failure("No players found")
        raise NoPlayersFoundError(f"No players found in {saves_root}")
    player = select_player(players, ui)

    player_dir = saves_root / player.player_id
    saves = list_save_slots(player_dir)
    if not saves:
        ui.print_failure("No saves found")
        raise NoSavesFoundError(f"No saves found in {player_dir}")
    save = select_save(saves, ui)

    return SaveSelection(
        player_id=player.player_id,
        save_directory_name=save.directory_name,
        organisation_name=save.organisation_name,
        save_path=(player_dir / save.directory_name).resolve(),
    )
