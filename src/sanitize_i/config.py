from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from .exceptions import SaveRootError

__all__ = [
    "SAVES_ROOT_ENV",
    "PROFILE_ENV",
    "SAVES_RELATIVE_PATH",
    "SaveLayout",
    "LAYOUT",
    "Settings",
]

# Overrides the whole saves root when set
SAVES_ROOT_ENV = "SANITIZE_SAVES_ROOT"
# Windows user profile directory
PROFILE_ENV = "USERPROFILE"

SAVES_RELATIVE_PATH: Tuple[str, ...] = ("AppData", "LocalLow", "TVGS", "Schedule I", "Saves")

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveLayout:
    """Fixed names of the save format.

    Only these entries are ever read or written; everything else in a save
    directory is left alone.
    """

    # Player directory created by the game that is never a real account
    placeholder_player: str = "TempPlayer"
    # File the game drops next to the save slots to probe write access
    write_test_file: str = "WriteTest.txt"

    metadata_file: str = "Game.json"
    organisation_field: str = "OrganisationName"

    trash_dir: str = "Trash"
    trash_file: str = "Trash.json"
    trash_items_field: str = "Items"

    generators_dir: str = "Generators"
    generator_prefix: str = "Generator_"
    generator_suffix: str = ".json"
    generated_items_field: str = "GeneratedItems"

    def trash_path(self, save_path: Path) -> Path:
        return save_path / self.trash_dir / self.trash_file

    def generators_path(self, save_path: Path) -> Path:
        return save_path / self.trash_dir / self.generators_dir

    def is_generator_file(self, name: str) -> bool:
        return name.startswith(self.generator_prefix) and name.endswith(self.generator_suffix)


LAYOUT = SaveLayout()


@dataclass(frozen=True)
class Settings:
    saves_root: Path

    @classmethod
    def from_env(
        cls,
        saves_root: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """Resolve settings for a run.

        Precedence for the saves root:
        - the explicit `saves_root` argument (``--saves-root``)
        - the SANITIZE_SAVES_ROOT environment variable
        - %USERPROFILE%/AppData/LocalLow/TVGS/Schedule I/Saves

        Raises SaveRootError when none of them is available.
        """
        env = os.environ if environ is None else environ
        if saves_root is not None:
            root = Path(saves_root)
            _logger.debug("Saves root from command line: %s", root)
            return cls(saves_root=root)

        override = env.get(SAVES_ROOT_ENV, "").strip()
        if override:
            root = Path(override)
            _logger.debug("Saves root from %s: %s", SAVES_ROOT_ENV, root)
            return cls(saves_root=root)

        profile = env.get(PROFILE_ENV, "").strip()
        if not profile:
            raise SaveRootError(
                f"{PROFILE_ENV} is not set; use --saves-root or {SAVES_ROOT_ENV} to point at the Saves directory"
            )
        root = Path(profile).joinpath(*SAVES_RELATIVE_PATH)
        _logger.debug("Saves root from %s: %s", PROFILE_ENV, root)
        return cls(saves_root=root)
