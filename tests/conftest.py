import io
import json
import sys
from pathlib import Path
from typing import Iterable, Optional

import pytest
from rich.console import Console

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from sanitize_i.console import ConsoleUI  # noqa: E402


def write_json(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


class RecordingUI(ConsoleUI):
    """ConsoleUI writing to in-memory buffers, answering prompts from `answers`."""

    def __init__(self, answers: Iterable[str] = ()) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(
            console=Console(file=self.out, width=200, color_system=None, highlight=False),
            err_console=Console(file=self.err, width=200, color_system=None, highlight=False),
            input_stream=io.StringIO("".join(f"{a}\n" for a in answers)),
        )

    @property
    def stdout(self) -> str:
        return self.out.getvalue()

    @property
    def stderr(self) -> str:
        return self.err.getvalue()


@pytest.fixture
def make_ui():
    def _make(*answers: str) -> RecordingUI:
        return RecordingUI(answers)

    return _make


@pytest.fixture
def ui(make_ui) -> RecordingUI:
    return make_ui()


@pytest.fixture
def saves_root(tmp_path: Path) -> Path:
    root = tmp_path / "Saves"
    root.mkdir()
    return root


@pytest.fixture
def make_save(saves_root: Path):
    """Create <root>/<player>/<save_dir>/Game.json, returning the save directory."""

    def _make(player: str, save_dir: str, organisation: Optional[str] = "Acme", game: Optional[dict] = None) -> Path:
        path = saves_root / player / save_dir
        path.mkdir(parents=True, exist_ok=True)
        if game is None and organisation is not None:
            game = {"OrganisationName": organisation, "GameVersion": "0.3.3"}
        if game is not None:
            write_json(path / "Game.json", game)
        return path

    return _make
