from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from jsonschema import Draft202012Validator, exceptions as js_exceptions


logger = logging.getLogger(__name__)


# ---------------------------
# Exceptions
# ---------------------------

class JsonLoaderError(Exception):
    """Base error for JSON loader issues."""


class JsonFileNotFoundError(JsonLoaderError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"JSON file not found: {self.path}")


class JsonParseError(JsonLoaderError):
    def __init__(self, path: Union[str, Path], message: str, lineno: Optional[int] = None, colno: Optional[int] = None):
        self.path = Path(path)
        self.message = message
        self.lineno = lineno
        self.colno = colno
        location = f" (line {lineno}, column {colno})" if lineno is not None and colno is not None else ""
        super().__init__(f"Failed to parse JSON at {self.path}{location}: {message}")


class JsonSchemaError(JsonLoaderError):
    def __init__(self, path: Union[str, Path], errors: Sequence[js_exceptions.ValidationError]):
        self.path = Path(path)
        self.errors = list(errors)
        super().__init__(_format_schema_errors(self.path, self.errors))


# ---------------------------
# Utilities
# ---------------------------

JsonObject = Dict[str, Any]


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise JsonFileNotFoundError(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise JsonParseError(path, e.msg, e.lineno, e.colno) from e
    except UnicodeDecodeError as e:
        raise JsonParseError(path, f"not valid UTF-8 ({e.reason})") from e
    except (RecursionError, ValueError) as e:
        # Nesting past the interpreter limit, or integers past the digit limit
        raise JsonParseError(path, str(e)) from e


def _format_schema_errors(path: Path, errors: Sequence[js_exceptions.ValidationError]) -> str:
    lines = [f"Schema validation failed for {path}:"]
    for err in errors:
        where = ".".join(str(p) for p in err.absolute_path) or "root"
        lines.append(f" - At {where}: {err.message}")
    return "\n".join(lines)


def dumps(data: Any) -> str:
    """Serialize with 2-space indentation, keeping key order and non-ASCII text."""
    return json.dumps(data, ensure_ascii=False, indent=2)


# ---------------------------
# Public API
# ---------------------------

def load_json_file(
    path: Union[str, Path],
    *,
    schema: Optional[Mapping[str, Any]] = None,
) -> JsonObject:
    """Load a JSON file, optionally validating it against a JSON Schema.

    Raises JsonLoaderError subclasses on failure.
    """
    p = Path(path)
    data = _read_json(p)

    if schema:
        validator = Draft202012Validator(schema)
        try:
            errors: List[js_exceptions.ValidationError] = sorted(
                validator.iter_errors(data), key=lambda e: list(e.absolute_path)
            )
        except RecursionError as e:
            raise JsonParseError(p, "document nests too deeply to validate") from e
        if errors:
            raise JsonSchemaError(p, errors)

    logger.debug("Loaded %s", p)
    return data  # type: ignore[return-value]


def write_json_file(path: Union[str, Path], data: Any) -> None:
    """Write `data` to `path` atomically.

    The text goes to a sibling .tmp file which is fsynced and then moved over
    the target, so a failed write leaves the previous document in place.
    """
    p = Path(path)
    tmp = p.with_suffix(p.suffix + ".tmp")
    text = dumps(data)
    try:
        with tmp.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, p)
    except OSError:
        try:
            tmp.unlink()
        except FileNotFoundError:
            pass
        raise
    logger.debug("Wrote %s", p)


__all__ = [
    "load_json_file",
    "write_json_file",
    "dumps",
    "JsonLoaderError",
    "JsonFileNotFoundError",
    "JsonParseError",
    "JsonSchemaError",
]
