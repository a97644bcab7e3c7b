"""JSON Schemas for the save documents this tool touches.

They only pin down the fields that are read or rewritten; any other keys in
a document pass through untouched.
"""

from typing import Any, Dict

from .config import LAYOUT

_DRAFT = "https://json-schema.org/draft/2020-12/schema"

GAME_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "type": "object",
    "required": [LAYOUT.organisation_field],
    "properties": {
        LAYOUT.organisation_field: {"type": "string", "minLength": 1},
    },
}

TRASH_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "type": "object",
    "properties": {
        LAYOUT.trash_items_field: {"type": "array"},
    },
}

GENERATOR_SCHEMA: Dict[str, Any] = {
    "$schema": _DRAFT,
    "type": "object",
    "properties": {
        LAYOUT.generated_items_field: {"type": "array"},
    },
}

__all__ = [
    "GAME_SCHEMA",
    "TRASH_SCHEMA",
    "GENERATOR_SCHEMA",
]
