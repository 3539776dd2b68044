"""Schema helpers for the application settings file."""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import (
    DEFAULT_SCENE_ROOTS,
    DRAG_START_THRESHOLD_PX,
    SCENE_EXTENSION,
    SETTINGS_SCHEMA_ID,
    WINDOW_MIN_SIZE,
)

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "scenes-in-build/settings.schema.json",
    "type": "object",
    "required": ["schema", "ui", "inventory"],
    "properties": {
        "schema": {"const": SETTINGS_SCHEMA_ID},
        "project_root": {"type": ["string", "null"]},
        "build_list_path": {"type": ["string", "null"]},
        "inventory": {
            "type": "object",
            "properties": {
                "roots": {
                    "type": "array",
                    "items": {"type": "string", "minLength": 1},
                },
                "extension": {"type": "string", "pattern": "^\\.[^./\\\\]+$"},
            },
            "additionalProperties": True,
        },
        "ui": {
            "type": "object",
            "properties": {
                "drag_threshold": {"type": "integer", "minimum": 0},
                "window_width": {"type": "integer", "minimum": WINDOW_MIN_SIZE[0]},
                "window_height": {"type": "integer", "minimum": WINDOW_MIN_SIZE[1]},
                "last_search": {"type": "string"},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": SETTINGS_SCHEMA_ID,
    "project_root": None,
    "build_list_path": None,
    "inventory": {
        "roots": list(DEFAULT_SCENE_ROOTS),
        "extension": SCENE_EXTENSION,
    },
    "ui": {
        "drag_threshold": DRAG_START_THRESHOLD_PX,
        "window_width": 480,
        "window_height": 600,
        "last_search": "",
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)

_NESTED_SECTIONS = ("ui", "inventory")
_PATH_KEYS = ("project_root", "build_list_path")


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in _NESTED_SECTIONS and isinstance(value, dict):
                target = merged.setdefault(key, {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            if key in _PATH_KEYS:
                if value in {None, ""}:
                    merged[key] = None
                    continue
                try:
                    merged[key] = os.fspath(value)
                except TypeError:
                    continue
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
