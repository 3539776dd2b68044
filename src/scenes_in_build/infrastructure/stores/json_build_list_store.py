"""Build list persisted as a JSON document inside the project."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Sequence

from jsonschema import Draft202012Validator, ValidationError

from ...config import BUILD_LIST_SCHEMA_ID
from ...domain.repositories import IBuildListStore
from ...errors import BuildListInvalidError, BuildListReadError, BuildListWriteError
from ...utils.jsonio import read_json, write_json

BUILD_LIST_SCHEMA: dict[str, Any] = {
    "$id": "scenes-in-build/build-list.schema.json",
    "type": "object",
    "required": ["schema", "scenes"],
    "properties": {
        "schema": {"const": BUILD_LIST_SCHEMA_ID},
        "scenes": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["path"],
                "properties": {
                    "path": {"type": "string", "minLength": 1},
                    "enabled": {"type": "boolean"},
                },
                "additionalProperties": True,
            },
        },
    },
    "additionalProperties": True,
}

_validator = Draft202012Validator(BUILD_LIST_SCHEMA)


class JsonBuildListStore(IBuildListStore):
    """Read and atomically replace the build list stored at ``path``.

    A missing file is an empty build list.  Every scene written is marked
    ``enabled``; disabled entries produced by other tools are still read back
    as part of the order.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._logger = logging.getLogger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> List[str]:
        if not self._path.exists():
            return []
        try:
            payload = read_json(self._path)
        except (OSError, ValueError) as exc:
            raise BuildListReadError(f"Cannot read build list {self._path}: {exc}") from exc
        try:
            _validator.validate(payload)
        except ValidationError as exc:
            raise BuildListInvalidError(
                f"Build list {self._path} is invalid: {exc.message}"
            ) from exc
        return [scene["path"] for scene in payload["scenes"]]

    def write(self, paths: Sequence[str]) -> None:
        payload = {
            "schema": BUILD_LIST_SCHEMA_ID,
            "scenes": [{"path": path, "enabled": True} for path in paths],
        }
        try:
            write_json(self._path, payload)
        except OSError as exc:
            raise BuildListWriteError(f"Cannot write build list {self._path}: {exc}") from exc
        self._logger.debug("Wrote %d scenes to %s", len(paths), self._path)
