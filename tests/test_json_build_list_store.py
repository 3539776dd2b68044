"""Tests for the JSON build list store."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from scenes_in_build.config import BUILD_LIST_SCHEMA_ID
from scenes_in_build.errors import BuildListInvalidError, BuildListReadError, BuildListWriteError
from scenes_in_build.infrastructure.stores import JsonBuildListStore


def test_missing_file_is_empty_build_list(tmp_path: Path) -> None:
    store = JsonBuildListStore(tmp_path / "ProjectSettings" / "scenes_in_build.json")

    assert store.read() == []


def test_write_then_read(tmp_path: Path) -> None:
    path = tmp_path / "ProjectSettings" / "scenes_in_build.json"
    store = JsonBuildListStore(path)

    store.write(["Assets/B.unity", "Assets/A.unity"])

    assert store.read() == ["Assets/B.unity", "Assets/A.unity"]
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["schema"] == BUILD_LIST_SCHEMA_ID
    assert payload["scenes"] == [
        {"path": "Assets/B.unity", "enabled": True},
        {"path": "Assets/A.unity", "enabled": True},
    ]


def test_write_leaves_no_temporary_files(tmp_path: Path) -> None:
    store = JsonBuildListStore(tmp_path / "build.json")

    store.write(["Assets/A.unity"])
    store.write([])

    assert sorted(os.listdir(tmp_path)) == ["build.json"]
    assert store.read() == []


def test_disabled_entries_keep_their_place(tmp_path: Path) -> None:
    path = tmp_path / "build.json"
    path.write_text(
        json.dumps(
            {
                "schema": BUILD_LIST_SCHEMA_ID,
                "scenes": [
                    {"path": "Assets/A.unity", "enabled": False},
                    {"path": "Assets/B.unity"},
                ],
            }
        ),
        encoding="utf-8",
    )

    assert JsonBuildListStore(path).read() == ["Assets/A.unity", "Assets/B.unity"]


def test_corrupt_json_raises_read_error(tmp_path: Path) -> None:
    path = tmp_path / "build.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(BuildListReadError):
        JsonBuildListStore(path).read()


@pytest.mark.parametrize(
    "payload",
    [
        {"scenes": []},
        {"schema": "other@1", "scenes": []},
        {"schema": BUILD_LIST_SCHEMA_ID, "scenes": [{"path": ""}]},
        {"schema": BUILD_LIST_SCHEMA_ID, "scenes": ["Assets/A.unity"]},
        [],
    ],
)
def test_invalid_documents_are_rejected(tmp_path: Path, payload) -> None:
    path = tmp_path / "build.json"
    path.write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(BuildListInvalidError):
        JsonBuildListStore(path).read()


def test_unwritable_location_raises_write_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonBuildListStore(blocker / "build.json")

    with pytest.raises(BuildListWriteError):
        store.write(["Assets/A.unity"])
