"""Tests for merging the build list with the scene inventory."""

from __future__ import annotations

import logging

from scenes_in_build.config import NOT_IN_BUILD
from scenes_in_build.domain.services.reconciler import reconcile


def test_build_members_come_first_in_build_order():
    collection = reconcile(
        ["Assets/B.unity", "Assets/A.unity"],
        ["Assets/A.unity", "Assets/C.unity", "Assets/B.unity", "Assets/D.unity"],
    )

    assert [entry.path for entry in collection] == [
        "Assets/B.unity",
        "Assets/A.unity",
        "Assets/C.unity",
        "Assets/D.unity",
    ]
    assert [entry.build_index for entry in collection] == [0, 1, NOT_IN_BUILD, NOT_IN_BUILD]
    assert [entry.is_in_build for entry in collection] == [True, True, False, False]


def test_every_path_appears_exactly_once():
    collection = reconcile(
        ["Assets/A.unity"],
        ["Assets/A.unity", "Assets/B.unity", "Assets/B.unity", "Assets/A.unity"],
    )

    paths = [entry.path for entry in collection]
    assert paths == ["Assets/A.unity", "Assets/B.unity"]


def test_build_member_missing_from_inventory_is_kept():
    collection = reconcile(["Assets/Deleted.unity"], ["Assets/Other.unity"])

    deleted = collection.find("Assets/Deleted.unity")
    assert deleted is not None
    assert deleted.is_in_build
    assert deleted.build_index == 0
    assert collection.build_count == 1
    assert collection.total_count == 2


def test_duplicate_build_entries_keep_first_occurrence(caplog):
    with caplog.at_level(logging.WARNING):
        collection = reconcile(
            ["Assets/A.unity", "Assets/B.unity", "Assets/A.unity"],
            [],
        )

    assert collection.build_paths() == ["Assets/A.unity", "Assets/B.unity"]
    assert [entry.build_index for entry in collection] == [0, 1]
    assert "duplicate" in caplog.text


def test_empty_inputs_give_empty_collection():
    collection = reconcile([], [], version=7)

    assert collection.total_count == 0
    assert collection.build_count == 0
    assert collection.version == 7


def test_names_are_derived_from_paths():
    collection = reconcile(["Assets/Levels/Boss Fight.unity"], [])

    entry = collection.find("Assets/Levels/Boss Fight.unity")
    assert entry.name == "Boss Fight"
    assert entry.file_name == "Boss Fight.unity"
    assert entry.directory == "Assets/Levels"
