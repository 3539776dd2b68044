"""Structural operations on the build-ordered subsequence.

All functions are pure: they take a :class:`WorkingCollection` and return a
new one.  When an operation is not applicable the input collection is
returned unchanged (the very same object), which lets callers detect no-ops
with an identity check.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ...config import NOT_IN_BUILD
from ..models import SceneEntry, WorkingCollection

_logger = logging.getLogger(__name__)


def renumber(
    members: Sequence[SceneEntry],
    others: Sequence[SceneEntry],
    *,
    version: int,
) -> WorkingCollection:
    """Build a collection from *members* (in build order) followed by *others*.

    This is the single place where ``build_index`` values are assigned:
    members receive ``0..n-1`` by position, everything else ``NOT_IN_BUILD``.
    """

    entries: list[SceneEntry] = []
    for index, entry in enumerate(members):
        if entry.is_in_build and entry.build_index == index:
            entries.append(entry)
        else:
            entries.append(replace(entry, is_in_build=True, build_index=index))
    for entry in others:
        if not entry.is_in_build and entry.build_index == NOT_IN_BUILD:
            entries.append(entry)
        else:
            entries.append(replace(entry, is_in_build=False, build_index=NOT_IN_BUILD))
    return WorkingCollection(entries=tuple(entries), version=version)


def _split(collection: WorkingCollection) -> tuple[list[SceneEntry], list[SceneEntry]]:
    members = collection.build_entries()
    others = [entry for entry in collection.entries if not entry.is_in_build]
    return members, others


def set_membership(collection: WorkingCollection, path: str, value: bool) -> WorkingCollection:
    """Add *path* to the end of the build set or remove it from the build set."""

    entry = collection.find(path)
    if entry is None:
        _logger.debug("Ignoring membership change for unknown scene %s", path)
        return collection
    if entry.is_in_build == value:
        return collection

    members, others = _split(collection)
    if value:
        others = [other for other in others if other.path != path]
        members.append(entry)
    else:
        members = [member for member in members if member.path != path]
        others.insert(0, entry)
    return renumber(members, others, version=collection.version + 1)


def move_scene(collection: WorkingCollection, from_index: int, to_index: int) -> WorkingCollection:
    """Move the build member at *from_index* into the gap *to_index*.

    *to_index* addresses gaps between members (``0..build_count``) and is
    clamped into that range.  An out-of-range *from_index* leaves the
    collection untouched.  The move is a splice: every other member keeps its
    relative order.
    """

    members, others = _split(collection)
    count = len(members)
    if from_index < 0 or from_index >= count:
        _logger.debug("Ignoring move from out-of-range index %d (count=%d)", from_index, count)
        return collection

    to_index = max(0, min(to_index, count))
    scene = members.pop(from_index)
    if to_index > from_index:
        to_index -= 1
    members.insert(to_index, scene)

    if to_index == from_index:
        return collection
    return renumber(members, others, version=collection.version + 1)
