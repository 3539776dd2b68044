"""Merge the authoritative build list with the scene inventory."""

from __future__ import annotations

import logging
from typing import Iterable

from ..models import SceneEntry, WorkingCollection

_logger = logging.getLogger(__name__)


def reconcile(
    build_paths: Iterable[str],
    inventory_paths: Iterable[str],
    *,
    version: int = 0,
) -> WorkingCollection:
    """Return a fresh :class:`WorkingCollection` for *build_paths* and *inventory_paths*.

    Every path of the build list becomes a member whose ``build_index`` is its
    rank in that list.  Inventory paths that are not already present follow
    as non-members, in the order the provider yielded them.  A path is only
    ever emitted once: the inventory may repeat paths or overlap the build
    list, and an externally edited build list may even repeat itself, in
    which case the first occurrence wins.
    """

    entries: list[SceneEntry] = []
    seen: set[str] = set()

    for path in build_paths:
        if path in seen:
            _logger.warning("Ignoring duplicate build list entry %s", path)
            continue
        seen.add(path)
        entries.append(SceneEntry.create(path, build_index=len(entries)))

    for path in inventory_paths:
        if path in seen:
            continue
        seen.add(path)
        entries.append(SceneEntry.create(path))

    return WorkingCollection(entries=tuple(entries), version=version)
