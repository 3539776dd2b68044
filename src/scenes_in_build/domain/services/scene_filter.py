from __future__ import annotations

from ..models import SceneEntry, WorkingCollection


def matches_query(entry: SceneEntry, query: str) -> bool:
    if not query:
        return True
    needle = query.casefold()
    return needle in entry.name.casefold() or needle in entry.path.casefold()


def visible_entries(collection: WorkingCollection, query: str) -> list[SceneEntry]:
    """Return the entries of *collection* whose name or path contains *query*."""
    return [entry for entry in collection.entries if matches_query(entry, query)]
