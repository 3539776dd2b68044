from __future__ import annotations

from typing import Iterable, List

from ...domain.repositories import IInventoryProvider


class StaticInventoryProvider(IInventoryProvider):
    """Inventory backed by a fixed list of paths."""

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self.paths: List[str] = list(paths)

    def list_all_scene_paths(self) -> List[str]:
        return list(self.paths)
