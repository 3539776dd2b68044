from __future__ import annotations

from typing import Iterable, List, Sequence

from ...domain.repositories import IBuildListStore


class InMemoryBuildListStore(IBuildListStore):
    """Build list kept in a plain Python list."""

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: List[str] = list(paths)
        self.write_count = 0

    def read(self) -> List[str]:
        return list(self._paths)

    def write(self, paths: Sequence[str]) -> None:
        self._paths = list(paths)
        self.write_count += 1
