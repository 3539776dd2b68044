from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Iterator, Optional

from scenes_in_build.config import NOT_IN_BUILD


def scene_name_from_path(path: str) -> str:
    """Return the display name of a scene: its file name without extension."""
    return PurePosixPath(path.replace("\\", "/")).stem


@dataclass(frozen=True)
class SceneEntry:
    path: str
    name: str
    is_in_build: bool = False
    build_index: int = NOT_IN_BUILD

    @classmethod
    def create(cls, path: str, build_index: int = NOT_IN_BUILD) -> SceneEntry:
        return cls(
            path=path,
            name=scene_name_from_path(path),
            is_in_build=build_index != NOT_IN_BUILD,
            build_index=build_index,
        )

    @property
    def file_name(self) -> str:
        return PurePosixPath(self.path.replace("\\", "/")).name

    @property
    def directory(self) -> str:
        parent = PurePosixPath(self.path.replace("\\", "/")).parent.as_posix()
        return "" if parent == "." else parent


@dataclass(frozen=True)
class WorkingCollection:
    """Ordered merge of the build set and the scene inventory.

    Build members come first in build order, followed by inventory-only
    scenes.  Instances are never mutated; every change produces a new
    collection with a higher ``version``.
    """

    entries: tuple[SceneEntry, ...] = ()
    version: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[SceneEntry]:
        return iter(self.entries)

    @property
    def total_count(self) -> int:
        return len(self.entries)

    @property
    def build_count(self) -> int:
        return sum(1 for entry in self.entries if entry.is_in_build)

    def build_entries(self) -> list[SceneEntry]:
        """Return the build members ordered by ``build_index``."""
        members = [entry for entry in self.entries if entry.is_in_build]
        # ``sorted`` is stable, so entries that share a stale index keep
        # their relative order in the collection.
        return sorted(members, key=lambda entry: entry.build_index)

    def build_paths(self) -> list[str]:
        return [entry.path for entry in self.build_entries()]

    def find(self, path: str) -> Optional[SceneEntry]:
        for entry in self.entries:
            if entry.path == path:
                return entry
        return None

    def position_in_build(self, path: str) -> int:
        """Return the rank of *path* in build order, or ``NOT_IN_BUILD``."""
        for rank, entry in enumerate(self.build_entries()):
            if entry.path == path:
                return rank
        return NOT_IN_BUILD


@dataclass(frozen=True)
class ItemGeometry:
    """Vertical extent of a rendered build row, in pointer coordinates.

    ``path`` names the scene shown by the row.  It is optional; when present
    the drag engine uses it to translate gaps between the rendered rows into
    gaps of the full build order (the list may be filtered).
    """

    top: float
    height: float
    path: str = ""

    @property
    def mid_y(self) -> float:
        return self.top + self.height / 2


@dataclass
class DragSession:
    source_path: str
    source_index: int
    collection_version: int
    insertion_index: Optional[int] = None
