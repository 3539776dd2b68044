from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence


class IInventoryProvider(ABC):
    @abstractmethod
    def list_all_scene_paths(self) -> Iterable[str]:
        """Return every known scene path; unordered, duplicates allowed."""
        pass


class IBuildListStore(ABC):
    @abstractmethod
    def read(self) -> List[str]:
        """Return the authoritative build order as it is stored right now."""
        pass

    @abstractmethod
    def write(self, paths: Sequence[str]) -> None:
        """Replace the whole stored build order with *paths*."""
        pass
