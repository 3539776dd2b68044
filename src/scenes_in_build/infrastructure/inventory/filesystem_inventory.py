"""Scene discovery on the local file system."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from ...config import DEFAULT_EXCLUDE, DEFAULT_SCENE_ROOTS, SCENE_EXTENSION
from ...domain.repositories import IInventoryProvider
from ...errors import InventoryUnavailableError
from ...utils.pathutils import is_excluded, to_project_path


class FileSystemInventoryProvider(IInventoryProvider):
    """List every scene file below the configured roots of a project."""

    def __init__(
        self,
        project_root: Path,
        roots: Optional[Iterable[str]] = None,
        extension: str = SCENE_EXTENSION,
        exclude: Optional[Iterable[str]] = None,
    ) -> None:
        self._project_root = Path(project_root)
        self._roots = list(roots) if roots is not None else list(DEFAULT_SCENE_ROOTS)
        self._extension = extension.lower()
        self._exclude = list(exclude) if exclude is not None else list(DEFAULT_EXCLUDE)
        self._logger = logging.getLogger(__name__)

    @property
    def project_root(self) -> Path:
        return self._project_root

    def list_all_scene_paths(self) -> List[str]:
        if not self._project_root.is_dir():
            raise InventoryUnavailableError(
                f"Project root {self._project_root} is not a directory"
            )

        found: List[str] = []
        for root_name in self._roots:
            root = self._project_root / root_name
            if not root.is_dir():
                self._logger.debug("Skipping missing scene root %s", root)
                continue
            try:
                candidates = sorted(root.rglob(f"*{self._extension}"))
            except OSError as exc:
                raise InventoryUnavailableError(f"Cannot scan {root}: {exc}") from exc
            for candidate in candidates:
                if not candidate.is_file() or candidate.suffix.lower() != self._extension:
                    continue
                rel = to_project_path(candidate, self._project_root)
                if is_excluded(rel, self._exclude):
                    continue
                found.append(rel)
        self._logger.debug("Found %d scenes under %s", len(found), self._project_root)
        return found
