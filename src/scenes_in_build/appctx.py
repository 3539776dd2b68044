"""Application-wide context: wires settings, persistence and the view model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .application.services.build_list_service import BuildListService
from .config import BUILD_LIST_RELATIVE_PATH
from .domain.repositories import IBuildListStore, IInventoryProvider
from .errors import ProjectNotFoundError
from .errors.handler import ErrorHandler
from .events.bus import EventBus
from .gui.viewmodels.scene_list_viewmodel import SceneListViewModel
from .infrastructure.inventory import FileSystemInventoryProvider
from .infrastructure.stores import JsonBuildListStore

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from .settings.manager import SettingsManager


def _create_settings_manager() -> "SettingsManager":
    from .settings.manager import SettingsManager

    manager = SettingsManager()
    manager.load()
    return manager


def resolve_project_root(settings: "SettingsManager", override: Optional[Path] = None) -> Path:
    """Return the project root from *override*, the settings or the CWD."""

    if override is not None:
        root = Path(override)
    else:
        stored = settings.get("project_root")
        root = Path(stored) if stored else Path.cwd()
    root = root.expanduser()
    if not root.is_dir():
        raise ProjectNotFoundError(f"Project directory not found: {root}")
    return root


@dataclass
class AppContext:
    """Container object shared by the GUI and the CLI."""

    project_root: Optional[Path] = None
    store_path: Optional[Path] = None
    settings: "SettingsManager" = field(default_factory=_create_settings_manager)
    event_bus: EventBus = field(default_factory=EventBus)
    store: Optional[IBuildListStore] = None
    inventory: Optional[IInventoryProvider] = None

    def __post_init__(self) -> None:
        self.project_root = resolve_project_root(self.settings, self.project_root)
        if self.store is None:
            self.store = JsonBuildListStore(self._resolve_store_path())
        if self.inventory is None:
            self.inventory = FileSystemInventoryProvider(
                self.project_root,
                roots=self.settings.get("inventory.roots"),
                extension=self.settings.get("inventory.extension"),
            )
        self.error_handler = ErrorHandler(logging.getLogger("scenes_in_build"), self.event_bus)
        self.service = BuildListService(
            self.inventory, self.store, self.event_bus, self.error_handler
        )
        self.viewmodel = SceneListViewModel(self.service, self.event_bus)

    def _resolve_store_path(self) -> Path:
        if self.store_path is not None:
            return Path(self.store_path)
        stored = self.settings.get("build_list_path")
        if stored:
            path = Path(stored).expanduser()
            return path if path.is_absolute() else self.project_root / path
        return self.project_root / BUILD_LIST_RELATIVE_PATH

    def remember_project(self) -> None:
        """Store the current project root as the default for the next launch."""

        self.settings.set("project_root", str(self.project_root))
