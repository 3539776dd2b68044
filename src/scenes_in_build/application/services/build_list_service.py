"""Synchronise the working collection with the persisted build list."""

from __future__ import annotations

import logging
from typing import Optional

from scenes_in_build.domain.models import WorkingCollection
from scenes_in_build.domain.repositories import IBuildListStore, IInventoryProvider
from scenes_in_build.domain.services.reconciler import reconcile
from scenes_in_build.errors import ScenesInBuildError
from scenes_in_build.errors.handler import ErrorHandler, ErrorSeverity
from scenes_in_build.events.bus import EventBus
from scenes_in_build.events.scene_events import BuildListLoadedEvent, BuildListWrittenEvent


class BuildListService:
    """Read, reconcile and write the authoritative build list.

    The store is re-read on every :meth:`load`; nothing is cached between
    calls so edits made by other tools are always picked up.  Each loaded
    collection receives a version number higher than any collection handed
    out before.
    """

    def __init__(
        self,
        inventory: IInventoryProvider,
        store: IBuildListStore,
        event_bus: EventBus,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self._inventory = inventory
        self._store = store
        self._events = event_bus
        self._errors = error_handler or ErrorHandler(logging.getLogger(__name__), event_bus)
        self._logger = logging.getLogger(__name__)
        self._version = 0

    @property
    def store(self) -> IBuildListStore:
        return self._store

    def load(self) -> WorkingCollection:
        """Return a fresh collection built from the store and the inventory.

        Raises the store's or inventory's :class:`ScenesInBuildError` when
        either collaborator fails.
        """

        build_paths = self._store.read()
        inventory_paths = self._inventory.list_all_scene_paths()
        self._version += 1
        collection = reconcile(build_paths, inventory_paths, version=self._version)
        self._logger.debug(
            "Reconciled %d scenes (%d in build), version %d",
            collection.total_count,
            collection.build_count,
            collection.version,
        )
        self._events.publish(
            BuildListLoadedEvent(
                source="BuildListService",
                version=collection.version,
                total=collection.total_count,
                in_build=collection.build_count,
            )
        )
        return collection

    def commit(self, collection: WorkingCollection, fallback: WorkingCollection) -> WorkingCollection:
        """Persist the build order of *collection* and return the reloaded state.

        A failed write is reported and the state is re-read from the store,
        because the write may or may not have reached it.  If the store cannot
        be read either, *fallback* (the last state known to be consistent) is
        returned unchanged.
        """

        paths = collection.build_paths()
        try:
            self._store.write(paths)
        except ScenesInBuildError as exc:
            self._errors.handle(exc, ErrorSeverity.ERROR, {"operation": "write"})
        else:
            self._events.publish(BuildListWrittenEvent(source="BuildListService", paths=paths))
        return self.reload(fallback)

    def reload(self, fallback: WorkingCollection) -> WorkingCollection:
        """Like :meth:`load` but report failures and return *fallback* instead."""

        try:
            return self.load()
        except ScenesInBuildError as exc:
            self._errors.handle(exc, ErrorSeverity.ERROR, {"operation": "read"})
            return fallback
