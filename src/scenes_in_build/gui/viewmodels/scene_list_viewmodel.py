"""SceneListViewModel, the single owner of the working collection.

Every change to the build set goes through this class: it applies the pure
build-order operations, asks :class:`BuildListService` to persist the result,
replaces its collection with the state read back from the store and then
notifies the rendering layer.  It has no Qt dependency; the widgets in
``gui.ui`` and the CLI both drive it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from scenes_in_build.application.services.build_list_service import BuildListService
from scenes_in_build.domain.models import ItemGeometry, SceneEntry, WorkingCollection
from scenes_in_build.domain.services import build_order
from scenes_in_build.domain.services.scene_filter import visible_entries
from scenes_in_build.errors.handler import ErrorOccurredEvent
from scenes_in_build.events.bus import EventBus
from scenes_in_build.events.scene_events import MembershipChangedEvent, OrderCommittedEvent

from .base import BaseViewModel
from .drag_engine import DragEngine
from .signal import ObservableProperty, Signal


@dataclass(frozen=True)
class SceneSummary:
    total: int = 0
    in_build: int = 0

    @property
    def footer_text(self) -> str:
        return f"Total: {self.total} | In Build: {self.in_build}"


class SceneListViewModel(BaseViewModel):
    """Owning controller for the scene list.

    Observable properties: ``collection``, ``search_text``, ``visible``
    (the filtered entries) and ``summary``.

    Signals: ``collection_changed(collection)``,
    ``membership_changed(path, is_in_build, build_index)``,
    ``order_committed(from_index, to_index)``, ``error_occurred(message)``
    and the drag signals re-exported from :class:`DragEngine`.

    Mutating operations invoked while another one is still running (for
    example from a handler of one of the signals above) are ignored.
    """

    def __init__(self, service: BuildListService, event_bus: EventBus) -> None:
        super().__init__()
        self._service = service
        self._events = event_bus
        self._logger = logging.getLogger(__name__)
        self._mutating = False

        self.collection = ObservableProperty(WorkingCollection())
        self.search_text = ObservableProperty("")
        self.visible = ObservableProperty([])
        self.summary = ObservableProperty(SceneSummary())

        self.collection_changed = Signal("collection_changed")
        self.membership_changed = Signal("membership_changed")
        self.order_committed = Signal("order_committed")
        self.error_occurred = Signal("error_occurred")

        self.drag = DragEngine(lambda: self.collection.value, self._commit_drag)
        self.drag_started = self.drag.drag_started
        self.insertion_changed = self.drag.insertion_changed
        self.drag_ended = self.drag.drag_ended

        self.subscribe_event(event_bus, ErrorOccurredEvent, self._on_error)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def entry(self, path: str) -> Optional[SceneEntry]:
        return self.collection.value.find(path)

    @property
    def is_dragging(self) -> bool:
        return self.drag.is_dragging

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        """Re-read the store and inventory and replace the collection."""

        if not self._enter("refresh"):
            return
        try:
            self._publish(self._service.reload(self.collection.value))
        finally:
            self._mutating = False

    def set_membership(self, path: str, value: bool) -> bool:
        """Add *path* to, or remove it from, the build set and persist it.

        Returns ``False`` when nothing changed or the store did not take the
        change; no confirmation is emitted in that case.
        """

        if not self._enter("set_membership"):
            return False
        try:
            current = self.collection.value
            updated = build_order.set_membership(current, path, value)
            if updated is current:
                return False
            if not self._persist(updated, current):
                return False
            entry = self.collection.value.find(path)
            if entry is not None:
                self._logger.info(
                    "%s %s the build set", path, "added to" if entry.is_in_build else "removed from"
                )
                self._events.publish(
                    MembershipChangedEvent(
                        source="SceneListViewModel",
                        path=path,
                        is_in_build=entry.is_in_build,
                        build_index=entry.build_index,
                    )
                )
                self.membership_changed.emit(path, entry.is_in_build, entry.build_index)
            return True
        finally:
            self._mutating = False

    def move_scene(self, from_index: int, to_index: int) -> bool:
        """Move the build member at *from_index* into gap *to_index* and persist it."""

        if not self._enter("move_scene"):
            return False
        try:
            return self._move(from_index, to_index)
        finally:
            self._mutating = False

    def set_search_text(self, text: str) -> None:
        self.search_text.value = text or ""
        self._update_visible()

    # ------------------------------------------------------------------
    # Drag gesture
    # ------------------------------------------------------------------
    def start_drag(self, path: str) -> bool:
        if not self._enter("start_drag"):
            return False
        try:
            return self.drag.start_drag(path)
        finally:
            self._mutating = False

    def update_drag(self, pointer_y: float, geometry: Sequence[ItemGeometry]) -> Optional[int]:
        if not self._enter("update_drag"):
            return None
        try:
            return self.drag.update_drag(pointer_y, geometry)
        finally:
            self._mutating = False

    def end_drag(self, pointer_y: float, geometry: Sequence[ItemGeometry]) -> bool:
        if not self._enter("end_drag"):
            return False
        try:
            return self.drag.end_drag(pointer_y, geometry)
        finally:
            self._mutating = False

    def cancel_drag(self) -> bool:
        # Not guarded: losing pointer capture must always end the gesture.
        return self.drag.cancel_drag()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _enter(self, operation: str) -> bool:
        if self._mutating:
            self._logger.debug("Ignoring re-entrant %s while a change is in progress", operation)
            return False
        self._mutating = True
        return True

    def _commit_drag(self, source_index: int, insertion_index: int) -> bool:
        return self._move(source_index, insertion_index)

    def _persist(self, updated: WorkingCollection, current: WorkingCollection) -> bool:
        """Write *updated* and publish the state read back from the store.

        Returns ``True`` only when the stored build order matches *updated*.
        """

        stored = self._service.commit(updated, current)
        self._publish(stored)
        if stored.build_paths() != updated.build_paths():
            self._logger.debug("Build list change was not persisted")
            return False
        return True

    def _move(self, from_index: int, to_index: int) -> bool:
        current = self.collection.value
        updated = build_order.move_scene(current, from_index, to_index)
        if updated is current:
            return False
        if not self._persist(updated, current):
            return False
        paths = self.collection.value.build_paths()
        self._logger.info("Moved build scene %d to gap %d", from_index, to_index)
        self._events.publish(
            OrderCommittedEvent(
                source="SceneListViewModel",
                from_index=from_index,
                to_index=to_index,
                paths=paths,
            )
        )
        self.order_committed.emit(from_index, to_index)
        return True

    def _publish(self, collection: WorkingCollection) -> None:
        self.collection.value = collection
        self.drag.revalidate(collection)
        self.summary.value = SceneSummary(collection.total_count, collection.build_count)
        self._update_visible()
        self.collection_changed.emit(collection)

    def _update_visible(self) -> None:
        self.visible.value = visible_entries(self.collection.value, self.search_text.value)

    def _on_error(self, event: ErrorOccurredEvent) -> None:
        self.error_occurred.emit(str(event.error))
