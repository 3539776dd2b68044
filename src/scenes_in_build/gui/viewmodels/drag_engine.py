"""State machine behind the drag-to-reorder gesture."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Sequence

from scenes_in_build.config import NO_DROP_TARGET, NOT_IN_BUILD
from scenes_in_build.domain.models import DragSession, ItemGeometry, WorkingCollection
from scenes_in_build.domain.services.drop_index import compute_insertion_index

from .signal import Signal


class DragState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class DragEngine:
    """Track one reorder gesture from pointer press to release.

    The engine never touches the working collection itself.  It reads the
    current collection through *collection_provider* and hands the final
    ``(source_index, insertion_index)`` pair to *commit*, which returns
    whether the build order actually changed.

    Signals:

    * ``drag_started(path, source_index)``
    * ``insertion_changed(index)``, ``NO_DROP_TARGET`` when nothing is under
      the pointer
    * ``drag_ended(committed)``, emitted for releases and cancellations
    """

    def __init__(
        self,
        collection_provider: Callable[[], WorkingCollection],
        commit: Callable[[int, int], bool],
    ) -> None:
        self._collection_provider = collection_provider
        self._commit = commit
        self._session: Optional[DragSession] = None
        self._logger = logging.getLogger(__name__)

        self.drag_started = Signal("drag_started")
        self.insertion_changed = Signal("insertion_changed")
        self.drag_ended = Signal("drag_ended")

    @property
    def state(self) -> DragState:
        return DragState.IDLE if self._session is None else DragState.DRAGGING

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    # ------------------------------------------------------------------
    # Gesture operations
    # ------------------------------------------------------------------
    def start_drag(self, path: str) -> bool:
        """Begin dragging the build member *path*; ignored for anything else."""

        if self._session is not None:
            self._logger.debug("Ignoring drag start for %s: already dragging", path)
            return False
        collection = self._collection_provider()
        # Rank by build order rather than the stored index, which may be stale.
        source_index = collection.position_in_build(path)
        if source_index == NOT_IN_BUILD:
            self._logger.debug("Ignoring drag start for %s: not in the build set", path)
            return False
        self._session = DragSession(
            source_path=path,
            source_index=source_index,
            collection_version=collection.version,
        )
        self.drag_started.emit(path, source_index)
        return True

    def update_drag(self, pointer_y: float, geometry: Sequence[ItemGeometry]) -> Optional[int]:
        """Recompute the insertion gap for *pointer_y*; ``None`` while idle."""

        if self._session is None:
            return None
        index = self._insertion_index(pointer_y, geometry)
        if index != self._session.insertion_index:
            self._session.insertion_index = index
            self.insertion_changed.emit(index)
        return index

    def end_drag(self, pointer_y: float, geometry: Sequence[ItemGeometry]) -> bool:
        """Finish the gesture and commit the move when it changes the order."""

        if self._session is None:
            return False
        if not self.revalidate(self._collection_provider()):
            return False

        final_index = self._insertion_index(pointer_y, geometry)
        session = self._session
        self._session = None

        committed = False
        if final_index != session.source_index and final_index >= 0:
            committed = bool(self._commit(session.source_index, final_index))
        self.drag_ended.emit(committed)
        return committed

    def cancel_drag(self) -> bool:
        """Abort the gesture without committing (pointer capture lost)."""

        if self._session is None:
            return False
        self._logger.debug("Drag of %s cancelled", self._session.source_path)
        self._session = None
        self.drag_ended.emit(False)
        return True

    def revalidate(self, collection: WorkingCollection) -> bool:
        """Re-anchor the session on *collection*; cancel it if it went stale.

        Returns ``True`` while a valid session remains.
        """

        session = self._session
        if session is None:
            return False
        if session.collection_version == collection.version:
            return True
        source_index = collection.position_in_build(session.source_path)
        if source_index == NOT_IN_BUILD:
            self._logger.info(
                "Cancelling drag: %s is no longer in the build set", session.source_path
            )
            self.cancel_drag()
            return False
        session.source_index = source_index
        session.collection_version = collection.version
        return True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _insertion_index(self, pointer_y: float, geometry: Sequence[ItemGeometry]) -> int:
        rank = compute_insertion_index(pointer_y, geometry)
        if rank == NO_DROP_TARGET:
            return NO_DROP_TARGET
        return self._rank_to_build_gap(rank, geometry)

    def _rank_to_build_gap(self, rank: int, geometry: Sequence[ItemGeometry]) -> int:
        """Map a gap between rendered rows onto a gap of the full build order."""

        anchor = geometry[rank] if rank < len(geometry) else geometry[-1]
        if not anchor.path:
            return rank
        position = self._collection_provider().position_in_build(anchor.path)
        if position == NOT_IN_BUILD:
            return rank
        return position if rank < len(geometry) else position + 1
