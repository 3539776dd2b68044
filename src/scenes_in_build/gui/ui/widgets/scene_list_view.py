"""Scrollable list of scene rows with a drop indicator."""

from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QPointF, Signal
from PySide6.QtWidgets import QFrame, QScrollArea, QVBoxLayout, QWidget

from ....config import DRAG_START_THRESHOLD_PX, DROP_INDICATOR_HEIGHT
from ....domain.models import ItemGeometry, SceneEntry
from .scene_item import SceneItem


class SceneListView(QScrollArea):
    """Host the :class:`SceneItem` rows and translate their drag gestures.

    Row drag positions are re-emitted in the coordinate space of the row
    container, the same space :meth:`build_geometry` reports row extents in.
    :attr:`dragCancelled` fires when the row holding a drag goes away.
    """

    toggled = Signal(str, bool)
    dragStarted = Signal(str)
    dragMoved = Signal(float)
    dragReleased = Signal(float)
    dragCancelled = Signal()
    revealRequested = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("sceneListView")
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.Shape.NoFrame)

        self._container = QWidget(self)
        self._layout = QVBoxLayout(self._container)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(0)
        self._layout.addStretch(1)
        self.setWidget(self._container)

        self._drop_indicator = QFrame(self._container)
        self._drop_indicator.setObjectName("dropIndicator")
        self._drop_indicator.setStyleSheet("background-color: rgb(51, 153, 255);")
        self._drop_indicator.setFixedHeight(DROP_INDICATOR_HEIGHT)
        self._drop_indicator.hide()

        self._rows: list[SceneItem] = []
        self._drag_threshold = DRAG_START_THRESHOLD_PX

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------
    def rows(self) -> list[SceneItem]:
        return list(self._rows)

    def set_drag_threshold(self, pixels: int) -> None:
        self._drag_threshold = pixels

    def set_entries(self, entries: Sequence[SceneEntry]) -> None:
        """Replace every row with one per entry of *entries*."""

        interrupted = any(row.is_dragging for row in self._rows)
        for row in self._rows:
            row.reset_gesture()
            self._layout.removeWidget(row)
            row.hide()
            # The row may be the sender of the signal that led here.
            row.deleteLater()
        self._rows = []
        for position, entry in enumerate(entries):
            row = SceneItem(entry, self._container, drag_threshold=self._drag_threshold)
            row.toggled.connect(self.toggled)
            row.revealRequested.connect(self.revealRequested)
            row.dragStarted.connect(self.dragStarted)
            row.dragMoved.connect(self._on_row_drag_moved)
            row.dragReleased.connect(self._on_row_drag_released)
            row.dragCancelled.connect(self._on_row_drag_cancelled)
            self._layout.insertWidget(position, row)
            self._rows.append(row)
        self.hide_drop_indicator()
        self._drop_indicator.raise_()
        if interrupted:
            self.dragCancelled.emit()

    def row_for(self, path: str) -> Optional[SceneItem]:
        for row in self._rows:
            if row.entry.path == path:
                return row
        return None

    # ------------------------------------------------------------------
    # Drag support
    # ------------------------------------------------------------------
    def build_geometry(self) -> list[ItemGeometry]:
        """Return the extents of the rendered build rows in build order."""

        build_rows = [row for row in self._rows if row.entry.is_in_build]
        build_rows.sort(key=lambda row: row.entry.build_index)
        return [
            ItemGeometry(top=float(row.y()), height=float(row.height()), path=row.entry.path)
            for row in build_rows
        ]

    def set_drag_marker(self, path: str, active: bool) -> None:
        row = self.row_for(path)
        if row is not None:
            row.set_drag_marker(active)

    def clear_drag_markers(self) -> None:
        for row in self._rows:
            row.set_drag_marker(False)
            row.reset_gesture()

    def show_drop_indicator(self, build_gap: int) -> None:
        """Place the indicator at gap *build_gap* of the full build order."""

        if build_gap < 0:
            self.hide_drop_indicator()
            return
        build_rows = [row for row in self._rows if row.entry.is_in_build]
        if not build_rows:
            self.hide_drop_indicator()
            return
        build_rows.sort(key=lambda row: row.entry.build_index)
        top = None
        for row in build_rows:
            if row.entry.build_index >= build_gap:
                top = row.y()
                break
        if top is None:
            last = build_rows[-1]
            top = last.y() + last.height()
        self._drop_indicator.setGeometry(0, int(top), self._container.width(), DROP_INDICATOR_HEIGHT)
        self._drop_indicator.show()
        self._drop_indicator.raise_()

    def hide_drop_indicator(self) -> None:
        self._drop_indicator.hide()

    def is_drop_indicator_visible(self) -> bool:
        return not self._drop_indicator.isHidden()

    def map_global_y(self, global_pos: QPointF) -> float:
        return float(self._container.mapFromGlobal(global_pos.toPoint()).y())

    def _on_row_drag_moved(self, global_pos: QPointF) -> None:
        self.dragMoved.emit(self.map_global_y(global_pos))

    def _on_row_drag_released(self, global_pos: QPointF) -> None:
        self.dragReleased.emit(self.map_global_y(global_pos))

    def _on_row_drag_cancelled(self, _path: str) -> None:
        self.dragCancelled.emit()
