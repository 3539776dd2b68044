"""Row widget representing one scene of the list."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtGui import QEnterEvent, QMouseEvent
from PySide6.QtWidgets import (
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from ....config import DRAG_HANDLE_WIDTH, DRAG_START_THRESHOLD_PX, INDEX_LABEL_WIDTH, ROW_HEIGHT
from ....domain.models import SceneEntry

_ROW_STYLE = """
SceneItem[hovered="true"] { background-color: rgba(128, 128, 128, 60); }
SceneItem[dragging="true"] { background-color: rgba(51, 153, 255, 70); }
QLabel#sceneIndexLabel, QLabel#sceneDirectoryLabel { color: #8c8c8c; }
QLabel#sceneDirectoryLabel { font-size: 10px; }
QFrame#dragHandleLine { background-color: #666666; }
"""


class SceneItem(QFrame):
    """Display a scene with its build index, a membership toggle and its path.

    Build members can be dragged: a left-button press followed by a movement
    longer than ``drag_threshold`` pixels emits :attr:`dragStarted`, further
    movement :attr:`dragMoved` and the release :attr:`dragReleased`.  Positions
    are global so the owning list can map them into its own coordinates.
    Hiding the row in the middle of a drag emits :attr:`dragCancelled`, since
    the release will never reach it.
    """

    toggled = Signal(str, bool)
    dragStarted = Signal(str)
    dragMoved = Signal(QPointF)
    dragReleased = Signal(QPointF)
    dragCancelled = Signal(str)
    revealRequested = Signal(str)

    def __init__(
        self,
        entry: SceneEntry,
        parent: Optional[QWidget] = None,
        drag_threshold: int = DRAG_START_THRESHOLD_PX,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("sceneItem")
        self.setFixedHeight(ROW_HEIGHT)
        self.setStyleSheet(_ROW_STYLE)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        self._entry = entry
        self._drag_threshold = drag_threshold
        self._press_pos: Optional[QPointF] = None
        self._dragging = False

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 0, 4, 0)
        layout.setSpacing(4)

        layout.addWidget(self._create_drag_handle(entry.is_in_build))

        self.index_label = QLabel(f"[{entry.build_index}]" if entry.is_in_build else "[-]", self)
        self.index_label.setObjectName("sceneIndexLabel")
        self.index_label.setFixedWidth(INDEX_LABEL_WIDTH)
        layout.addWidget(self.index_label)

        self.checkbox = QCheckBox(self)
        self.checkbox.setChecked(entry.is_in_build)
        self.checkbox.toggled.connect(self._on_checkbox_toggled)
        layout.addWidget(self.checkbox)

        text_column = QVBoxLayout()
        text_column.setContentsMargins(0, 0, 0, 0)
        text_column.setSpacing(0)
        self.name_label = QLabel(entry.file_name, self)
        self.name_label.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Preferred)
        self.directory_label = QLabel(entry.directory, self)
        self.directory_label.setObjectName("sceneDirectoryLabel")
        self.directory_label.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Preferred)
        text_column.addWidget(self.name_label)
        text_column.addWidget(self.directory_label)
        layout.addLayout(text_column, 1)

        self.setToolTip(entry.path)
        if entry.is_in_build:
            self.setCursor(Qt.CursorShape.OpenHandCursor)

    @property
    def entry(self) -> SceneEntry:
        return self._entry

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    def set_drag_marker(self, active: bool) -> None:
        """Toggle the visual marker shown while this row is being dragged."""

        self._set_style_flag("dragging", active)

    def reset_gesture(self) -> None:
        self._press_pos = None
        self._dragging = False

    # ------------------------------------------------------------------
    # Qt event handlers
    # ------------------------------------------------------------------
    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton and self._entry.is_in_build:
            self._press_pos = event.position()
            self._dragging = False
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if self._press_pos is None or not (event.buttons() & Qt.MouseButton.LeftButton):
            super().mouseMoveEvent(event)
            return
        if not self._dragging:
            delta = event.position() - self._press_pos
            if (delta.x() ** 2 + delta.y() ** 2) ** 0.5 <= self._drag_threshold:
                return
            self._dragging = True
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
            self.dragStarted.emit(self._entry.path)
        self.dragMoved.emit(event.globalPosition())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if self._press_pos is None:
            super().mouseReleaseEvent(event)
            return
        was_dragging = self._dragging
        self.reset_gesture()
        if self._entry.is_in_build:
            self.setCursor(Qt.CursorShape.OpenHandCursor)
        if was_dragging:
            self.dragReleased.emit(event.globalPosition())

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self.revealRequested.emit(self._entry.path)
            return
        super().mouseDoubleClickEvent(event)

    def hideEvent(self, event) -> None:  # type: ignore[override]
        if self._dragging:
            self.reset_gesture()
            self.dragCancelled.emit(self._entry.path)
        super().hideEvent(event)

    def enterEvent(self, event: QEnterEvent) -> None:  # type: ignore[override]
        self._set_style_flag("hovered", True)
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:  # type: ignore[override]
        self._set_style_flag("hovered", False)
        super().leaveEvent(event)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _on_checkbox_toggled(self, checked: bool) -> None:
        self.toggled.emit(self._entry.path, checked)

    def _create_drag_handle(self, visible: bool) -> QWidget:
        handle = QWidget(self)
        handle.setFixedSize(DRAG_HANDLE_WIDTH, 10)
        column = QVBoxLayout(handle)
        column.setContentsMargins(0, 0, 0, 0)
        column.setSpacing(2)
        if visible:
            for _ in range(3):
                line = QFrame(handle)
                line.setObjectName("dragHandleLine")
                line.setFixedSize(12, 2)
                column.addWidget(line)
        return handle

    def _set_style_flag(self, name: str, value: bool) -> None:
        self.setProperty(name, "true" if value else "false")
        self.style().unpolish(self)
        self.style().polish(self)
