"""Main window of the Scenes In Build editor."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QMainWindow,
    QSizePolicy,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from ...appctx import AppContext
from ...config import SEARCH_FIELD_WIDTH, WINDOW_MIN_SIZE, WINDOW_TITLE
from ...domain.models import WorkingCollection
from ..viewmodels.scene_list_viewmodel import SceneListViewModel, SceneSummary
from .widgets.scene_list_view import SceneListView

_logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Toolbar, scene list and footer bound to a :class:`SceneListViewModel`."""

    def __init__(self, context: AppContext, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._context = context
        self._viewmodel: SceneListViewModel = context.viewmodel

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(*WINDOW_MIN_SIZE)
        self.resize(
            context.settings.get("ui.window_width", WINDOW_MIN_SIZE[0]),
            context.settings.get("ui.window_height", WINDOW_MIN_SIZE[1]),
        )

        toolbar = QToolBar(self)
        toolbar.setMovable(False)
        self.refresh_action = QAction("Refresh", self)
        self.refresh_action.triggered.connect(self._viewmodel.refresh)
        toolbar.addAction(self.refresh_action)
        spacer = QWidget(toolbar)
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        toolbar.addWidget(spacer)
        self.search_field = QLineEdit(toolbar)
        self.search_field.setPlaceholderText("Search scenes")
        self.search_field.setClearButtonEnabled(True)
        self.search_field.setFixedWidth(SEARCH_FIELD_WIDTH)
        toolbar.addWidget(self.search_field)
        self.addToolBar(toolbar)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        self.list_view = SceneListView(central)
        self.list_view.set_drag_threshold(int(context.settings.get("ui.drag_threshold", 5)))
        layout.addWidget(self.list_view, 1)
        self.footer_label = QLabel(central)
        self.footer_label.setObjectName("footerLabel")
        self.footer_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.footer_label.setContentsMargins(0, 2, 8, 2)
        layout.addWidget(self.footer_label)
        self.setCentralWidget(central)

        self._connect_viewmodel()
        self._connect_view()

        last_search = context.settings.get("ui.last_search", "") or ""
        if last_search:
            self.search_field.setText(last_search)
        self._render_entries(self._viewmodel.visible.value, None)
        self._render_summary(self._viewmodel.summary.value, None)

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------
    def _connect_viewmodel(self) -> None:
        vm = self._viewmodel
        vm.visible.changed.connect(self._render_entries)
        vm.summary.changed.connect(self._render_summary)
        vm.drag_started.connect(self._on_drag_started)
        vm.insertion_changed.connect(self.list_view.show_drop_indicator)
        vm.drag_ended.connect(self._on_drag_ended)
        vm.error_occurred.connect(self._on_error)
        vm.collection_changed.connect(self._on_collection_changed)

    def _connect_view(self) -> None:
        view = self.list_view
        vm = self._viewmodel
        view.toggled.connect(vm.set_membership)
        view.dragStarted.connect(vm.start_drag)
        view.dragMoved.connect(lambda y: vm.update_drag(y, view.build_geometry()))
        view.dragReleased.connect(lambda y: vm.end_drag(y, view.build_geometry()))
        view.dragCancelled.connect(vm.cancel_drag)
        view.revealRequested.connect(self.reveal_scene)
        self.search_field.textChanged.connect(vm.set_search_text)

    # ------------------------------------------------------------------
    # View-model callbacks
    # ------------------------------------------------------------------
    def _render_entries(self, entries, _old) -> None:
        self.list_view.set_entries(entries)

    def _render_summary(self, summary: SceneSummary, _old) -> None:
        self.footer_label.setText(summary.footer_text)

    def _on_drag_started(self, path: str, _source_index: int) -> None:
        self.list_view.set_drag_marker(path, True)

    def _on_drag_ended(self, _committed: bool) -> None:
        self.list_view.hide_drop_indicator()
        self.list_view.clear_drag_markers()

    def _on_collection_changed(self, collection: WorkingCollection) -> None:
        self.statusBar().clearMessage()
        _logger.debug("Showing %d scenes", collection.total_count)

    def _on_error(self, message: str) -> None:
        self.statusBar().showMessage(message, 8000)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def reveal_scene(self, scene_path: str) -> None:
        """Show the scene file in the platform's file manager."""

        path = Path(self._context.project_root) / scene_path
        if not path.exists():
            self.statusBar().showMessage(f"File not found: {scene_path}", 3000)
            return
        if sys.platform == "win32":
            subprocess.run(["explorer", "/select,", str(path)], check=False)
        elif sys.platform == "darwin":
            subprocess.run(["open", "-R", str(path)], check=False)
        else:
            subprocess.run(["xdg-open", str(path.parent)], check=False)

    # ------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------
    def changeEvent(self, event: QEvent) -> None:  # type: ignore[override]
        if event.type() == QEvent.Type.ActivationChange:
            if self.isActiveWindow():
                # Another tool may have edited the build list while we were away.
                self._viewmodel.refresh()
            elif self._viewmodel.is_dragging:
                self._viewmodel.cancel_drag()
        super().changeEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        self._viewmodel.cancel_drag()
        settings = self._context.settings
        settings.set("ui.last_search", self.search_field.text())
        settings.set("ui.window_width", max(self.width(), WINDOW_MIN_SIZE[0]))
        settings.set("ui.window_height", max(self.height(), WINDOW_MIN_SIZE[1]))
        self._viewmodel.dispose()
        super().closeEvent(event)
