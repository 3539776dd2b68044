"""Integration tests for the editor main window."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for GUI tests", exc_type=ImportError)
pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)

from PySide6.QtCore import QEvent, QPoint, QPointF, Qt
from PySide6.QtGui import QMouseEvent
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from scenes_in_build.appctx import AppContext
from scenes_in_build.gui.ui.main_window import MainWindow
from scenes_in_build.infrastructure.inventory import StaticInventoryProvider
from scenes_in_build.infrastructure.stores import InMemoryBuildListStore
from scenes_in_build.settings import SettingsManager

S1, S2, S3 = "Assets/S1.unity", "Assets/S2.unity", "Assets/Levels/Boss.unity"


@pytest.fixture
def context(tmp_path: Path) -> AppContext:
    settings = SettingsManager(path=tmp_path / "settings.json")
    settings.load()
    context = AppContext(
        project_root=tmp_path,
        settings=settings,
        store=InMemoryBuildListStore([S1, S2]),
        inventory=StaticInventoryProvider([S1, S2, S3]),
    )
    context.viewmodel.refresh()
    return context


@pytest.fixture
def window(qtbot, context: AppContext) -> MainWindow:
    window = MainWindow(context)
    qtbot.addWidget(window)
    return window


def test_window_renders_collection(window: MainWindow) -> None:
    assert len(window.list_view.rows()) == 3
    assert window.footer_label.text() == "Total: 3 | In Build: 2"


def test_checkbox_toggle_updates_store_and_footer(window: MainWindow, context: AppContext) -> None:
    row = window.list_view.row_for(S3)

    row.checkbox.setChecked(True)

    assert context.store.read() == [S1, S2, S3]
    assert window.footer_label.text() == "Total: 3 | In Build: 3"
    assert window.list_view.row_for(S3).index_label.text() == "[2]"


def test_search_field_filters_rows(window: MainWindow) -> None:
    window.search_field.setText("boss")

    assert [row.entry.path for row in window.list_view.rows()] == [S3]
    assert window.footer_label.text() == "Total: 3 | In Build: 2"


def test_drag_signals_drive_reorder(window: MainWindow, context: AppContext) -> None:
    view = window.list_view
    window.show()
    view.dragStarted.emit(S2)
    view.dragMoved.emit(-10.0)
    assert view.is_drop_indicator_visible()

    view.dragReleased.emit(-10.0)

    assert context.store.read() == [S2, S1]
    assert not view.is_drop_indicator_visible()


def test_close_saves_search_text(window: MainWindow, context: AppContext) -> None:
    window.search_field.setText("cave")

    window.close()

    assert context.settings.get("ui.last_search") == "cave"


def test_missing_reveal_target_reports_status(window: MainWindow) -> None:
    window.reveal_scene("Assets/Gone.unity")

    assert "File not found" in window.statusBar().currentMessage()


def _drag_row(row, dy: int = 30) -> None:
    QTest.mousePress(row, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, QPoint(5, 5))
    local = QPointF(5, 5 + dy)
    move = QMouseEvent(
        QEvent.Type.MouseMove,
        local,
        QPointF(row.mapToGlobal(local.toPoint())),
        Qt.MouseButton.NoButton,
        Qt.MouseButton.LeftButton,
        Qt.KeyboardModifier.NoModifier,
    )
    QApplication.sendEvent(row, move)


def test_deactivation_cancels_drag(window: MainWindow, context: AppContext) -> None:
    vm = context.viewmodel
    writes = context.store.write_count
    _drag_row(window.list_view.row_for(S1))
    assert vm.is_dragging
    assert window.list_view.is_drop_indicator_visible()

    QApplication.sendEvent(window, QEvent(QEvent.Type.ActivationChange))

    assert not window.isActiveWindow()
    assert not vm.is_dragging
    assert not window.list_view.is_drop_indicator_visible()
    assert context.store.write_count == writes


def test_row_rebuild_mid_drag_cancels_and_allows_new_drag(
    window: MainWindow, context: AppContext
) -> None:
    vm = context.viewmodel
    _drag_row(window.list_view.row_for(S1))
    assert vm.is_dragging
    context.store.write([S2, S1])
    writes = context.store.write_count

    window.refresh_action.trigger()

    assert not vm.is_dragging
    assert not window.list_view.is_drop_indicator_visible()
    assert context.store.write_count == writes

    _drag_row(window.list_view.row_for(S1))
    assert vm.is_dragging
    assert vm.drag.session.source_path == S1
    assert vm.drag.session.source_index == 1
