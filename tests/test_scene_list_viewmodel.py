"""Tests for SceneListViewModel, the owner of the working collection."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from scenes_in_build.application.services.build_list_service import BuildListService
from scenes_in_build.domain.models import ItemGeometry
from scenes_in_build.domain.repositories import IBuildListStore
from scenes_in_build.errors import BuildListReadError, BuildListWriteError
from scenes_in_build.errors.handler import ErrorOccurredEvent, ErrorSeverity
from scenes_in_build.events.scene_events import MembershipChangedEvent, OrderCommittedEvent
from scenes_in_build.gui.viewmodels.scene_list_viewmodel import SceneListViewModel, SceneSummary

S1, S2, S3, S4 = (f"Assets/S{i}.unity" for i in range(1, 5))
BOSS = "Assets/Levels/Boss.unity"


@pytest.fixture
def vm(service, event_bus):
    viewmodel = SceneListViewModel(service, event_bus)
    viewmodel.refresh()
    return viewmodel


def _geometry(vm):
    rows = [entry for entry in vm.visible.value if entry.is_in_build]
    return [ItemGeometry(top=i * 36, height=36, path=entry.path) for i, entry in enumerate(rows)]


def test_refresh_populates_collection_and_summary(vm):
    assert vm.collection.value.build_paths() == [S1, S2, S3]
    assert vm.summary.value == SceneSummary(total=5, in_build=3)
    assert vm.summary.value.footer_text == "Total: 5 | In Build: 3"
    assert len(vm.visible.value) == 5


def test_refresh_picks_up_external_edits(vm, store):
    store.write([S3, S1])

    vm.refresh()

    assert vm.collection.value.build_paths() == [S3, S1]
    assert vm.summary.value.in_build == 2


def test_adding_scene_persists_and_notifies(vm, store, event_bus):
    changes = []
    events = []
    vm.membership_changed.connect(lambda *args: changes.append(args))
    event_bus.subscribe(MembershipChangedEvent, events.append)

    assert vm.set_membership(S4, True) is True

    assert store.read() == [S1, S2, S3, S4]
    assert vm.entry(S4).build_index == 3
    assert changes == [(S4, True, 3)]
    assert events[0].path == S4 and events[0].is_in_build
    assert vm.summary.value.footer_text == "Total: 5 | In Build: 4"


def test_removing_scene_renumbers_followers(vm, store):
    assert vm.set_membership(S2, False) is True

    assert store.read() == [S1, S3]
    assert vm.entry(S3).build_index == 1
    assert not vm.entry(S2).is_in_build


def test_redundant_membership_change_does_not_write(vm, store):
    writes = store.write_count

    assert vm.set_membership(S1, True) is False
    assert vm.set_membership(S4, False) is False
    assert store.write_count == writes


def test_move_scene_persists_new_order(vm, store, event_bus):
    committed = []
    events = []
    vm.order_committed.connect(lambda *args: committed.append(args))
    event_bus.subscribe(OrderCommittedEvent, events.append)

    assert vm.move_scene(2, 0) is True

    assert store.read() == [S3, S1, S2]
    assert committed == [(2, 0)]
    assert events[0].paths == [S3, S1, S2]


def test_move_into_own_gap_is_ignored(vm, store):
    writes = store.write_count

    assert vm.move_scene(1, 2) is False
    assert store.write_count == writes


@pytest.fixture
def read_only_vm(inventory, event_bus):
    store = Mock(spec=IBuildListStore)
    store.read.return_value = [S1, S2]
    store.write.side_effect = BuildListWriteError("read-only file system")
    vm = SceneListViewModel(BuildListService(inventory, store, event_bus), event_bus)
    vm.refresh()
    return vm


def test_failed_write_restores_persisted_state(read_only_vm, event_bus):
    vm = read_only_vm
    messages = []
    changes = []
    events = []
    vm.error_occurred.connect(messages.append)
    vm.membership_changed.connect(lambda *args: changes.append(args))
    event_bus.subscribe(MembershipChangedEvent, events.append)

    assert vm.set_membership(S4, True) is False

    assert vm.collection.value.build_paths() == [S1, S2]
    assert not vm.entry(S4).is_in_build
    assert messages == ["read-only file system"]
    assert changes == []
    assert events == []


def test_failed_write_does_not_confirm_move(read_only_vm, event_bus):
    vm = read_only_vm
    committed = []
    events = []
    vm.order_committed.connect(lambda *args: committed.append(args))
    event_bus.subscribe(OrderCommittedEvent, events.append)

    assert vm.move_scene(1, 0) is False

    assert vm.collection.value.build_paths() == [S1, S2]
    assert committed == []
    assert events == []


def test_failed_write_ends_drag_uncommitted(read_only_vm):
    vm = read_only_vm
    ended = []
    vm.drag_ended.connect(ended.append)
    vm.start_drag(S2)

    assert vm.end_drag(0, _geometry(vm)) is False

    assert ended == [False]
    assert vm.collection.value.build_paths() == [S1, S2]


def test_unreadable_store_keeps_last_good_collection(vm, store, event_bus):
    before = vm.collection.value
    store.read = Mock(side_effect=BuildListReadError("locked"))
    messages = []
    vm.error_occurred.connect(messages.append)

    vm.refresh()

    assert vm.collection.value is before
    assert messages == ["locked"]


def test_search_filters_visible_entries(vm):
    vm.set_search_text("boss")

    assert [entry.path for entry in vm.visible.value] == [BOSS]
    assert vm.summary.value.total == 5

    vm.set_search_text("")
    assert len(vm.visible.value) == 5


def test_search_survives_collection_changes(vm):
    vm.set_search_text("boss")
    vm.set_membership(S4, True)

    assert [entry.path for entry in vm.visible.value] == [BOSS]
    assert vm.search_text.value == "boss"


def test_reentrant_mutation_is_ignored(vm, store):
    results = []

    def _nested(_collection):
        results.append(vm.set_membership(S2, False))

    vm.collection_changed.connect(_nested)
    vm.set_membership(S4, True)
    vm.collection_changed.disconnect(_nested)

    assert results == [False]
    assert store.read() == [S1, S2, S3, S4]


def test_drag_gesture_commits_through_viewmodel(vm, store):
    ended = []
    vm.drag_ended.connect(ended.append)

    assert vm.start_drag(S3) is True
    assert vm.is_dragging
    assert vm.update_drag(0, _geometry(vm)) == 0
    assert vm.end_drag(0, _geometry(vm)) is True

    assert store.read() == [S3, S1, S2]
    assert ended == [True]
    assert not vm.is_dragging


def test_drag_is_cancelled_when_source_leaves_build(vm, store):
    ended = []
    vm.drag_ended.connect(ended.append)
    vm.start_drag(S2)

    store.write([S1, S3])
    vm.refresh()

    assert not vm.is_dragging
    assert ended == [False]


def test_cancel_drag_never_commits(vm, store):
    writes = store.write_count
    vm.start_drag(S1)
    vm.update_drag(200, _geometry(vm))

    assert vm.cancel_drag() is True
    assert store.write_count == writes


def test_dispose_stops_error_forwarding(vm, event_bus):
    messages = []
    vm.error_occurred.connect(messages.append)
    vm.dispose()

    event_bus.publish(ErrorOccurredEvent(error=RuntimeError("late"), severity=ErrorSeverity.ERROR))

    assert messages == []


def test_release_just_below_source_is_not_a_commit(vm, store):
    ended = []
    vm.drag_ended.connect(ended.append)
    writes = store.write_count
    vm.start_drag(S1)

    # Gap 1 lies between S1 and S2, which leaves the order as it is.
    assert vm.end_drag(40, _geometry(vm)) is False

    assert ended == [False]
    assert store.write_count == writes
    assert not vm.is_dragging
