"""Tests for core utilities."""

import pytest


def test_one_shot_event_queues_until_fired():
    from pyqt_listfield.core import OneShotEvent

    event = OneShotEvent("test")
    calls = []
    event.connect(lambda: calls.append(1))
    event.connect(lambda: calls.append(2))

    assert not event.is_set
    assert event.pending_count == 2
    assert calls == []

    event.fire()
    assert event.is_set
    assert calls == [1, 2]
    assert event.pending_count == 0


def test_one_shot_event_fires_once():
    from pyqt_listfield.core import OneShotEvent

    event = OneShotEvent()
    calls = []
    event.connect(lambda: calls.append("x"))
    event.fire()
    event.fire()
    assert calls == ["x"]


def test_one_shot_event_runs_late_handlers_immediately():
    from pyqt_listfield.core import OneShotEvent

    event = OneShotEvent()
    event.fire()
    calls = []
    event.connect(lambda: calls.append("late"))
    assert calls == ["late"]


def test_one_shot_event_handler_connecting_during_fire():
    from pyqt_listfield.core import OneShotEvent

    event = OneShotEvent()
    calls = []
    event.connect(lambda: event.connect(lambda: calls.append("inner")))
    event.connect(lambda: calls.append("outer"))
    event.fire()
    assert calls == ["inner", "outer"]


def test_reorderable_list_widget(qapp):
    """Test ReorderableListWidget creation and signal."""
    from pyqt_listfield.core import ReorderableListWidget

    widget = ReorderableListWidget()
    moves = []
    widget.items_reordered.connect(lambda src, dst: moves.append((src, dst)))
    widget.items_reordered.emit(0, 2)
    assert moves == [(0, 2)]


def _fake_internal_move(to_row):
    """Stand-in for QListWidget.dropEvent that moves the selected row."""

    def drop(self, event):
        item = self.selectedItems()[0]
        self.takeItem(self.row(item))
        self.insertItem(to_row, item)
        item.setSelected(True)

    return drop


def _filled_widget():
    from pyqt_listfield.core import ReorderableListWidget

    widget = ReorderableListWidget()
    widget.addItems(["a", "b", "c"])
    moves = []
    widget.items_reordered.connect(lambda src, dst: moves.append((src, dst)))
    return widget, moves


def test_drop_reports_moved_row(qapp, monkeypatch):
    from PyQt6.QtWidgets import QListWidget

    widget, moves = _filled_widget()
    monkeypatch.setattr(QListWidget, "dropEvent", _fake_internal_move(2))
    widget.item(0).setSelected(True)

    widget.dropEvent(None)

    assert [widget.item(row).text() for row in range(3)] == ["b", "c", "a"]
    assert moves == [(0, 2)]


def test_drop_in_place_reports_nothing(qapp, monkeypatch):
    from PyQt6.QtWidgets import QListWidget

    widget, moves = _filled_widget()
    monkeypatch.setattr(QListWidget, "dropEvent", _fake_internal_move(1))
    widget.item(1).setSelected(True)

    widget.dropEvent(None)
    assert moves == []


def test_drop_without_selection_reports_nothing(qapp, monkeypatch):
    from PyQt6.QtWidgets import QListWidget

    widget, moves = _filled_widget()
    dropped = []
    monkeypatch.setattr(QListWidget, "dropEvent", lambda self, event: dropped.append(event))

    widget.dropEvent("event")
    assert dropped == ["event"]
    assert moves == []
