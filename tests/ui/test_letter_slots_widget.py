# tests/ui/test_letter_slots_widget.py
import os

import pytest

# Widgets are never shown on screen here
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from cipherdesk.ui.widgets.letter_slots import LetterSlotsWidget

@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app

@pytest.fixture
def slots_widget(qapp):
    widget = LetterSlotsWidget()
    yield widget
    widget.deleteLater()

def _count_emits(signal) -> list:
    calls = []
    signal.connect(lambda *args: calls.append(args))
    return calls

def test_typing_fills_slot_and_appends_one(slots_widget):
    changes = _count_emits(slots_widget.letters_changed)
    slots_widget._editors[0].textEdited.emit("q")

    assert slots_widget.get_slots() == ["Q", ""]
    assert [editor.text() for editor in slots_widget._editors] == ["Q", ""]
    assert len(changes) == 1

def test_write_back_is_not_a_new_edit(slots_widget):
    editor = slots_widget._editors[0]
    text_changes = _count_emits(editor.textChanged)
    changes = _count_emits(slots_widget.letters_changed)

    editor.textEdited.emit("ab")

    # The normalized "A" is written with signals blocked
    assert text_changes == []
    assert len(changes) == 1
    assert slots_widget.get_slots() == ["A", ""]

def test_focus_moves_to_new_trailing_slot(qapp, slots_widget):
    slots_widget.show()
    qapp.processEvents()
    slots_widget._editors[0].textEdited.emit("x")
    assert slots_widget.focusWidget() is slots_widget._editors[1]

def test_editing_middle_slot_keeps_slot_count(qapp):
    widget = LetterSlotsWidget(["A", "B"])
    assert widget.get_slots() == ["A", "B", ""]
    widget._editors[0].textEdited.emit("zz")
    assert widget.get_slots() == ["Z", "B", ""]
    assert len(widget._editors) == 3
    widget.deleteLater()

def test_remove_buttons_disabled_for_single_slot(slots_widget):
    assert len(slots_widget._remove_buttons) == 1
    assert not slots_widget._remove_buttons[0].isEnabled()
    changes = _count_emits(slots_widget.letters_changed)
    slots_widget._remove_buttons[0].click()
    assert slots_widget.get_slots() == [""]
    assert changes == []

def test_remove_slot_rebuilds_editors(qapp):
    widget = LetterSlotsWidget(["A", "B"])
    changes = _count_emits(widget.letters_changed)
    widget._remove_buttons[0].click()
    assert widget.get_slots() == ["B", ""]
    assert [editor.text() for editor in widget._editors] == ["B", ""]
    assert len(changes) == 1
    widget.deleteLater()
