# tests/core/test_letter_slots.py
import pytest

from cipherdesk.core.letter_slots import edit_slot, initial_slots, normalize_letter, remove_slot

@pytest.mark.parametrize("raw, expected", [
    ("q", "Q"),
    ("", ""),
    ("ab", "A"),
    ("xyz", "X"),
    ("7", "7"),
])
def test_normalize_letter(raw, expected):
    assert normalize_letter(raw) == expected

def test_initial_slots():
    assert initial_slots() == [""]

def test_typing_into_last_slot_appends_empty_slot():
    assert edit_slot([""], 0, "Q") == ["Q", ""]

def test_lowercase_input_is_uppercased():
    assert edit_slot([""], 0, "q") == ["Q", ""]

def test_editing_middle_slot_does_not_grow():
    assert edit_slot(["A", "B", ""], 0, "z") == ["Z", "B", ""]

def test_clearing_last_slot_does_not_grow():
    assert edit_slot(["A", "B"], 1, "") == ["A", ""]

def test_multi_character_input_keeps_first():
    assert edit_slot(["A", ""], 1, "cd") == ["A", "C", ""]

def test_edit_does_not_mutate_input():
    slots = [""]
    edit_slot(slots, 0, "Q")
    assert slots == [""]

def test_edit_out_of_range():
    with pytest.raises(IndexError):
        edit_slot(["A"], 3, "B")

def test_remove_slot():
    assert remove_slot(["A", "B", ""], 1) == ["A", ""]

def test_remove_only_slot_is_noop():
    assert remove_slot(["A"], 0) == ["A"]
    assert remove_slot([""], 0) == [""]

def test_slot_count_never_drops_below_one():
    slots = ["A", "B", "C"]
    for _ in range(5):
        slots = remove_slot(slots, 0)
    assert slots == ["C"]

def test_remove_out_of_range():
    with pytest.raises(IndexError):
        remove_slot(["A", "B"], 2)
