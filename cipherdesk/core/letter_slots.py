# cipherdesk/core/letter_slots.py
"""
Editing rules for the custom alphabet letter slots.

The UI owns the actual widgets; these helpers only compute the next slot
list. Inputs are never mutated.
"""
from typing import List, Sequence

from loguru import logger

def initial_slots() -> List[str]:
    """A fresh editor always starts with a single empty slot."""
    return [""]

def normalize_letter(raw: str) -> str:
    """Keeps at most one character and uppercases it."""
    if len(raw) > 1:
        return raw[0].upper()
    return raw.upper()

def edit_slot(slots: Sequence[str], index: int, raw: str) -> List[str]:
    """
    Writes the normalized value into slot `index` and returns the new list.

    When the last slot receives exactly one character a trailing empty slot
    is appended, so there is always room to type the next letter.
    """
    if index < 0 or index >= len(slots):
        raise IndexError(f"Slot index {index} out of range for {len(slots)} slots")

    updated = list(slots)
    value = normalize_letter(raw)
    updated[index] = value

    if index == len(updated) - 1 and len(value) == 1:
        updated.append("")
        logger.trace(f"Slot {index} filled with '{value}', appended empty slot ({len(updated)} total).")
    return updated

def remove_slot(slots: Sequence[str], index: int) -> List[str]:
    """Removes slot `index` unless it is the last remaining slot."""
    updated = list(slots)
    if len(updated) <= 1:
        logger.debug("Refusing to remove the only remaining letter slot.")
        return updated
    if index < 0 or index >= len(updated):
        raise IndexError(f"Slot index {index} out of range for {len(updated)} slots")
    del updated[index]
    return updated
