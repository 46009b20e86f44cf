# cipherdesk/core/alphabet.py
import string
from typing import List, Sequence

from loguru import logger

# Default ring used whenever no usable custom alphabet is available
DEFAULT_ALPHABET: List[str] = list(string.ascii_uppercase)

def resolve_alphabet(use_custom: bool, raw_slots: Sequence[str]) -> List[str]:
    """
    Returns the active alphabet for the current settings.

    Custom slots are uppercased and only single-character entries are kept,
    in their original order. Duplicates are not removed; lookups use the first
    occurrence. Falls back to A-Z when custom mode is off or nothing usable
    remains, so the result is never empty.
    """
    if not use_custom:
        return list(DEFAULT_ALPHABET)

    letters = [slot.upper() for slot in raw_slots]
    letters = [letter for letter in letters if len(letter) == 1]

    if not letters:
        logger.debug("Custom alphabet has no single-letter entries, using default alphabet.")
        return list(DEFAULT_ALPHABET)
    return letters

def format_alphabet(alphabet: Sequence[str], separator: str = " ") -> str:
    """Joins an alphabet for display."""
    return separator.join(alphabet)
