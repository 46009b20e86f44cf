# cipherdesk/core/cipher_engine.py
from typing import Optional, Sequence, Union

from loguru import logger

from .alphabet import resolve_alphabet
from .models import (Action, Algorithm, CipherResult, CipherSettings,
                     DEFAULT_SHIFT, coerce_action, coerce_algorithm)

def _shifted_index(algorithm: Algorithm, action: Action, shift: int, idx: int, n: int) -> int:
    """New position in a ring of size n."""
    if algorithm is Algorithm.CAESAR:
        if action is Action.ENCRYPT:
            return ((idx + shift) % n + n) % n
        return ((idx - shift) % n + n) % n
    # Atbash mirrors the ring and is its own inverse, so the action is ignored
    return (n - 1) - idx

def cipher(
    algorithm: Union[Algorithm, str],
    action: Union[Action, str],
    shift: Optional[int],
    alphabet: Sequence[str],
    message: str,
) -> str:
    """
    Substitutes every character of `message` found (case-insensitively) in
    `alphabet`. Other characters pass through unchanged, and the output always
    has the same length as the input.

    Raises ValueError for an algorithm or action outside the supported choices.
    """
    algorithm = coerce_algorithm(algorithm)
    action = coerce_action(action)
    if shift is None:
        shift = DEFAULT_SHIFT

    n = len(alphabet)
    if not message or n == 0:
        return ""

    # First occurrence wins for duplicate letters
    positions = {}
    for i, letter in enumerate(alphabet):
        positions.setdefault(letter, i)

    output = []
    for char in message:
        idx = positions.get(char.upper())
        if idx is None:
            output.append(char)
            continue

        new_char = alphabet[_shifted_index(algorithm, action, shift, idx, n)]
        # Preserve the case of the original character
        output.append(new_char.lower() if char == char.lower() else new_char)

    return "".join(output)

def compute_result(settings: CipherSettings) -> CipherResult:
    """Resolves the active alphabet for a settings snapshot, then runs the engine."""
    alphabet = resolve_alphabet(settings.use_custom_alphabet, settings.custom_slots)
    output = cipher(settings.algorithm, settings.action, settings.shift, alphabet, settings.message)
    logger.debug(
        f"Computed {settings.algorithm.value}/{settings.action.value} (shift={settings.shift}) "
        f"over {len(alphabet)} letters: {len(settings.message)} chars in, {len(output)} out."
    )
    return CipherResult(output=output, alphabet=alphabet)
