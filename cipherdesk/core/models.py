# cipherdesk/core/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

DEFAULT_SHIFT = 3

class Algorithm(str, Enum):
    CAESAR = "caesar"
    ATBASH = "atbash"

class Action(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def coerce_algorithm(value) -> Algorithm:
    """Turns an enum member or its string value into an Algorithm, rejecting anything else."""
    try:
        return Algorithm(value)
    except ValueError:
        raise ValueError(f"Unsupported algorithm: {value!r} (expected one of {[a.value for a in Algorithm]})") from None

def coerce_action(value) -> Action:
    """Turns an enum member or its string value into an Action, rejecting anything else."""
    try:
        return Action(value)
    except ValueError:
        raise ValueError(f"Unsupported action: {value!r} (expected one of {[a.value for a in Action]})") from None


@dataclass
class CipherSettings:
    """Snapshot of the form state used for a single recomputation."""
    algorithm: Algorithm = Algorithm.CAESAR
    action: Action = Action.ENCRYPT
    shift: Optional[int] = DEFAULT_SHIFT # Only meaningful for Caesar
    use_custom_alphabet: bool = False
    custom_slots: List[str] = field(default_factory=lambda: [""])
    message: str = ""

    def __post_init__(self):
        # Invalid choices are rejected here, before they reach the engine
        self.algorithm = coerce_algorithm(self.algorithm)
        self.action = coerce_action(self.action)
        if self.shift is None:
            self.shift = DEFAULT_SHIFT
        self.custom_slots = list(self.custom_slots)

@dataclass
class CipherResult:
    """Result of one resolver + engine pass."""
    output: str
    alphabet: List[str] # The active alphabet the output was computed with
