# cipherdesk/config/schema.py
from typing import List

from pydantic import BaseModel, Field, field_validator

from ..core.models import Action, Algorithm, DEFAULT_SHIFT

class AppConfig(BaseModel):
    # Initial form values
    default_algorithm: Algorithm = Algorithm.CAESAR
    default_action: Action = Action.ENCRYPT
    default_shift: int = DEFAULT_SHIFT
    default_custom_alphabet: List[str] = Field(default_factory=list) # Pre-filled letter slots, empty = A-Z

    # UI
    copied_indicator_ms: int = Field(default=2000, ge=0) # How long "Copied!" stays visible
    window_width: int = Field(default=720, gt=0)
    window_height: int = Field(default=560, gt=0)

    # Logging
    log_level: str = "INFO"
    log_retention: str = "7 days"

    @field_validator("default_custom_alphabet")
    @classmethod
    def _single_letters(cls, letters: List[str]) -> List[str]:
        # Same shape the letter editor produces: one uppercase character per slot
        return [letter.upper() for letter in letters if len(letter) == 1]

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, level: str) -> str:
        return level.upper()
