# hangul_corrector\core\domain\models.py
from enum import Enum
from typing import List, Union
from pydantic import BaseModel, Field

from hangul_corrector.core.domain.exceptions import InvalidSpeechLevelError

# --- Enums ---

class SpeechLevel(str, Enum):
    """Target speech register requested by the caller."""
    PLAIN = "banmal"        # 반말 (해체)
    POLITE = "jondaetmal"   # 존댓말 (해요체)

    @classmethod
    def parse(cls, value: Union["SpeechLevel", str]) -> "SpeechLevel":
        """
        Coerces a wire value ('banmal' / 'jondaetmal') into a SpeechLevel.
        Raises InvalidSpeechLevelError for anything else.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidSpeechLevelError(value) from None

class TimeHint(str, Enum):
    """Time reference of a sentence, derived from temporal adverbs."""
    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"
    NEUTRAL = "neutral"

# --- Value Objects ---

class CorrectionResult(BaseModel):
    """
    Output of the rule-based correction pass.
    Notes are in rule-application order, one per rule category that fired.
    """
    corrected: str
    notes: List[str] = Field(default_factory=list)
