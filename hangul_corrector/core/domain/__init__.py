# hangul_corrector\core\domain\__init__.py
"""
Domain Entities, Value Objects and Rules.

Every function in this package is a pure, synchronous string
transformation: no I/O, no logging, no shared mutable state.
"""

from .corrector import correct, explain
from .models import CorrectionResult, SpeechLevel, TimeHint
from .register import enforce_register

__all__ = [
    "correct",
    "explain",
    "enforce_register",
    "CorrectionResult",
    "SpeechLevel",
    "TimeHint",
]
