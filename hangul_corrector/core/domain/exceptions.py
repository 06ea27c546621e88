# hangul_corrector/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class InvalidSpeechLevelError(DomainError):
    """Raised when a speech level value is neither 'banmal' nor 'jondaetmal'."""
    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Speech level '{value}' is not supported. Expected 'banmal' or 'jondaetmal'."
        )

# --- Collaborator Errors ---

class SmoothingError(DomainError):
    """Raised by a sentence smoother adapter when the rewriting step fails."""
    def __init__(self, reason: str):
        super().__init__(f"Sentence smoothing failed: {reason}")
