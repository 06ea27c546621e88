# hangul_corrector\core\ports\sentence_smoother.py
from abc import ABC, abstractmethod

from hangul_corrector.core.domain.models import SpeechLevel

class ISentenceSmoother(ABC):
    """
    Port for the external rewriting step that polishes a rule-corrected
    sentence for naturalness (typically a language model).
    Implementations:
    - PassthroughSmoother (returns the sentence unchanged)
    """

    @abstractmethod
    async def smooth(self, sentence: str, level: SpeechLevel) -> str:
        """
        Rewrites one sentence in the requested register.

        Args:
            sentence: Output of the rule-based correction pass.
            level: Target speech register.

        Returns:
            A single rewritten sentence. The caller still runs the register
            safety net on it, so adapters need not guarantee the ending.

        Raises:
            SmoothingError: If the rewriting step fails.
        """
        ...

    async def health_check(self) -> bool:
        """Returns True if the collaborator is reachable."""
        return True
