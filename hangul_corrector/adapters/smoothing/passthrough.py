# hangul_corrector\adapters\smoothing\passthrough.py
import structlog

from hangul_corrector.core.domain.models import SpeechLevel
from hangul_corrector.core.ports.sentence_smoother import ISentenceSmoother

logger = structlog.get_logger()

class PassthroughSmoother(ISentenceSmoother):
    """
    Driven Adapter used when no rewriting model is configured.
    The register safety net alone shapes the final sentence.
    """

    async def smooth(self, sentence: str, level: SpeechLevel) -> str:
        logger.debug("smoothing_skipped", adapter="passthrough", level=level.value)
        return sentence
