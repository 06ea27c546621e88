# hangul_corrector/core/use_cases/correct_sentence.py
import structlog
from typing import Union

from hangul_corrector.core.domain.corrector import correct
from hangul_corrector.core.domain.models import CorrectionResult, SpeechLevel
from hangul_corrector.core.domain.register import enforce_register
from hangul_corrector.core.ports.sentence_smoother import ISentenceSmoother
from hangul_corrector.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

class CorrectSentence:
    """
    Use Case: Corrects one Korean sentence and renders it in a speech register.

    Responsibilities:
    1. Runs the rule-based pass (particles, tense) and collects notes.
    2. Hands the result to the smoothing Port for a naturalness rewrite.
    3. Falls back to the rule output if the smoother fails.
    4. Applies the register safety net to whatever candidate survives.
    """

    def __init__(self, smoother: ISentenceSmoother):
        self.smoother = smoother

    async def execute(self, text: str, level: Union[SpeechLevel, str]) -> CorrectionResult:
        """
        Args:
            text: Raw user sentence (possibly straight from speech-to-text).
            level: Target register, as a SpeechLevel or its wire value.

        Returns:
            CorrectionResult whose `corrected` is the final sentence and whose
            `notes` describe the rule categories that fired.

        Raises:
            InvalidSpeechLevelError: If `level` cannot be parsed.
        """
        level = SpeechLevel.parse(level)
        text = (text or "").strip()
        if not text:
            return CorrectionResult(corrected="", notes=[])

        with tracer.start_as_current_span("use_case.correct_sentence") as span:
            span.set_attribute("app.speech_level", level.value)
            span.set_attribute("app.input_length", len(text))

            logger.info("correction_started", level=level.value, length=len(text))

            base = correct(text)
            candidate = await self._smooth(base.corrected, level)
            final = enforce_register(candidate, level)

            span.set_attribute("app.notes_count", len(base.notes))
            logger.info(
                "correction_finished",
                level=level.value,
                notes=len(base.notes),
                text_preview=final[:50],
            )
            return CorrectionResult(corrected=final, notes=base.notes)

    async def _smooth(self, sentence: str, level: SpeechLevel) -> str:
        """
        Calls the smoother, returning `sentence` itself when the collaborator
        fails or answers with nothing.
        """
        try:
            smoothed = await self.smoother.smooth(sentence, level)
        except Exception as e:
            logger.warning("smoothing_failed", error=str(e), fallback="rule_output")
            return sentence

        smoothed = (smoothed or "").strip()
        if not smoothed:
            logger.warning("smoothing_empty", fallback="rule_output")
            return sentence
        return smoothed
