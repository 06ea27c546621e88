# hangul_corrector/core/domain/corrector.py
"""
Rule-based correction pass.

Pipeline (fixed order):
    1. whitespace normalization
    2. particle correction          -> PARTICLE_NOTE
    3. time classification + tense  -> PAST_TENSE_NOTE / FUTURE_TENSE_NOTE
    4. terminal punctuation

Pure function of its input; safe to call concurrently or behind a memoizer.
"""

from typing import List

from hangul_corrector.core.domain.models import CorrectionResult, TimeHint
from hangul_corrector.core.domain.morphology.particles import correct_particles
from hangul_corrector.core.domain.normalization import ensure_terminal_mark, normalize_spaces
from hangul_corrector.core.domain.tense import classify_time, enforce_tense

PARTICLE_NOTE = "조사를 받침 규칙에 맞게 수정했어요."
PAST_TENSE_NOTE = "시간 부사(예: 어제)에 맞춰 과거 시제로 바꿨어요."
FUTURE_TENSE_NOTE = "시간 부사(예: 내일)에 맞춰 미래 시제로 바꿨어요."

TENSE_NOTES = {
    TimeHint.PAST: PAST_TENSE_NOTE,
    TimeHint.FUTURE: FUTURE_TENSE_NOTE,
}


def correct(raw_text: str) -> CorrectionResult:
    """
    Run the rule-based pass over `raw_text`.

    Returns the corrected sentence and one note per rule category that
    changed it (particles first, then tense). Empty input yields an empty
    result with no notes and no added punctuation.
    """
    notes: List[str] = []
    sentence = normalize_spaces(raw_text or "")
    if not sentence:
        return CorrectionResult(corrected="", notes=notes)

    before = sentence
    sentence = correct_particles(sentence)
    if sentence != before:
        notes.append(PARTICLE_NOTE)

    hint = classify_time(sentence)
    before = sentence
    sentence = enforce_tense(sentence, hint)
    if sentence != before and hint in TENSE_NOTES:
        notes.append(TENSE_NOTES[hint])

    return CorrectionResult(corrected=ensure_terminal_mark(sentence), notes=notes)


def explain(raw_text: str) -> List[str]:
    """Notes that `correct` would attach to `raw_text`, without the sentence."""
    return correct(raw_text).notes
