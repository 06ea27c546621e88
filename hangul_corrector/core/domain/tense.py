# hangul_corrector/core/domain/tense.py
"""
Temporal-tense agreement.

A sentence's time reference is read off temporal adverbs (어제, 내일, 지금 ...)
and a small substitution table brings verb endings in line with it.

Coverage is deliberately narrow: the ending table only knows the verb 가다
("to go"). It is a pattern table, not a morphological tense engine; extend
PAST_RULES / FUTURE_RULES to cover more stems.

Applying past then future enforcement does not restore the input
sentence (e.g. 가요 -> 갔어요 -> 갈 거예요).
"""

import re
from typing import Dict, Tuple

from hangul_corrector.core.domain.models import TimeHint
from hangul_corrector.core.domain.rules import SubstitutionRule, apply_rules, rule

PAST_MARKERS = re.compile(r"(어제|아까|방금|지난\s*\w+)")
FUTURE_MARKERS = re.compile(r"(내일|모레|곧|훗날|\d+\s*일\s*후|\d+\s*시간\s*후)")
PRESENT_MARKERS = re.compile(r"(지금|현재|요즘)")

# Detection order decides ties: past beats future beats present.
_DETECTION_ORDER = (
    (TimeHint.PAST, PAST_MARKERS),
    (TimeHint.FUTURE, FUTURE_MARKERS),
    (TimeHint.PRESENT, PRESENT_MARKERS),
)

PAST_RULES: Tuple[SubstitutionRule, ...] = (
    rule(r"갈\s?거(야|다|예요|에요)", "갔다"),
    rule(r"가겠(다|어요|습니다)", "갔다"),
    rule(r"간다", "갔다"),
    rule(r"가요", "갔어요"),
)

FUTURE_RULES: Tuple[SubstitutionRule, ...] = (
    rule(r"갔었?다", "갈 거다"),
    rule(r"갔어요", "갈 거예요"),
    rule(r"갔다", "갈 거다"),
)

TENSE_RULES: Dict[TimeHint, Tuple[SubstitutionRule, ...]] = {
    TimeHint.PAST: PAST_RULES,
    TimeHint.FUTURE: FUTURE_RULES,
}


def classify_time(sentence: str) -> TimeHint:
    """Return the first time reference whose adverb family matches."""
    for hint, markers in _DETECTION_ORDER:
        if markers.search(sentence):
            return hint
    return TimeHint.NEUTRAL


def enforce_tense(sentence: str, hint: TimeHint) -> str:
    """Rewrite verb endings to agree with `hint`. Present/neutral are no-ops."""
    return apply_rules(sentence, TENSE_RULES.get(hint, ()))
