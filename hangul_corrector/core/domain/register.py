# hangul_corrector/core/domain/register.py
"""
Speech-register safety net.

Runs last, on any candidate sentence (rule output, an external rewrite, or
the raw user input when the rewrite failed) and guarantees that the
sentence ends in the requested register:

- polite (존댓말): ends in 요 or 니다 before the terminal mark.
- plain (반말): no trailing 요.

Total and idempotent: never raises for any text, always returns a string
ending in '.', '!' or '?', and enforce_register(enforce_register(x)) is
enforce_register(x).

Known weak spot: the polite last resort swaps a final 다 for 요 blindly,
which is ungrammatical for endings missing from POLITE_RULES
(e.g. 먹었다 -> 먹었요).
"""

import re
from typing import Tuple, Union

from hangul_corrector.core.domain.models import SpeechLevel
from hangul_corrector.core.domain.normalization import ensure_terminal_mark, normalize_spaces
from hangul_corrector.core.domain.rules import (
    SubstitutionRule,
    apply_rules,
    apply_until_stable,
    rule,
)

_QUOTES = re.compile(r"[“”\"‘’]")
_POLITE_ENDING = re.compile(r"(요|니다)[.!?]$")

POLITE_RULES: Tuple[SubstitutionRule, ...] = (
    rule(r"것이다([.!?])?$", r"거예요\1"),
    rule(r"거다([.!?])?$", r"거예요\1"),
    rule(r"했다([.!?])?$", r"했어요\1"),
    rule(r"한다([.!?])?$", r"해요\1"),
    rule(r"갔다([.!?])?$", r"갔어요\1"),
    rule(r"겠다([.!?])?$", r"겠어요\1"),
)

# Last resort when no table entry produced a polite ending.
POLITE_FALLBACK = rule(
    r"다([.!?])$",
    r"요\1",
    precondition=lambda text: not _POLITE_ENDING.search(text),
)

PLAIN_RULES: Tuple[SubstitutionRule, ...] = (
    rule(r"것이다([.!?])?$", r"거야\1"),
    rule(r"거다([.!?])?$", r"거야\1"),
    rule(r"거예요([.!?])?$", r"거야\1"),
    rule(r"했어요([.!?])?$", r"했어\1"),
    rule(r"해요([.!?])?$", r"해\1"),
    rule(r"합니다([.!?])?$", r"한다\1"),
    # Takes the space before a detached 요 with it.
    rule(r"\s*요([.!?])$", r"\1"),
)


def _fix_typos(text: str) -> str:
    return text.replace("거에요", "거예요")


def _prepare(candidate: str) -> str:
    text = _QUOTES.sub("", candidate or "")
    text = ensure_terminal_mark(normalize_spaces(text))
    return _fix_typos(text)


def enforce_register(candidate: str, level: Union[SpeechLevel, str]) -> str:
    """
    Force `candidate` into the register `level`.

    `level` may be a SpeechLevel or its wire value; an unknown level raises
    InvalidSpeechLevelError. The text itself never causes an error.
    """
    level = SpeechLevel.parse(level)
    text = _prepare(candidate)

    if level is SpeechLevel.POLITE:
        text = apply_rules(text, POLITE_RULES)
        # The fallback can turn 거에다 into 거에요.
        return _fix_typos(POLITE_FALLBACK.apply(text))

    # Stripping 요 can expose another plain-table ending, hence the fixed point.
    # Each pass shortens the text or is the last, so len(text) passes suffice.
    text = apply_until_stable(text, PLAIN_RULES, max_passes=len(text) + 1)
    return ensure_terminal_mark(text)
