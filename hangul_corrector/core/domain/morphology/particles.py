# hangul_corrector\core\domain\morphology\particles.py
"""
PARTICLE CORRECTOR
------------------
Rewrites case / topic / conjunctive / directional / vocative particles so
they agree with the batchim of the word they attach to.

Each particle class owns exactly two allomorphs:

    class        after vowel   after consonant
    subject      가            이
    object       를            을
    topic        는            은
    conjunctive  와            과
    directional  로            으로   (ㄹ-final words take 로)
    vocative     야            아

Every match is rewritten from the stem's batchim, whichever allomorph was
there before, so the pass is idempotent.

Known limitation: the scan is purely orthographic. A word that merely ends
in a particle-shaped syllable is treated as stem + particle. That covers
nouns like 아이 "child" and also verb adnominals in -는, so 먹는 사과
"an apple being eaten" comes out as 먹은 사와 (먹는 read as topic, 사과 as
conjunctive).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from hangul_corrector.core.domain.morphology.hangul import (
    RIEUL_INDEX,
    final_consonant_index,
    has_final_consonant,
)

HANGUL_RUN = "[가-힣]+"


@dataclass(frozen=True)
class ParticleRule:
    """
    One particle class.

    Attributes:
        name:
            Class label ("subject", "object", ...).
        pattern:
            Regex with three groups: stem, particle, tail.
        vowel_form / consonant_form:
            Allomorphs after a vowel-final / consonant-final stem.
        takes_vowel_form:
            Optional override deciding when the vowel form applies.
            Defaults to "stem has no batchim".
    """

    name: str
    pattern: re.Pattern[str]
    vowel_form: str
    consonant_form: str
    takes_vowel_form: Optional[Callable[[str], bool]] = None

    def select(self, stem: str) -> str:
        if self.takes_vowel_form is not None:
            vowel = self.takes_vowel_form(stem)
        else:
            vowel = not has_final_consonant(stem)
        return self.vowel_form if vowel else self.consonant_form

    def apply(self, text: str) -> str:
        def _fix(match: re.Match) -> str:
            stem, _particle, tail = match.groups()
            return stem + self.select(stem) + tail

        return self.pattern.sub(_fix, text)


def _directional_takes_ro(stem: str) -> bool:
    return final_consonant_index(stem) in (0, RIEUL_INDEX)


def _word_final(alternatives: str, stem: str = HANGUL_RUN) -> re.Pattern[str]:
    # Empty tail group keeps every pattern at three groups.
    return re.compile(f"({stem})({alternatives})()\\b")


PARTICLE_RULES: Tuple[ParticleRule, ...] = (
    ParticleRule("subject", _word_final("[이가]"), "가", "이"),
    ParticleRule("object", _word_final("[을를]"), "를", "을"),
    ParticleRule("topic", _word_final("[은는]"), "는", "은"),
    ParticleRule("conjunctive", _word_final("[와과]"), "와", "과"),
    # Lazy stem so a trailing 으로 is read as the particle, not as stem + 로.
    # Stray repeated 으 (으으로) belongs to the particle as well.
    ParticleRule(
        "directional",
        _word_final("으*으로|로", stem=HANGUL_RUN + "?"),
        "로",
        "으로",
        takes_vowel_form=_directional_takes_ro,
    ),
    # Vocative needs an explicit following space or punctuation mark.
    ParticleRule(
        "vocative",
        re.compile(f"({HANGUL_RUN})(아|야)([\\s,!?.])"),
        "야",
        "아",
    ),
)


def correct_particles(sentence: str) -> str:
    """Apply every particle class in table order."""
    for particle_rule in PARTICLE_RULES:
        sentence = particle_rule.apply(sentence)
    return sentence
