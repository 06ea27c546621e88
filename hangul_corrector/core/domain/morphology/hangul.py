# hangul_corrector\core\domain\morphology\hangul.py
"""
HANGUL SYLLABLE ANALYZER
------------------------
Batchim (final consonant) detection via Unicode Hangul decomposition.

- Range: AC00-D7A3 (precomposed syllable blocks)
- (code - 0xAC00) % 28 == 0  -> no batchim (vowel-final)
- (code - 0xAC00) % 28 > 0   -> batchim present (consonant-final)

Only the LAST Hangul syllable of a word matters for particle selection, so
every helper scans right-to-left and skips trailing non-Hangul characters
(punctuation, Latin letters, digits).
"""

from typing import Optional

HANGUL_BASE = 0xAC00
HANGUL_LAST = 0xD7A3
FINAL_CONSONANT_COUNT = 28

# Final-consonant index of ㄹ. Takes 로 rather than 으로.
RIEUL_INDEX = 8


def is_syllable(ch: str) -> bool:
    """Return True if `ch` is a single precomposed Hangul syllable."""
    if len(ch) != 1:
        return False
    return HANGUL_BASE <= ord(ch) <= HANGUL_LAST


def last_syllable(word: str) -> Optional[str]:
    """
    Return the last Hangul syllable of `word`, skipping non-syllable
    characters at the end. Returns None when the word has no syllable.
    """
    for ch in reversed(word or ""):
        if is_syllable(ch):
            return ch
    return None


def final_consonant_index(word: str) -> int:
    """
    Final-consonant index (0-27) of the last Hangul syllable in `word`.

    0 means "no batchim". Words without any Hangul syllable also yield 0.
    """
    ch = last_syllable(word)
    if ch is None:
        return 0
    return (ord(ch) - HANGUL_BASE) % FINAL_CONSONANT_COUNT


def has_final_consonant(word: str) -> bool:
    """Return True if the last Hangul syllable of `word` has a batchim."""
    return final_consonant_index(word) != 0
