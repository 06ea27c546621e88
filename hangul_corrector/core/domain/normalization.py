# hangul_corrector/core/domain/normalization.py
import re

_WHITESPACE = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT = re.compile(r"\s([,.!?])")
_TERMINAL = re.compile(r"[.!?]$")

TERMINAL_MARKS = ".!?"


def normalize_spaces(text: str) -> str:
    """Collapse whitespace runs, drop the space before ,.!? and trim."""
    text = _WHITESPACE.sub(" ", text)
    text = _SPACE_BEFORE_PUNCT.sub(r"\1", text)
    return text.strip()


def has_terminal_mark(text: str) -> bool:
    return bool(_TERMINAL.search(text))


def ensure_terminal_mark(text: str) -> str:
    """Append '.' unless the text already ends in '.', '!' or '?'."""
    return text if has_terminal_mark(text) else text + "."
