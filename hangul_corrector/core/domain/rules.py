"""
rules.py

Ordered substitution tables shared by the tense and register rule sets.

A table is a tuple of SubstitutionRule entries evaluated top to bottom.
Each entry rewrites the running text with `re.sub`; entries never look at
each other, so extending a vocabulary means appending rows, not touching
control flow.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional


@dataclass(frozen=True)
class SubstitutionRule:
    """
    One row of a substitution table.

    Attributes:
        pattern:
            Compiled regex to search for.
        replacement:
            `re.sub` replacement template (may use group references).
        precondition:
            Optional predicate on the current text. The rule is skipped
            when it returns False.
    """

    pattern: re.Pattern[str]
    replacement: str
    precondition: Optional[Callable[[str], bool]] = None

    def apply(self, text: str) -> str:
        if self.precondition is not None and not self.precondition(text):
            return text
        return self.pattern.sub(self.replacement, text)


def rule(
    pattern: str,
    replacement: str,
    precondition: Optional[Callable[[str], bool]] = None,
) -> SubstitutionRule:
    """Convenience constructor compiling `pattern`."""
    return SubstitutionRule(re.compile(pattern), replacement, precondition)


def apply_rules(text: str, rules: Iterable[SubstitutionRule]) -> str:
    """Apply every rule once, in order."""
    for entry in rules:
        text = entry.apply(text)
    return text


def apply_until_stable(
    text: str, rules: Iterable[SubstitutionRule], max_passes: int = 8
) -> str:
    """
    Re-apply the table until the text stops changing.

    Only safe for tables whose rewrites do not feed each other in a cycle;
    `max_passes` bounds the loop regardless.
    """
    rules = tuple(rules)
    for _ in range(max_passes):
        updated = apply_rules(text, rules)
        if updated == text:
            break
        text = updated
    return text
