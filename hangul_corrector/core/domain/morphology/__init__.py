# hangul_corrector\core\domain\morphology\__init__.py
"""Hangul syllable analysis and particle allomorphy."""

from .hangul import final_consonant_index, has_final_consonant, is_syllable
from .particles import correct_particles

__all__ = [
    "is_syllable",
    "has_final_consonant",
    "final_consonant_index",
    "correct_particles",
]
