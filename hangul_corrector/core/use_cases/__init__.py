# hangul_corrector\core\use_cases\__init__.py
from .correct_sentence import CorrectSentence

__all__ = ["CorrectSentence"]
