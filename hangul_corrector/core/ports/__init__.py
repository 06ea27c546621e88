# hangul_corrector\core\ports\__init__.py
"""
Core Ports (Interfaces).

Abstract base classes that Infrastructure Adapters must implement, so the
use case can reach external collaborators without knowing their details.
"""

from .sentence_smoother import ISentenceSmoother

__all__ = [
    "ISentenceSmoother",
]
