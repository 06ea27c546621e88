# hangul_corrector\__init__.py
"""
Hangul Grammar Corrector.

Rule-based Korean sentence correction (particles, tense, speech register)
packaged as a Modular Monolith following Hexagonal Architecture
(Ports & Adapters).
"""

__version__ = "1.0.0"
