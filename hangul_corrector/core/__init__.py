# hangul_corrector\core\__init__.py
"""
Core Domain Layer.

This package contains the pure correction rules and the use case that
composes them. It strictly follows the Hexagonal Architecture pattern:
- No dependencies on frameworks (FastAPI, CLI parsing).
- No dependencies on infrastructure (remote language models, caches).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
