# hangul_corrector\shared\__init__.py
"""
Shared utilities package.

Cross-cutting concerns used by the use case and the adapters:
- Configuration management
- Structured logging
- Distributed tracing (Observability)
- Dependency Injection wiring
"""
