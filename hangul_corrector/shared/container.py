# hangul_corrector\shared\container.py
from dependency_injector import containers, providers

from hangul_corrector.shared.config import settings
from hangul_corrector.adapters.smoothing.passthrough import PassthroughSmoother
from hangul_corrector.core.use_cases.correct_sentence import CorrectSentence

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # Sentence Smoother (Singleton: stateless, shared across requests)
    sentence_smoother = providers.Singleton(
        PassthroughSmoother
    )

    # 3. Use Cases (Application Logic)

    # Factory: New instance per request, Singleton dependencies injected.
    correct_sentence_use_case = providers.Factory(
        CorrectSentence,
        smoother=sentence_smoother
    )

# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
