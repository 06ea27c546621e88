# hangul_corrector/adapters/api/dependencies.py
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from hangul_corrector.core.ports.sentence_smoother import ISentenceSmoother
from hangul_corrector.core.use_cases.correct_sentence import CorrectSentence
from hangul_corrector.shared.container import Container


@inject
def get_correct_sentence_use_case(
    use_case: CorrectSentence = Depends(Provide[Container.correct_sentence_use_case]),
) -> CorrectSentence:
    """Dependency to inject the CorrectSentence interactor (container-managed)."""
    return use_case


@inject
def get_sentence_smoother(
    smoother: ISentenceSmoother = Depends(Provide[Container.sentence_smoother]),
) -> ISentenceSmoother:
    return smoother
