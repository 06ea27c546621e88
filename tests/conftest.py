# tests\conftest.py
import pytest
from unittest.mock import AsyncMock, MagicMock

from hangul_corrector.core.ports.sentence_smoother import ISentenceSmoother
from hangul_corrector.shared.container import container as app_container

@pytest.fixture(scope="function")
def mock_smoother():
    """
    Returns a mock Sentence Smoother.
    By default it echoes the sentence back unchanged.
    """
    smoother = MagicMock(spec=ISentenceSmoother)
    # Async methods must be mocked with AsyncMock
    smoother.smooth = AsyncMock(side_effect=lambda sentence, level: sentence)
    smoother.health_check = AsyncMock(return_value=True)
    return smoother

@pytest.fixture(scope="function")
def container(mock_smoother):
    """
    Overrides the real smoothing adapter on the application container
    with the mock defined above.
    """
    app_container.sentence_smoother.override(mock_smoother)

    yield app_container

    # Clean up overrides after test
    app_container.sentence_smoother.reset_override()
