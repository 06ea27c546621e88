# tests\core\test_use_cases.py
import pytest

from hangul_corrector.adapters.smoothing.passthrough import PassthroughSmoother
from hangul_corrector.core.domain.corrector import FUTURE_TENSE_NOTE, PARTICLE_NOTE, PAST_TENSE_NOTE
from hangul_corrector.core.domain.exceptions import InvalidSpeechLevelError, SmoothingError
from hangul_corrector.core.domain.models import SpeechLevel
from hangul_corrector.core.use_cases.correct_sentence import CorrectSentence

@pytest.mark.asyncio
class TestCorrectSentence:

    async def test_execute_passes_rule_output_to_smoother(self, container, mock_smoother):
        """
        Scenario: The rule pass fixes a particle.
        Expected: The smoother receives the corrected sentence and the parsed level.
        """
        # Arrange
        use_case = container.correct_sentence_use_case()

        # Act
        result = await use_case.execute("밥를 먹었다", "banmal")

        # Assert
        mock_smoother.smooth.assert_awaited_once_with("밥을 먹었다.", SpeechLevel.PLAIN)
        assert result.corrected == "밥을 먹었다."
        assert result.notes == [PARTICLE_NOTE]

    async def test_register_applied_to_smoother_output(self, container, mock_smoother):
        """
        Scenario: The smoother answers in the wrong register.
        Expected: The safety net still produces a polite ending.
        """
        use_case = container.correct_sentence_use_case()
        mock_smoother.smooth.side_effect = None
        mock_smoother.smooth.return_value = '"어제 학교 갔다"'

        result = await use_case.execute("나 어제 학교 가요", SpeechLevel.POLITE)

        assert result.corrected == "어제 학교 갔어요."
        assert result.notes == [PAST_TENSE_NOTE]

    async def test_smoother_failure_falls_back(self, container, mock_smoother):
        """
        Scenario: The smoothing collaborator raises.
        Expected: The rule output goes through the safety net instead.
        """
        use_case = container.correct_sentence_use_case()
        mock_smoother.smooth.side_effect = SmoothingError("quota exceeded")

        result = await use_case.execute("나 어제 학교 가요", "banmal")

        assert result.corrected == "나 어제 학교 갔어."
        assert result.notes == [PAST_TENSE_NOTE]

    async def test_empty_smoother_answer_falls_back(self, container, mock_smoother):
        use_case = container.correct_sentence_use_case()
        mock_smoother.smooth.side_effect = None
        mock_smoother.smooth.return_value = "   "

        result = await use_case.execute("내일 학교 갔다", "jondaetmal")

        assert result.corrected == "내일 학교 갈 거예요."
        assert result.notes == [FUTURE_TENSE_NOTE]

    async def test_empty_input_short_circuits(self, container, mock_smoother):
        use_case = container.correct_sentence_use_case()

        result = await use_case.execute("   ", "banmal")

        assert result.corrected == ""
        assert result.notes == []
        mock_smoother.smooth.assert_not_awaited()

    async def test_invalid_level(self, container):
        use_case = container.correct_sentence_use_case()

        with pytest.raises(InvalidSpeechLevelError):
            await use_case.execute("안녕", "formal")

    async def test_with_passthrough_adapter(self):
        use_case = CorrectSentence(smoother=PassthroughSmoother())

        result = await use_case.execute("내일 학교 갔다", SpeechLevel.POLITE)

        assert result.corrected == "내일 학교 갈 거예요."
        assert result.notes == [FUTURE_TENSE_NOTE]
