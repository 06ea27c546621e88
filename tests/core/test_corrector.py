# tests\core\test_corrector.py
import pytest

from hangul_corrector.core.domain.corrector import (
    FUTURE_TENSE_NOTE,
    PARTICLE_NOTE,
    PAST_TENSE_NOTE,
    correct,
    explain,
)
from hangul_corrector.core.domain.normalization import normalize_spaces

class TestCorrect:

    def test_past_adverb_shifts_tense(self):
        """
        Scenario: '어제' with a present-tense ending and correct particles.
        Expected: 가요 -> 갔어요, one tense note, period appended.
        """
        result = correct("나 어제 학교 가요")
        assert result.corrected == "나 어제 학교 갔어요."
        assert result.notes == [PAST_TENSE_NOTE]

    def test_object_particle_fixed(self):
        result = correct("밥를 먹었다")
        assert result.corrected == "밥을 먹었다."
        assert result.notes == [PARTICLE_NOTE]

    def test_future_adverb_shifts_tense(self):
        result = correct("내일 학교 갔다")
        assert result.corrected == "내일 학교 갈 거다."
        assert result.notes == [FUTURE_TENSE_NOTE]

    def test_notes_order_particles_then_tense(self):
        result = correct("어제 밥를 먹고 가요")
        assert result.corrected == "어제 밥을 먹고 갔어요."
        assert result.notes == [PARTICLE_NOTE, PAST_TENSE_NOTE]

    def test_no_rule_fired(self):
        result = correct("사과가 맛있다")
        assert result.corrected == "사과가 맛있다."
        assert result.notes == []

    def test_keeps_existing_terminal_mark(self):
        result = correct("나는   학교에 간다 !")
        assert result.corrected == "나는 학교에 간다!"
        assert result.notes == []

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t", None])
    def test_empty_input(self, raw):
        """Edge case: empty input maps to an empty result without punctuation."""
        result = correct(raw)
        assert result.corrected == ""
        assert result.notes == []

    def test_non_hangul_input(self):
        result = correct("hello")
        assert result.corrected == "hello."
        assert result.notes == []

class TestExplain:

    def test_matches_correct_notes(self):
        for text in ["밥를 먹었다", "나 어제 학교 가요", "어제 밥를 먹고 가요", "안녕"]:
            assert explain(text) == correct(text).notes

class TestNormalizeSpaces:

    def test_collapses_and_trims(self):
        assert normalize_spaces("  나는  \t 학교에\n간다  ") == "나는 학교에 간다"

    def test_removes_space_before_punctuation(self):
        assert normalize_spaces("네 , 알겠어 ?") == "네, 알겠어?"
