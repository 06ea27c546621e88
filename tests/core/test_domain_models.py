# tests\core\test_domain_models.py
import pytest
from pydantic import ValidationError

from hangul_corrector.core.domain.exceptions import InvalidSpeechLevelError
from hangul_corrector.core.domain.models import CorrectionResult, SpeechLevel

class TestSpeechLevel:
    def test_wire_values(self):
        assert SpeechLevel.PLAIN.value == "banmal"
        assert SpeechLevel.POLITE.value == "jondaetmal"

    @pytest.mark.parametrize("raw, expected", [
        ("banmal", SpeechLevel.PLAIN),
        (" JONDAETMAL ", SpeechLevel.POLITE),
        (SpeechLevel.POLITE, SpeechLevel.POLITE),
    ])
    def test_parse(self, raw, expected):
        assert SpeechLevel.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["formal", "", None, 3])
    def test_parse_rejects_unknown(self, raw):
        with pytest.raises(InvalidSpeechLevelError) as excinfo:
            SpeechLevel.parse(raw)
        assert excinfo.value.value == raw

class TestCorrectionResult:
    def test_default_notes(self):
        result = CorrectionResult(corrected="안녕.")
        assert result.notes == []

    def test_missing_sentence(self):
        """Should raise ValidationError if the corrected sentence is missing."""
        with pytest.raises(ValidationError):
            CorrectionResult(notes=[])
