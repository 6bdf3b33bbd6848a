"""Unit tests for session header detection."""
import pytest
from workout_plan_importer.parsers.session_headers import SessionHeaderDetector


@pytest.fixture
def detector():
    return SessionHeaderDetector()


class TestSessionHeaderDetector:
    """Test cases for SessionHeaderDetector."""

    def test_numbered_header_with_name(self, detector):
        header = detector.detect("Giorno 2: Gambe")
        assert header.name == "Gambe"
        assert header.day_number == 2

    def test_numbered_header_without_name(self, detector):
        header = detector.detect("Day 3")
        assert header.name == "Giorno 3"
        assert header.day_number == 3

    @pytest.mark.parametrize("line", ["Lunedì", "martedi - spinta", "Domenica"])
    def test_weekdays(self, detector, line):
        header = detector.detect(line)
        assert header.name == line
        assert header.day_number is None

    @pytest.mark.parametrize("line", ["Push", "pull day", "Full Body A", "Upper"])
    def test_split_types(self, detector, line):
        assert detector.detect(line).name == line

    def test_all_caps_catch_all(self, detector):
        assert detector.detect("SPALLE E BRACCIA").name == "SPALLE E BRACCIA"

    def test_all_caps_length_bounds(self, detector):
        assert detector.detect("ABC") is None
        assert detector.detect("A" * 40) is None

    def test_exercise_line_is_not_a_header(self, detector):
        assert detector.detect("Panca piana 4 x 8") is None
