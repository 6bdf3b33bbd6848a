"""Unit tests for isometric exercise normalization."""
import pytest
from workout_plan_importer.parsers.isometric import IsometricNormalizer, merge_notes


@pytest.fixture
def normalizer():
    return IsometricNormalizer()


class TestIsometricNormalizer:
    """Test cases for IsometricNormalizer."""

    def test_long_hold_becomes_one_rep(self, normalizer):
        adjustment = normalizer.normalize("Plank", "45")
        assert adjustment.reps == "1"
        assert "45 secondi" in adjustment.note
        assert adjustment.note == "Mantenere per 45 secondi"

    def test_short_reps_are_kept(self, normalizer):
        adjustment = normalizer.normalize("Plank", "10")
        assert adjustment.reps == "10"
        assert adjustment.note == "Esercizio isometrico"

    def test_threshold_is_exclusive(self, normalizer):
        assert normalizer.normalize("Wall sit", "30").reps == "30"
        assert normalizer.normalize("Wall sit", "31").reps == "1"

    def test_non_numeric_reps_get_note_only(self, normalizer):
        adjustment = normalizer.normalize("Dead hang", "max")
        assert adjustment.reps == "max"
        assert adjustment.note == "Esercizio isometrico"

    @pytest.mark.parametrize("name", ["Side Plank", "L-SIT", "Tenuta isometrica", "Hollow Body Hold"])
    def test_keywords_are_case_insensitive(self, normalizer, name):
        assert normalizer.is_isometric(name)

    def test_ordinary_exercise_passes_through(self, normalizer):
        assert normalizer.normalize("Panca Piana", "45") is None

    def test_custom_keywords(self):
        normalizer = IsometricNormalizer(keywords=["superman"])
        assert normalizer.is_isometric("Superman")
        assert not normalizer.is_isometric("Plank")


def test_merge_notes():
    assert merge_notes(None, "Esercizio isometrico") == "Esercizio isometrico"
    assert merge_notes("Core", "Esercizio isometrico") == "Core; Esercizio isometrico"
