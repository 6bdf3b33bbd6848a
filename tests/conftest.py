"""
Test fixtures for workout-plan-importer.

Provides sample grids and document text shared across parser tests.
"""

import sys
from pathlib import Path
from typing import Any, List

import pytest

# Repo root: .../workout-plan-importer
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_plan_importer...`
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def combined_grid() -> List[List[Any]]:
    """Header plus one row in "Serie x Rip" layout."""
    return [
        ["Esercizio", "Serie x Rip", "Kg", "Riposo"],
        ["Panca Piana", "4x8", "60", "90"],
    ]


@pytest.fixture
def separate_grid() -> List[List[Any]]:
    """Header plus one row with sets and reps in their own columns."""
    return [
        ["Esercizio", "Serie", "Rip", "Kg"],
        ["Squat", "3", "10", "80"],
    ]


@pytest.fixture
def sessions_grid() -> List[List[Any]]:
    """Rows grouped by a day column, with one day coming back later."""
    return [
        ["Giorno", "Esercizio", "Serie x Rip", "Note"],
        ["A", "Squat", "3x8", ""],
        ["", "Leg press", "3x10", "Piedi alti"],
        ["B", "Panca", "4x8", ""],
        ["A", "Affondi", "3x12", ""],
    ]


@pytest.fixture
def headerless_grid() -> List[List[Any]]:
    """No header row: day titles and exercise rows mixed together."""
    return [
        ["GIORNO 1"],
        ["Push up", "3x15"],
        ["Squat", "4x8", "80"],
        ["Panca", "3", "10", "60"],
        ["GIORNO 2"],
        ["Trazioni", "4", "8"],
    ]


@pytest.fixture
def plan_text() -> str:
    """Two-day plan as extracted from a text PDF."""
    return (
        "SCHEDA IPERTROFIA 8 settimane\n"
        "Giorno 1: Petto e tricipiti\n"
        "Panca piana 4 x 8 @60kg rest 90s\n"
        "Croci manubri 3 x 12\n"
        "Dip 3 x 10\n"
        "\n"
        "Giorno 2: Schiena\n"
        "Stacco da terra 4 x 6 @100kg rest 120s\n"
        "Trazioni 4 x 8\n"
    )
