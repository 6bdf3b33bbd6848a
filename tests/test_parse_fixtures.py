"""
Parameterized fixture-based tests for the core parsers.

Loads YAML fixture files from tests/fixtures/parse_scenarios/ and runs each
through parse_grid() or parse_text(), asserting against the expected output
defined in the fixture.
"""

import yaml
import pytest
from pathlib import Path

from workout_plan_importer.parsers import parse_grid, parse_text

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "parse_scenarios"

EXERCISE_FIELDS = ("sets", "reps", "weight", "rest_seconds", "notes")


def load_fixtures():
    fixtures = []
    for f in sorted(FIXTURES_DIR.glob("*.yaml")):
        with open(f, encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
            data["_file"] = f.name
            fixtures.append(data)
    return fixtures


def _run(fixture):
    if fixture["kind"] == "grid":
        return parse_grid(fixture["input"], sheet_name=fixture.get("sheet_name"))
    return parse_text(fixture["input"])


def _all_exercises(workout):
    return [exercise for session in workout.sessions for exercise in session.exercises]


@pytest.mark.parametrize("fixture", load_fixtures(), ids=lambda f: f["_file"])
def test_parse_scenario(fixture):
    result = _run(fixture)
    expected = fixture["expected"]

    assert result.success is expected["success"], f"Unexpected result: {result.error}"

    if not expected["success"]:
        assert result.data is None
        assert expected["error_contains"] in result.error
        return

    workout = result.data

    if "name" in expected:
        assert workout.name == expected["name"]
    if "duration_weeks" in expected:
        assert workout.duration_weeks == expected["duration_weeks"]
    if "frequency" in expected:
        assert workout.frequency == expected["frequency"]
    if "warning_count" in expected:
        assert len(result.warnings) == expected["warning_count"], (
            f"Expected {expected['warning_count']} warnings, got {result.warnings}"
        )

    # Check session structure
    for i, exp_session in enumerate(expected.get("sessions", [])):
        assert i < len(workout.sessions), (
            f"Expected session {i} but workout only has {len(workout.sessions)} sessions"
        )
        actual = workout.sessions[i]

        if "name" in exp_session:
            assert actual.name == exp_session["name"]
        if "day_number" in exp_session:
            assert actual.day_number == exp_session["day_number"]
        if "exercise_count" in exp_session:
            assert len(actual.exercises) == exp_session["exercise_count"], (
                f"Session {i} ({actual.name}): expected {exp_session['exercise_count']} exercises, "
                f"got {[ex.name for ex in actual.exercises]}"
            )

    # Check individual exercises
    all_exercises = _all_exercises(workout)
    for i, exp_ex in enumerate(expected.get("exercises", [])):
        actual = all_exercises[i]

        if "name" in exp_ex:
            assert actual.name == exp_ex["name"]
        for field in EXERCISE_FIELDS:
            if field in exp_ex:
                assert getattr(actual, field) == exp_ex[field], (
                    f"Exercise {i} ({actual.name}): expected {field}={exp_ex[field]!r}, "
                    f"got {getattr(actual, field)!r}"
                )


@pytest.mark.parametrize("fixture", load_fixtures(), ids=lambda f: f["_file"])
def test_response_shape(fixture):
    response = _run(fixture).to_response()

    if fixture["expected"]["success"]:
        assert "error" not in response
        session = response["data"]["sessions"][0]
        assert "dayNumber" in session
        assert "restSeconds" in session["exercises"][0]
    else:
        assert "data" not in response
        assert response["error"]
