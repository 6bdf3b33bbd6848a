"""Workout plan importer: spreadsheet grids and document text into structured plans."""

from workout_plan_importer.parsers import (
    FileParserFactory,
    ParsedExercise,
    ParsedSession,
    ParsedWorkout,
    ParserResult,
    parse_grid,
    parse_text,
)

__version__ = "0.1.0"

__all__ = [
    "FileParserFactory",
    "ParsedExercise",
    "ParsedSession",
    "ParsedWorkout",
    "ParserResult",
    "parse_grid",
    "parse_text",
]
