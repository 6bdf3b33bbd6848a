"""
Structured Row Extractor

Tabular path used when the header row names an exercise column. Each data
row becomes at most one exercise; rows that cannot be read are skipped.
"""

import logging
from collections import OrderedDict
from typing import Any, Optional, Sequence

from .isometric import IsometricNormalizer, merge_notes
from .keywords import DEFAULT_SESSION_PREFIX
from .models import (
    ColumnMap,
    FormatDetection,
    ParsedExercise,
    ParsedSession,
    StructuredExtraction,
)
from .sets_reps import parse_sets_reps
from workout_plan_importer.utils import cell_text, clamp_rest, parse_number, parse_rest_time

logger = logging.getLogger(__name__)

DEFAULT_REPS = "10"


def cell_at(row: Sequence[Any], index: int) -> Any:
    """Cell value at index, None for a missing role or a short row"""
    if index < 0 or index >= len(row):
        return None
    return row[index]


class StructuredRowExtractor:
    """Reads one exercise per row using a column map"""

    def __init__(self, isometric: Optional[IsometricNormalizer] = None):
        self.isometric = isometric or IsometricNormalizer()

    def extract(
        self,
        grid: Sequence[Sequence[Any]],
        columns: ColumnMap,
        detection: FormatDetection,
    ) -> StructuredExtraction:
        # Keyed by session name; a repeated name keeps adding to the same session
        sessions: "OrderedDict[str, ParsedSession]" = OrderedDict()
        current_session = f"{DEFAULT_SESSION_PREFIX} 1"

        for row_idx in range(1, len(grid)):
            row = grid[row_idx]
            if not row:
                continue

            session_value = cell_text(cell_at(row, columns.session))
            if session_value:
                current_session = session_value

            exercise = self._parse_row(row, columns, detection)
            if exercise is None:
                continue

            if current_session not in sessions:
                sessions[current_session] = ParsedSession(
                    name=current_session,
                    day_number=len(sessions) + 1,
                )
            sessions[current_session].exercises.append(exercise)

        return StructuredExtraction(
            sessions=list(sessions.values()),
            detection=detection,
            columns=columns,
        )

    def _parse_row(
        self,
        row: Sequence[Any],
        columns: ColumnMap,
        detection: FormatDetection,
    ) -> Optional[ParsedExercise]:
        name = cell_text(cell_at(row, columns.name))
        if not name:
            return None

        sets: Optional[float] = None
        reps = DEFAULT_REPS

        if detection.format == "combined" and columns.combined_sets_reps != -1:
            parsed = parse_sets_reps(cell_at(row, columns.combined_sets_reps))
            if parsed:
                sets, reps = parsed.sets, parsed.reps
        else:
            sets = parse_number(cell_at(row, columns.sets)) if columns.sets != -1 else None
            reps = cell_text(cell_at(row, columns.reps)) or DEFAULT_REPS

        if sets is None or int(sets) < 1:
            logger.debug(f'Invalid sets for "{name}", skipping row')
            return None

        weight = parse_number(cell_at(row, columns.weight))
        rest = parse_rest_time(cell_at(row, columns.rest))
        notes = cell_text(cell_at(row, columns.notes)) or None

        adjustment = self.isometric.normalize(name, reps)
        if adjustment:
            reps = adjustment.reps
            notes = merge_notes(notes, adjustment.note)

        rest_seconds = clamp_rest(rest)
        if rest and rest_seconds != rest:
            logger.debug(f'Rest {rest}s for "{name}" out of range, using {rest_seconds}s')

        logger.debug(f"{name} | {int(sets)}x{reps} | {weight or 'BW'}kg | {rest_seconds}s")

        return ParsedExercise(
            name=name,
            sets=int(sets),
            reps=reps,
            weight=weight,
            rest_seconds=rest_seconds,
            notes=notes,
        )
