"""
Free-form Extractor

Tabular fallback for sheets without a usable header. Rows are read one at a
time: a row that looks like a day title opens a session, any other row is
tried as "name | sets x reps | ..." or "name | sets | reps | ...".
"""

import re
import logging
from typing import Any, List, Optional, Sequence

from .isometric import IsometricNormalizer
from .keywords import DEFAULT_SESSION_PREFIX
from .models import FreeFormExtraction, ParsedExercise, ParsedSession
from .session_headers import SessionHeaderDetector
from .sets_reps import has_sets_reps, parse_sets_reps
from workout_plan_importer.utils import cell_text, clamp_rest, parse_number

logger = logging.getLogger(__name__)

REPS_CELL_PATTERN = re.compile(r'^\d+(-\d+)?$')

# Magnitude windows for unlabeled numbers. They overlap on [30, 500);
# weight is checked first so it wins there.
WEIGHT_RANGE = (20, 500)  # exclusive on both ends
REST_RANGE = (30, 600)    # inclusive low, exclusive high


class FreeFormExtractor:
    """Row-by-row session and exercise detection"""

    def __init__(
        self,
        headers: Optional[SessionHeaderDetector] = None,
        isometric: Optional[IsometricNormalizer] = None,
    ):
        self.headers = headers or SessionHeaderDetector()
        self.isometric = isometric or IsometricNormalizer()

    def extract(self, grid: Sequence[Sequence[Any]]) -> FreeFormExtraction:
        sessions: List[ParsedSession] = []
        current: Optional[ParsedSession] = None
        session_number = 0

        for row in grid:
            if not row:
                continue

            row_text = " ".join(text for text in (cell_text(c) for c in row) if text)

            if self.is_session_header(row_text):
                if current and current.exercises:
                    sessions.append(current)
                session_number += 1
                current = ParsedSession(name=row_text, day_number=session_number)
                continue

            exercise = self.parse_exercise_row(row)
            if exercise is None:
                continue

            if current is None:
                session_number += 1
                current = ParsedSession(
                    name=f"{DEFAULT_SESSION_PREFIX} {session_number}",
                    day_number=session_number,
                )
            current.exercises.append(exercise)

        if current and current.exercises:
            sessions.append(current)

        return FreeFormExtraction(sessions=sessions)

    def is_session_header(self, row_text: str) -> bool:
        # "3x10" anywhere means an exercise row, whatever else it looks like
        if not row_text or has_sets_reps(row_text):
            return False
        return self.headers.detect(row_text) is not None

    def parse_exercise_row(self, row: Sequence[Any]) -> Optional[ParsedExercise]:
        if len(row) < 2:
            return None

        name = cell_text(row[0])
        if not name:
            return None

        sets: Optional[float] = None
        reps = "10"
        notes: Optional[str] = None

        parsed = parse_sets_reps(row[1])
        if parsed:
            sets, reps = parsed.sets, parsed.reps
        elif cell_text(row[1]):
            sets = parse_number(row[1])
            reps_value = cell_text(row[2]) if len(row) > 2 else ""
            if REPS_CELL_PATTERN.match(reps_value):
                reps = reps_value

        if sets is None or int(sets) < 1:
            return None

        adjustment = self.isometric.normalize(name, reps)
        if adjustment:
            reps, notes = adjustment.reps, adjustment.note

        weight: Optional[float] = None
        rest: Optional[float] = None

        for cell in row[2 if parsed else 3:]:
            value = parse_number(cell)
            if value is None:
                continue
            if WEIGHT_RANGE[0] < value < WEIGHT_RANGE[1]:
                weight = value
            elif REST_RANGE[0] <= value < REST_RANGE[1]:
                rest = value

        rest_seconds = clamp_rest(rest)
        logger.debug(f"Free-form: {name} | {int(sets)}x{reps} | {weight or 'BW'}kg | {rest_seconds}s")

        return ParsedExercise(
            name=name,
            sets=int(sets),
            reps=reps,
            weight=weight,
            rest_seconds=rest_seconds,
            notes=notes,
        )
