"""
Isometric exercises

Plank, holds and similar exercises are often written as "3x45" where 45 is
seconds under tension. The normalizer rewrites those into one rep with a
hold instruction in the notes.
"""

import logging
from typing import NamedTuple, Optional, Sequence

from .keywords import ISOMETRIC_KEYWORDS
from workout_plan_importer.utils import leading_int

logger = logging.getLogger(__name__)

# Reps above this on an isometric exercise are read as seconds
SECONDS_THRESHOLD = 30

ISOMETRIC_NOTE = "Esercizio isometrico"
HOLD_NOTE_TEMPLATE = "Mantenere per {seconds} secondi"


class IsometricAdjustment(NamedTuple):
    reps: str
    note: str


class IsometricNormalizer:
    """Reinterprets the reps of hold-based exercises"""

    def __init__(self, keywords: Sequence[str] = ISOMETRIC_KEYWORDS):
        self.keywords = tuple(k.lower() for k in keywords)

    def is_isometric(self, exercise_name: str) -> bool:
        name = exercise_name.lower()
        return any(keyword in name for keyword in self.keywords)

    def normalize(self, exercise_name: str, reps: str) -> Optional[IsometricAdjustment]:
        """Return the rewritten reps and note, or None for ordinary exercises."""
        if not self.is_isometric(exercise_name):
            return None

        seconds = leading_int(reps)
        if seconds is not None and seconds > SECONDS_THRESHOLD:
            logger.debug(f"Isometric hold: {exercise_name} for {seconds}s")
            return IsometricAdjustment(reps="1", note=HOLD_NOTE_TEMPLATE.format(seconds=seconds))

        return IsometricAdjustment(reps=reps, note=ISOMETRIC_NOTE)


def merge_notes(existing: Optional[str], addition: str) -> str:
    """Append a note after any existing text, separated by '; '."""
    return f"{existing}; {addition}" if existing else addition
