"""
Sets x Reps grammar

Shared recognizer for "NxM" tokens such as "4x8", "3 x 12", "4X10",
"3x8-10" and "3x60sec".
"""

import re
from typing import Any, NamedTuple, Optional

from workout_plan_importer.utils import cell_text

MIN_SETS = 1
MAX_SETS = 10

SETS_REPS_PATTERN = re.compile(r'(\d+)\s*[xX×]\s*(\d+(?:-\d+)?)\s*(sec|s)?', re.IGNORECASE)

# Looser check used to tell exercise rows from session headers
HAS_SETS_REPS = re.compile(r'\d+\s*[xX×]\s*\d+')


class SetsReps(NamedTuple):
    sets: int
    reps: str
    timed: bool = False  # trailing "s"/"sec"; left for the isometric rule


def has_sets_reps(text: str) -> bool:
    """Check if text contains set/rep notation like '4x8' or '3 x 10'"""
    return bool(HAS_SETS_REPS.search(text))


def parse_sets_reps(cell: Any) -> Optional[SetsReps]:
    """
    Parse the first "NxM" token in a cell.

    Returns None when there is no token or when N is outside [1, 10].
    Reps keep their written form, so ranges survive as "8-10".
    """
    if not cell:
        return None

    match = SETS_REPS_PATTERN.search(cell_text(cell))
    if not match:
        return None

    sets = int(match.group(1))
    if sets < MIN_SETS or sets > MAX_SETS:
        return None

    return SetsReps(sets=sets, reps=match.group(2), timed=match.group(3) is not None)
