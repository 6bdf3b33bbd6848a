"""
Keyword tables

Static Italian/English vocabularies driving the tabular and text heuristics.
Detectors and mappers take these as constructor defaults so a table can be
swapped in tests without touching the matching logic.
"""

from typing import Dict, Tuple

# Column role -> header keywords, matched as substrings of the lower-cased header
COLUMN_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "name": ("esercizio", "exercise", "nome", "name"),
    "combined_sets_reps": ("serie", "set", "sxr", "serie x rip", "sets x reps"),
    "sets": ("serie", "set", "sets"),
    "reps": ("rip", "rep", "reps", "ripetizioni", "repetitions"),
    "weight": ("peso", "weight", "kg", "carico"),
    "rest": ("rest", "riposo", "pausa", "recupero"),
    "notes": ("note", "notes", "annotazioni"),
    "session": ("sessione", "session", "giorno", "day"),
}

# A first cell containing this token marks a repeated header row
HEADER_ROW_TOKEN = "esercizio"

ISOMETRIC_KEYWORDS: Tuple[str, ...] = (
    "plank",
    "hold",
    "wall sit",
    "isometric",
    "hollow body",
    "l-sit",
    "dead hang",
    "static",
    "tenuta",
)

PLAN_NAME_KEYWORDS: Tuple[str, ...] = ("piano", "scheda", "workout", "program", "allenamento")

SESSION_NUMBER_KEYWORDS: Tuple[str, ...] = ("giorno", "day", "sessione", "allenamento")

ITALIAN_WEEKDAYS: Tuple[str, ...] = (
    r"lun[eì]d[ìi]",
    r"marted[ìi]",
    r"mercoled[ìi]",
    r"gioved[ìi]",
    r"venerd[ìi]",
    "sabato",
    "domenica",
)

SPLIT_TYPES: Tuple[str, ...] = ("push", "pull", "legs", "upper", "lower", r"full\s*body")

DEFAULT_WORKOUT_NAME = "Piano di Allenamento Importato"
DEFAULT_SESSION_PREFIX = "Sessione"
