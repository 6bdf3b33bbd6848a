"""
Text-Line Extractor

Line-based path for text already pulled out of a document. Each line is
either a session header, an exercise ("Panca piana 4 x 8 @60kg rest 90s")
or noise that gets ignored.
"""

import re
import math
import logging
from typing import List, Optional

from .keywords import DEFAULT_SESSION_PREFIX, DEFAULT_WORKOUT_NAME, PLAN_NAME_KEYWORDS
from .models import ParsedExercise, ParsedSession, TextExtraction
from .session_headers import SessionHeaderDetector
from workout_plan_importer.utils import clamp_rest

logger = logging.getLogger(__name__)

NAME_SCAN_LINES = 5

PLAN_NAME_PATTERN = re.compile('|'.join(PLAN_NAME_KEYWORDS), re.IGNORECASE)
DATE_LIKE_PATTERN = re.compile(r'^\d+[\s/\-]\d+')
DURATION_PATTERN = re.compile(r'(\d+)\s*(settimane|weeks|sett)', re.IGNORECASE)

# Tried in order, first match wins. Groups: name, sets, reps, trailing text.
EXERCISE_LINE_PATTERNS = [
    # "Squat 4 x 8-10 @80kg"
    re.compile(r'^(.+?)\s+(\d+)\s*[xX×]\s*(\d+(?:-\d+)?)\s*(.*)$'),
    # "Squat 4 serie x 8 rip 80kg"
    re.compile(
        r'^(.+?)\s+(\d+)\s+(?:serie|sets|set)\s*[xX×]\s*(\d+(?:-\d+)?)\s*'
        r'(?:ripetizioni|rip|reps|rep)?\s*(.*)$',
        re.IGNORECASE,
    ),
    # "Squat - 4 sets x 8 reps"
    re.compile(
        r'^(.+?)[\s\-–]+(\d+)\s+(?:sets|set)\s*[xX×]\s*(\d+(?:-\d+)?)\s*(?:reps|rep)?\s*(.*)$',
        re.IGNORECASE,
    ),
]

# Weight needs a marker on at least one side so a bare rest figure is not read as kg
WEIGHT_PATTERN = re.compile(
    r'(?:@|peso|weight)\s*:?\s*(\d+(?:[.,]\d+)?)\s*(?:kg|lbs?)?'
    r'|(\d+(?:[.,]\d+)?)\s*(?:kg|lbs?)\b',
    re.IGNORECASE,
)

# Same for rest: a "rest/riposo/pausa" prefix or a time unit
REST_PATTERN = re.compile(
    r'(?:rest|riposo|pausa|recupero)\s*:?\s*(\d+(?:\.\d+)?)\s*(minuti|min|secondi|sec|s|m)?\b'
    r'|(\d+(?:\.\d+)?)\s*(minuti|min|secondi|sec|s|m)\b',
    re.IGNORECASE,
)


class TextLineExtractor:
    """Sessions and exercises from plain document text"""

    def __init__(self, headers: Optional[SessionHeaderDetector] = None):
        self.headers = headers or SessionHeaderDetector()

    def extract(self, text: str) -> TextExtraction:
        lines = self.split_lines(text)
        return TextExtraction(
            name=self.extract_name(lines),
            duration_weeks=self.extract_duration(text),
            sessions=self.extract_sessions(lines),
        )

    @staticmethod
    def split_lines(text: str) -> List[str]:
        return [line.strip() for line in text.split("\n") if line.strip()]

    def extract_name(self, lines: List[str]) -> str:
        """
        Workout name from the first lines.

        A line longer than 5 characters qualifies if it mentions a plan
        keyword or is one of the first two lines. Date-like lines are skipped.
        """
        for i, line in enumerate(lines[:NAME_SCAN_LINES]):
            if len(line) <= 5 or DATE_LIKE_PATTERN.match(line):
                continue
            if PLAN_NAME_PATTERN.search(line):
                return line
            if i in (0, 1):
                return line
        return DEFAULT_WORKOUT_NAME

    def extract_duration(self, text: str) -> Optional[int]:
        match = DURATION_PATTERN.search(text)
        return int(match.group(1)) if match else None

    def extract_sessions(self, lines: List[str]) -> List[ParsedSession]:
        sessions: List[ParsedSession] = []
        current: Optional[ParsedSession] = None
        session_number = 0

        for line in lines:
            header = self.headers.detect(line)
            if header:
                if current and current.exercises:
                    sessions.append(current)
                session_number += 1
                current = ParsedSession(
                    name=header.name,
                    day_number=header.day_number or session_number,
                )
                continue

            exercise = self.parse_exercise_line(line)
            if exercise is None:
                continue

            # Exercises before any header land in an implicit first session
            if current is None:
                session_number += 1
                current = ParsedSession(
                    name=f"{DEFAULT_SESSION_PREFIX} {session_number}",
                    day_number=session_number,
                )
            current.exercises.append(exercise)

        if current and current.exercises:
            sessions.append(current)

        return sessions

    def parse_exercise_line(self, line: str) -> Optional[ParsedExercise]:
        for pattern in EXERCISE_LINE_PATTERNS:
            match = pattern.match(line)
            if not match:
                continue

            name = match.group(1).strip().rstrip("-–:").strip()
            sets = int(match.group(2))
            if not name or sets < 1:
                return None

            trailing = (match.group(4) or "").strip()
            return ParsedExercise(
                name=name,
                sets=sets,
                reps=match.group(3).strip(),
                weight=self.parse_weight(trailing),
                rest_seconds=clamp_rest(self.parse_rest(trailing)),
                notes=trailing or None,
            )

        return None

    @staticmethod
    def parse_weight(text: str) -> Optional[float]:
        match = WEIGHT_PATTERN.search(text)
        if not match:
            return None
        value = float((match.group(1) or match.group(2)).replace(",", "."))
        return value if math.isfinite(value) else None

    @staticmethod
    def parse_rest(text: str) -> Optional[float]:
        """Rest in seconds; minutes are converted."""
        match = REST_PATTERN.search(text)
        if not match:
            return None
        value = float(match.group(1) or match.group(3))
        unit = (match.group(2) or match.group(4) or "").lower()
        if unit.startswith("m"):
            value *= 60
        return value
