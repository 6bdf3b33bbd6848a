"""
Session headers

Recognizes lines that open a new training day ("Giorno 1: Petto",
"Lunedì", "Push", "UPPER A"). Rules are tried in order and the first one
that matches decides, so the list order is the tie-break.
"""

import re
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from .keywords import (
    ITALIAN_WEEKDAYS,
    SESSION_NUMBER_KEYWORDS,
    SPLIT_TYPES,
)


class SessionHeader(NamedTuple):
    name: str
    day_number: Optional[int] = None


HeaderRule = Tuple[re.Pattern, Callable[[re.Match, str], SessionHeader]]


def _numbered_header(match: re.Match, line: str) -> SessionHeader:
    day_number = int(match.group(1))
    name = match.group(2).strip() if match.group(2) and match.group(2).strip() else f"Giorno {day_number}"
    return SessionHeader(name=name, day_number=day_number)


def _whole_line(match: re.Match, line: str) -> SessionHeader:
    return SessionHeader(name=line)


def build_header_rules(
    number_keywords: Sequence[str] = SESSION_NUMBER_KEYWORDS,
    weekdays: Sequence[str] = ITALIAN_WEEKDAYS,
    split_types: Sequence[str] = SPLIT_TYPES,
) -> List[HeaderRule]:
    return [
        # "Giorno 2: Gambe", "Day 1", "Sessione 3 - Push"
        (
            re.compile(r'(?:' + '|'.join(number_keywords) + r')\s*(\d+)[:\s]*(.+)?', re.IGNORECASE),
            _numbered_header,
        ),
        (re.compile(r'^(?:' + '|'.join(weekdays) + r')', re.IGNORECASE), _whole_line),
        (re.compile(r'^(?:' + '|'.join(split_types) + r')', re.IGNORECASE), _whole_line),
    ]


class SessionHeaderDetector:
    """Ordered session header rules with an all-caps catch-all"""

    MIN_CAPS_LENGTH = 3
    MAX_CAPS_LENGTH = 40

    def __init__(self, rules: Optional[List[HeaderRule]] = None):
        self.rules = rules if rules is not None else build_header_rules()

    def detect(self, line: str) -> Optional[SessionHeader]:
        for pattern, extract in self.rules:
            match = pattern.search(line)
            if match:
                return extract(match, line)

        if line == line.upper() and self.MIN_CAPS_LENGTH < len(line) < self.MAX_CAPS_LENGTH:
            return SessionHeader(name=line)

        return None
