"""
Base Parser

Shared warning generation and result assembly for the grid and text parsers.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from .models import (
    Extraction,
    ParsedWorkout,
    ParserResult,
)

logger = logging.getLogger(__name__)

# Sessions with fewer exercises than this get an advisory warning
MIN_SESSION_EXERCISES = 3


class BaseParser(ABC):
    """
    Abstract base class for plan parsers.

    A parser instance collects errors and warnings for the call in progress
    and resets them at the start of every parse(), so reuse is safe but
    sharing one instance between threads is not.
    """

    NO_SESSIONS_ERROR = "Nessuna sessione di allenamento trovata"

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    @abstractmethod
    def parse(self, source: Any) -> ParserResult:
        """
        Parse an already decoded source into a normalized plan.

        Returns:
            ParserResult with data and advisory warnings, or an error
        """
        pass

    def reset(self):
        self.errors = []
        self.warnings = []

    def generate_warnings(self, workout: ParsedWorkout) -> List[str]:
        """Data-quality advisories. They never turn a result into a failure."""
        for session in workout.sessions:
            if len(session.exercises) < MIN_SESSION_EXERCISES:
                self.add_warning(
                    f'La sessione "{session.name}" ha solo {len(session.exercises)} esercizi'
                )
        return self.warnings

    def assemble(
        self,
        extraction: Extraction,
        name: str,
        duration_weeks: Optional[int] = None,
    ) -> ParserResult:
        """Turn the output of any extraction path into the final result."""
        sessions = extraction.sessions
        logger.info(f"{extraction.kind} extraction produced {len(sessions)} sessions")

        if not sessions:
            return self.failure(self.NO_SESSIONS_ERROR)

        workout = ParsedWorkout(
            name=name,
            duration_weeks=duration_weeks,
            frequency=len(sessions),
            sessions=sessions,
        )

        return ParserResult(
            success=True,
            data=workout,
            warnings=list(self.generate_warnings(workout)),
        )

    def failure(self, error: str) -> ParserResult:
        self.add_error(error)
        return ParserResult(success=False, error=error)

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        logger.error(f"Parser error: {error}")

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)
        logger.warning(f"Parser warning: {warning}")
