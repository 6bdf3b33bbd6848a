"""
Text Parser

Parses plain text already extracted from a document (a text-bearing PDF,
a .txt file). Scanned documents arrive with little or no text and are
rejected before extraction; OCR is not attempted here.
"""

import logging
from typing import List, Optional

from .base import MIN_SESSION_EXERCISES, BaseParser
from .models import ParsedWorkout, ParserResult
from .text_lines import TextLineExtractor
from workout_plan_importer.config import settings

logger = logging.getLogger(__name__)

# Sets above this in free text are more often a misread than a real prescription
MAX_PLAUSIBLE_SETS = 10

SCANNED_DOCUMENT_ERROR = (
    "Questo PDF non contiene testo leggibile. Per importare la scheda:\n\n"
    "1️⃣ Ricrea il file in Excel\n"
    "2️⃣ Oppure usa un PDF creato direttamente da Word/Google Docs\n"
    "3️⃣ Se hai una foto della scheda, riscrivila manualmente (per ora)"
)


class TextParser(BaseParser):
    """Parser for extracted document text"""

    NO_SESSIONS_ERROR = "Nessuna sessione di allenamento trovata nel PDF"
    EMPTY_ERROR = "Il PDF sembra vuoto o non contiene testo leggibile"

    def __init__(
        self,
        extractor: Optional[TextLineExtractor] = None,
        min_text_length: Optional[int] = None,
    ):
        super().__init__()
        self.extractor = extractor or TextLineExtractor()
        self.min_text_length = (
            min_text_length if min_text_length is not None else settings.MIN_TEXT_LENGTH
        )

    def parse(self, text: Optional[str]) -> ParserResult:
        """Parse extracted text into sessions"""
        self.reset()

        try:
            if not text or not text.strip():
                return self.failure(self.EMPTY_ERROR)

            if len(text) < self.min_text_length:
                logger.info(f"Text too short ({len(text)} chars), likely a scanned document")
                return self.failure(SCANNED_DOCUMENT_ERROR)

            extraction = self.extractor.extract(text)
            logger.debug(f"Workout name: {extraction.name}, weeks: {extraction.duration_weeks}")

            return self.assemble(
                extraction,
                name=extraction.name,
                duration_weeks=extraction.duration_weeks,
            )

        except Exception as e:
            logger.exception(f"Failed to parse text: {e}")
            return self.failure(f"Errore durante la lettura del PDF: {str(e)}")

    def generate_warnings(self, workout: ParsedWorkout) -> List[str]:
        """Session size warnings plus a per-exercise check on suspicious set counts"""
        for session in workout.sessions:
            if len(session.exercises) < MIN_SESSION_EXERCISES:
                self.add_warning(
                    f'La sessione "{session.name}" ha solo {len(session.exercises)} esercizi'
                )
            for exercise in session.exercises:
                if exercise.sets > MAX_PLAUSIBLE_SETS:
                    self.add_warning(
                        f'L\'esercizio "{exercise.name}" ha {exercise.sets} serie '
                        f'(potrebbe essere un errore)'
                    )
        return self.warnings


def parse_text(text: str) -> ParserResult:
    """Parse text with a fresh parser, safe to call from concurrent tasks."""
    return TextParser().parse(text)
