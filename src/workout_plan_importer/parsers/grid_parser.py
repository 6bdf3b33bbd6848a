"""
Grid Parser

Parses a 2-D grid of cell values (first sheet of a workbook, a CSV) with
support for:
- Combined ("4x8") vs separate sets/reps layout detection
- Bilingual header-to-column mapping
- Free-form fallback when no exercise column can be found
- Isometric exercise normalization
"""

import logging
from typing import Any, List, Optional, Sequence

from .base import BaseParser
from .column_mapper import ColumnMapper
from .format_detector import FormatDetector
from .free_form import FreeFormExtractor
from .keywords import DEFAULT_WORKOUT_NAME, PLAN_NAME_KEYWORDS
from .models import ParserResult
from .structured import StructuredRowExtractor
from workout_plan_importer.utils import cell_text

logger = logging.getLogger(__name__)

NAME_SCAN_ROWS = 3


class GridParser(BaseParser):
    """Parser for spreadsheet-like grids"""

    NO_SESSIONS_ERROR = "Nessuna sessione di allenamento trovata nel file Excel"
    EMPTY_ERROR = "Il file non contiene dati"

    def __init__(
        self,
        detector: Optional[FormatDetector] = None,
        mapper: Optional[ColumnMapper] = None,
        structured: Optional[StructuredRowExtractor] = None,
        free_form: Optional[FreeFormExtractor] = None,
    ):
        super().__init__()
        self.detector = detector or FormatDetector()
        self.mapper = mapper or ColumnMapper()
        self.structured = structured or StructuredRowExtractor()
        self.free_form = free_form or FreeFormExtractor()

    def parse(self, grid: Sequence[Sequence[Any]], sheet_name: Optional[str] = None) -> ParserResult:
        """Parse grid rows, header expected at row 0"""
        self.reset()

        try:
            if not grid or not any(any(cell_text(c) for c in row or []) for row in grid):
                return self.failure(self.EMPTY_ERROR)

            headers = [cell_text(h).lower().strip() for h in (grid[0] or [])]
            logger.debug(f"Headers detected: {headers}")

            detection = self.detector.detect(grid, headers)
            columns = self.mapper.map_columns(headers, detection.format)

            if columns.name == -1:
                # Not an error: sheets without headers are common
                logger.info("Exercise column not found, falling back to free-form parsing")
                extraction = self.free_form.extract(grid)
            else:
                extraction = self.structured.extract(grid, columns, detection)

            return self.assemble(extraction, name=self.extract_workout_name(grid, sheet_name))

        except Exception as e:
            logger.exception(f"Failed to parse grid: {e}")
            return self.failure(f"Errore durante la lettura del file Excel: {str(e)}")

    def extract_workout_name(self, grid: Sequence[Sequence[Any]], fallback: Optional[str] = None) -> str:
        """Title from the first cell of the first rows, else the sheet name"""
        for row in grid[:NAME_SCAN_ROWS]:
            if not row:
                continue
            cell = cell_text(row[0])
            if 5 < len(cell) < 100 and any(k in cell.lower() for k in PLAN_NAME_KEYWORDS):
                return cell
        return fallback or DEFAULT_WORKOUT_NAME


def parse_grid(grid: List[List[Any]], sheet_name: Optional[str] = None) -> ParserResult:
    """Parse a grid with a fresh parser, safe to call from concurrent tasks."""
    return GridParser().parse(grid, sheet_name=sheet_name)
