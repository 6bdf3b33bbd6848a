"""
Format Detector

Decides whether a sheet writes sets and reps together ("4x8" in one column)
or apart (a Sets column and a Reps column) by looking at the first data rows.
"""

import re
import logging
from typing import Any, List, Sequence

from .keywords import HEADER_ROW_TOKEN
from .models import FormatDetection
from .sets_reps import HAS_SETS_REPS
from workout_plan_importer.utils import cell_text

logger = logging.getLogger(__name__)

SAMPLE_ROWS = 5

COMBINED_HEADER_PATTERN = re.compile(r'serie\s*x\s*rip|set\s*x\s*rep|sxr', re.IGNORECASE)
INTEGER_CELL_PATTERN = re.compile(r'^\d+$')


class FormatDetector:
    """Combined vs separate layout detection from sparse evidence"""

    def __init__(
        self,
        sample_rows: int = SAMPLE_ROWS,
        header_row_token: str = HEADER_ROW_TOKEN,
        combined_header_pattern: re.Pattern = COMBINED_HEADER_PATTERN,
    ):
        self.sample_rows = sample_rows
        self.header_row_token = header_row_token
        self.combined_header_pattern = combined_header_pattern

    def detect(self, grid: Sequence[Sequence[Any]], headers: List[str]) -> FormatDetection:
        """
        Inspect rows 1..5 of the grid, header at row 0.

        The first row that decides wins. A sets x reps token anywhere in the
        row means combined; two consecutive integer cells among columns 1-3
        mean separate. Undecided samples fall back to the headers, then to
        combined, the more common layout.
        """
        last_row = min(self.sample_rows, len(grid) - 1)

        for row_num in range(1, last_row + 1):
            row = grid[row_num]
            if not row:
                continue

            values = [cell_text(cell) for cell in row]

            if not any(values):
                continue
            if self.header_row_token in values[0].lower():
                continue

            if any(HAS_SETS_REPS.search(value) for value in values):
                logger.info(f"Detected combined sets x reps format at row {row_num}")
                return FormatDetection(
                    format="combined",
                    has_rest_column=len(values) >= 4,
                    start_row=row_num,
                )

            consecutive = 0
            for value in values[1:min(len(values), 4)]:
                if INTEGER_CELL_PATTERN.match(value):
                    consecutive += 1
                    if consecutive >= 2:
                        logger.info(f"Detected separate sets/reps columns at row {row_num}")
                        return FormatDetection(
                            format="separate",
                            has_rest_column=len(values) >= 5,
                            start_row=row_num,
                        )
                else:
                    consecutive = 0

        if any(self.combined_header_pattern.search(header) for header in headers):
            logger.info("Detected combined format from headers")
            return FormatDetection(format="combined")

        logger.info("Could not detect sets/reps format, defaulting to combined")
        return FormatDetection(format="combined")
