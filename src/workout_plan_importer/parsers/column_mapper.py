"""
Column Mapper

Maps lower-cased header cells to semantic column roles using the bilingual
keyword tables.
"""

import logging
from typing import Dict, List, Literal, Sequence, Tuple

from .keywords import COLUMN_KEYWORDS
from .models import ColumnMap

logger = logging.getLogger(__name__)


class ColumnMapper:
    """Header keyword matching, first matching header per role wins"""

    def __init__(self, keywords: Dict[str, Tuple[str, ...]] = COLUMN_KEYWORDS):
        self.keywords = keywords

    @staticmethod
    def find_column_index(headers: Sequence[str], keywords: Sequence[str]) -> int:
        """Index of the first header containing any keyword, -1 if none does."""
        for index, header in enumerate(headers):
            if any(keyword in header for keyword in keywords):
                return index
        return -1

    def map_columns(self, headers: List[str], layout: Literal["combined", "separate"]) -> ColumnMap:
        columns = ColumnMap(
            name=self.find_column_index(headers, self.keywords["name"]),
            weight=self.find_column_index(headers, self.keywords["weight"]),
            rest=self.find_column_index(headers, self.keywords["rest"]),
            notes=self.find_column_index(headers, self.keywords["notes"]),
            session=self.find_column_index(headers, self.keywords["session"]),
        )

        if layout == "combined":
            columns.combined_sets_reps = self.find_column_index(
                headers, self.keywords["combined_sets_reps"]
            )
            # No explicit header: sets x reps usually sits right after the name
            if columns.combined_sets_reps == -1 and columns.name != -1:
                columns.combined_sets_reps = columns.name + 1
        else:
            columns.sets = self.find_column_index(headers, self.keywords["sets"])
            columns.reps = self.find_column_index(headers, self.keywords["reps"])

        logger.debug(f"Column mapping ({layout}): {columns.model_dump()}")
        return columns
