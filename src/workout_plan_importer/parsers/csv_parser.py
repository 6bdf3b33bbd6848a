"""
CSV Parser

Decodes a CSV export into a grid, picking the most frequent delimiter (comma,
semicolon, tab), and hands it to GridParser.
"""

import io
import csv
import logging
from typing import List

from .file_base import FileParser
from .grid_parser import GridParser
from .models import FileInfo, ParserResult

logger = logging.getLogger(__name__)

SAMPLE_LINES = 5


class CSVParser(FileParser):
    """Parser for CSV files"""

    extensions = ['.csv']

    async def parse(self, content: bytes, file_info: FileInfo) -> ParserResult:
        """Parse CSV file and return normalized workout data"""
        too_large = self.check_size(content, file_info)
        if too_large:
            return too_large

        try:
            text = self.decode_content(content)
            grid = self.text_to_grid(text)
        except csv.Error as e:
            logger.exception(f"Failed to read CSV file: {e}")
            return ParserResult(
                success=False,
                error=f"Errore durante la lettura del file CSV: {str(e)}",
            )

        return GridParser().parse(grid)

    @classmethod
    def text_to_grid(cls, text: str) -> List[List[str]]:
        delimiter = cls.detect_delimiter(text)
        return [row for row in csv.reader(io.StringIO(text), delimiter=delimiter)]

    @staticmethod
    def detect_delimiter(text: str) -> str:
        """Most frequent of comma, semicolon and tab in the first lines"""
        sample = '\n'.join(text.split('\n')[:SAMPLE_LINES])

        delimiters = {
            ',': sample.count(','),
            ';': sample.count(';'),
            '\t': sample.count('\t'),
        }

        return max(delimiters, key=delimiters.get)
