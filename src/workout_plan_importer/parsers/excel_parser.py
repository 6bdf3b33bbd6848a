"""
Excel Parser

Reads the first sheet of an .xlsx workbook into a grid and hands it to
GridParser. Cached formula results are used, not the formulas.
"""

import io
import logging
from typing import Any, List, Optional, Tuple

from openpyxl import load_workbook
from openpyxl.worksheet.worksheet import Worksheet

from .file_base import FileParser
from .grid_parser import GridParser
from .models import FileInfo, ParserResult

logger = logging.getLogger(__name__)


class ExcelParser(FileParser):
    """Parser for Excel (.xlsx) files"""

    extensions = ['.xlsx', '.xlsm']

    async def parse(self, content: bytes, file_info: FileInfo) -> ParserResult:
        """Parse Excel file and return normalized workout data"""
        too_large = self.check_size(content, file_info)
        if too_large:
            return too_large

        try:
            sheet_name, grid = self.read_first_sheet(content)
        except Exception as e:
            logger.exception(f"Failed to read Excel file: {e}")
            return ParserResult(
                success=False,
                error=f"Errore durante la lettura del file Excel: {str(e)}",
            )

        if sheet_name is None:
            return ParserResult(success=False, error="Il file Excel non contiene fogli")

        logger.info(f"Parsing sheet '{sheet_name}' with {len(grid)} rows")
        return GridParser().parse(grid, sheet_name=sheet_name)

    def read_first_sheet(self, content: bytes) -> Tuple[Optional[str], List[List[Any]]]:
        wb = load_workbook(io.BytesIO(content), data_only=True, read_only=True)
        try:
            logger.info(f"Sheet names: {wb.sheetnames}")
            if not wb.sheetnames:
                return None, []
            sheet_name = wb.sheetnames[0]
            return sheet_name, self.sheet_to_grid(wb[sheet_name])
        finally:
            wb.close()

    @staticmethod
    def sheet_to_grid(ws: Worksheet) -> List[List[Any]]:
        """Row values with trailing empty cells trimmed"""
        grid = []
        for values in ws.iter_rows(values_only=True):
            row = list(values)
            while row and (row[-1] is None or (isinstance(row[-1], str) and not row[-1].strip())):
                row.pop()
            grid.append(row)

        # Drop trailing blank rows some editors leave at the sheet end
        while grid and not grid[-1]:
            grid.pop()
        return grid
