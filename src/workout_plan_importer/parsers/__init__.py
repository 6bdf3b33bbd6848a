"""
Plan parsers

Core parsers read an already decoded grid or text; file parsers decode
uploaded bytes first and delegate to them.
"""

from typing import List, Optional

from .models import (
    ColumnMap,
    FileInfo,
    FormatDetection,
    ParsedExercise,
    ParsedSession,
    ParsedWorkout,
    ParserResult,
)
from .grid_parser import GridParser, parse_grid
from .text_parser import TextParser, parse_text
from .file_base import FileParser, ParserError, UnsupportedFileError
from .excel_parser import ExcelParser
from .csv_parser import CSVParser
from .pdf_parser import PDFParser, PlainTextParser


class FileParserFactory:
    """Picks the file parser for an upload by extension"""

    PARSERS = [ExcelParser, CSVParser, PDFParser, PlainTextParser]

    @classmethod
    def get_parser(cls, file_info: FileInfo) -> FileParser:
        for parser_cls in cls.PARSERS:
            parser = parser_cls()
            if parser.can_parse(file_info):
                return parser
        raise UnsupportedFileError(
            f"Formato file non supportato: {file_info.extension or file_info.filename}"
        )

    @classmethod
    def supported_extensions(cls) -> List[str]:
        return [ext for parser_cls in cls.PARSERS for ext in parser_cls.extensions]

    @classmethod
    async def parse_file(
        cls,
        content: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> ParserResult:
        """Parse an uploaded file end to end."""
        file_info = FileInfo(
            filename=filename,
            extension=_extension(filename),
            size_bytes=len(content),
            content_type=content_type,
        )
        parser = cls.get_parser(file_info)
        return await parser.parse(content, file_info)


def _extension(filename: str) -> str:
    dot = filename.rfind(".")
    return filename[dot:].lower() if dot != -1 else ""


__all__ = [
    "ColumnMap",
    "CSVParser",
    "ExcelParser",
    "FileInfo",
    "FileParser",
    "FileParserFactory",
    "FormatDetection",
    "GridParser",
    "ParsedExercise",
    "ParsedSession",
    "ParsedWorkout",
    "ParserError",
    "ParserResult",
    "PDFParser",
    "PlainTextParser",
    "TextParser",
    "UnsupportedFileError",
    "parse_grid",
    "parse_text",
]
