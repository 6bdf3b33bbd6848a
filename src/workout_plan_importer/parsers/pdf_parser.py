"""
PDF Parser

Extracts the text layer of a PDF with pdfplumber and hands it to
TextParser. Image-only pages yield no text and end up rejected as scanned.
"""

import io
import logging

import pdfplumber

from .file_base import FileParser
from .models import FileInfo, ParserResult
from .text_parser import TextParser

logger = logging.getLogger(__name__)


class PDFParser(FileParser):
    """Parser for text-bearing PDF files"""

    extensions = ['.pdf']

    async def parse(self, content: bytes, file_info: FileInfo) -> ParserResult:
        """Parse PDF file and return normalized workout data"""
        too_large = self.check_size(content, file_info)
        if too_large:
            return too_large

        try:
            text = self.extract_text(content)
        except Exception as e:
            logger.exception(f"Failed to read PDF: {e}")
            return ParserResult(
                success=False,
                error=f"Errore durante la lettura del PDF: {str(e)}",
            )

        logger.info(f"Extracted {len(text)} characters from {file_info.filename}")
        return TextParser().parse(text)

    @staticmethod
    def extract_text(content: bytes) -> str:
        with pdfplumber.open(io.BytesIO(content)) as pdf:
            return "\n".join(page.extract_text() or "" for page in pdf.pages)


class PlainTextParser(PDFParser):
    """Parser for plain text files"""

    extensions = ['.txt', '.text']

    @staticmethod
    def extract_text(content: bytes) -> str:
        return FileParser.decode_content(content)
