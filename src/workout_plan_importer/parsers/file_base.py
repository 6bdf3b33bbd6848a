"""
File Parser base

Adapters that turn uploaded bytes into the grid or text the core parsers
read. Decoding failures come back as unsuccessful results, never raise.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from .models import FileInfo, ParserResult
from workout_plan_importer.config import settings

logger = logging.getLogger(__name__)


class ParserError(Exception):
    """Base error for the file parsing layer"""


class UnsupportedFileError(ParserError):
    """No adapter handles the file's extension"""


class FileParser(ABC):
    """Abstract base class for file adapters"""

    extensions: List[str] = []

    def can_parse(self, file_info: FileInfo) -> bool:
        """Check if this parser can handle the file"""
        return file_info.extension.lower() in self.extensions

    @abstractmethod
    async def parse(self, content: bytes, file_info: FileInfo) -> ParserResult:
        """
        Decode file content and parse it.

        Args:
            content: Raw file bytes
            file_info: Information about the file

        Returns:
            ParserResult with the parsed plan or an error
        """
        pass

    def check_size(self, content: bytes, file_info: FileInfo) -> ParserResult | None:
        """Failure result when the payload exceeds the configured cap"""
        if len(content) > settings.max_file_bytes:
            logger.error(f"{file_info.filename} is {len(content)} bytes, over the limit")
            return ParserResult(
                success=False,
                error=f"Il file supera la dimensione massima di {settings.MAX_FILE_MB}MB",
            )
        return None

    @staticmethod
    def decode_content(content: bytes) -> str:
        """Decode bytes to string"""
        encodings = ['utf-8-sig', 'utf-8', 'latin-1', 'cp1252']

        for encoding in encodings:
            try:
                return content.decode(encoding)
            except UnicodeDecodeError:
                continue

        return content.decode('utf-8', errors='replace')
