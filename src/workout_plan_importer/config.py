"""Configuration settings for the workout plan importer."""
import os
import logging


class Settings:
    """Application settings."""

    LOG_LEVEL: str = "INFO"

    # Extracted text shorter than this is treated as a scanned document
    MIN_TEXT_LENGTH: int = 100

    # Upload size cap enforced by the document adapters
    MAX_FILE_MB: int = 50

    def __init__(self):
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Parser limits
        self.MIN_TEXT_LENGTH = _int_env("PLAN_IMPORT_MIN_TEXT_LENGTH", 100)
        self.MAX_FILE_MB = _int_env("PLAN_IMPORT_MAX_FILE_MB", 50)

    @property
    def max_file_bytes(self) -> int:
        return self.MAX_FILE_MB * 1024 * 1024


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the package loggers."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("workout_plan_importer").setLevel(level or settings.LOG_LEVEL)


settings = Settings()
