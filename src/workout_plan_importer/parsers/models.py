"""
Parser Models

Pydantic models for the normalized workout plan that every parsing path
outputs to. Field aliases give the camelCase JSON shape consumed by clients.
"""

from typing import List, Optional, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_REST_SECONDS = 90
MIN_REST_SECONDS = 30
MAX_REST_SECONDS = 300


class ParsedExercise(BaseModel):
    """Normalized exercise structure from any parser"""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Exercise name as written in the source")
    sets: int = Field(..., ge=1)
    reps: str = Field(default="10", description="Reps as string to preserve ranges like '8-12'")
    weight: Optional[float] = Field(default=None, description="Load in kg")
    rest_seconds: int = Field(
        default=DEFAULT_REST_SECONDS,
        ge=MIN_REST_SECONDS,
        le=MAX_REST_SECONDS,
        alias="restSeconds",
    )
    notes: Optional[str] = None


class ParsedSession(BaseModel):
    """A training day: ordered exercises under a name"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    day_number: int = Field(..., ge=1, alias="dayNumber")
    exercises: List[ParsedExercise] = Field(default_factory=list)


class ParsedWorkout(BaseModel):
    """Root of the parsed plan"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    duration_weeks: Optional[int] = Field(default=None, alias="durationWeeks")
    frequency: Optional[int] = Field(default=None, description="Sessions per week")
    sessions: List[ParsedSession] = Field(default_factory=list)


class ParserResult(BaseModel):
    """Result from a parser: data on success, error on failure"""
    success: bool
    data: Optional[ParsedWorkout] = None
    error: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)

    def to_response(self) -> dict:
        """Dump to the camelCase JSON shape, dropping absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FormatDetection(BaseModel):
    """How sets and reps are laid out in a tabular source"""
    format: Literal["combined", "separate"] = "combined"
    has_rest_column: bool = False
    start_row: int = 1


class ColumnMap(BaseModel):
    """Column index per semantic role, -1 when the role is missing"""
    name: int = -1
    combined_sets_reps: int = -1
    sets: int = -1
    reps: int = -1
    weight: int = -1
    rest: int = -1
    notes: int = -1
    session: int = -1


class StructuredExtraction(BaseModel):
    """Sessions found through the header-mapped tabular path"""
    kind: Literal["structured"] = "structured"
    sessions: List[ParsedSession] = Field(default_factory=list)
    detection: FormatDetection
    columns: ColumnMap


class FreeFormExtraction(BaseModel):
    """Sessions found by the row-by-row tabular fallback"""
    kind: Literal["free_form"] = "free_form"
    sessions: List[ParsedSession] = Field(default_factory=list)


class TextExtraction(BaseModel):
    """Sessions found in already-extracted document text"""
    kind: Literal["text"] = "text"
    sessions: List[ParsedSession] = Field(default_factory=list)
    name: str
    duration_weeks: Optional[int] = None


Extraction = Union[StructuredExtraction, FreeFormExtraction, TextExtraction]


class FileInfo(BaseModel):
    """Information about the file being parsed"""
    filename: str
    extension: str
    size_bytes: int = 0
    content_type: Optional[str] = None
