"""Utility functions for reading loosely-typed spreadsheet cells."""
import math
import re
from datetime import date, datetime, time
from typing import Any, Optional

# Leading number, like JavaScript's parseFloat: "60kg" -> 60, "3x8" -> 3
_LEADING_FLOAT_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_LEADING_INT_RE = re.compile(r'^\s*([+-]?\d+)')
_DURATION_RE = re.compile(r'(\d+(?:\.\d+)?)\s*(min|sec|s|m)?')


def cell_text(cell: Any) -> str:
    """Stringify a grid cell. Integral floats lose their decimal part."""
    if cell is None:
        return ""
    if isinstance(cell, bool):
        return "true" if cell else "false"
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    if isinstance(cell, (datetime, date, time)):
        return cell.isoformat()
    return str(cell).strip()


def parse_number(cell: Any) -> Optional[float]:
    """
    Parse a numeric cell with a comma or dot decimal separator.

    Returns None (never 0) when the cell is empty or has no leading number,
    so an absent value stays distinguishable from a real zero.
    """
    if cell is None or isinstance(cell, bool):
        return None
    if isinstance(cell, float):
        return cell if math.isfinite(cell) else None
    if isinstance(cell, int):
        cell = str(cell)
    if not isinstance(cell, str):
        return None

    text = cell.strip().replace(",", ".", 1)
    match = _LEADING_FLOAT_RE.match(text)
    if not match:
        return None

    # "1e400" parses to inf, which no count or duration can hold
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_rest_time(cell: Any) -> Optional[int]:
    """
    Parse a rest duration into seconds.

    "2 min" and "2m" are minutes, "90", "90s" and "90 sec" are seconds.
    """
    if not cell:
        return None

    text = cell_text(cell).lower()
    match = _DURATION_RE.search(text)
    if match:
        value = float(match.group(1))
        unit = match.group(2)
        if unit in ("min", "m"):
            value *= 60
        return int(round(value)) if math.isfinite(value) else None

    value = parse_number(cell)
    if value is not None and value > 0:
        return int(round(value))
    return None


def leading_int(text: Optional[str]) -> Optional[int]:
    """Integer prefix of a string ("45-60" -> 45), None when there is none."""
    if text is None:
        return None
    match = _LEADING_INT_RE.match(str(text))
    return int(match.group(1)) if match else None


def clamp_rest(seconds: Optional[float], default: int = 90, low: int = 30, high: int = 300) -> int:
    """Keep rest in [low, high]; anything missing or outside becomes the default."""
    if not seconds:
        return default
    if seconds < low or seconds > high:
        return default
    return int(seconds)
