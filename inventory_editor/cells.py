"""
Cell value resolution.

A resolved value is what a user sees in the cell: rich text is flattened,
formulas are replaced by their last result, empty cells become "".
Search and audit-slot checks compare resolved values only.
"""

import math
import re
from typing import Any, Optional

from .models import CellValue, FormulaResult, RichText

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def resolve_value(raw: CellValue) -> Any:
    """Resolve a raw cell value (see module docstring)."""
    if raw is None:
        return ""
    if isinstance(raw, RichText):
        return "".join(raw.fragments)
    if isinstance(raw, FormulaResult):
        return "" if raw.result is None else raw.result
    return raw


def resolve(cell: Optional[Any]) -> Any:
    """
    Resolve a cell view (anything with a .value) to its display value.

    Returns "" for a missing cell.
    """
    if cell is None:
        return ""
    return resolve_value(cell.value)


def is_empty(value: Any) -> bool:
    """True for the empty-equivalents "" and None."""
    return value is None or value == ""


def display_text(value: Any) -> str:
    """
    String form used for identifier comparison.

    Integral floats drop the trailing ".0" so a SKU typed as 12345 matches
    a cell Excel stored as 12345.0.
    """
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_leading_int(value: Any) -> Optional[int]:
    """
    Read an integer the way a lenient form field does.

    Integers pass through, finite floats truncate toward zero, strings use
    their leading run of digits ("47 cs" -> 47). Anything else is None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if match:
            return int(match.group(1))
    return None


def coerce_quantity(value: Any) -> int:
    """Stored quantity as an int. Missing or non-numeric counts as 0."""
    return parse_leading_int(resolve_value(value)) or 0
