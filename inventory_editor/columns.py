"""
Column address helpers.

Spreadsheet columns are labelled in bijective base 26: A=1 .. Z=26, AA=27.
There is no zero digit, so the inverse conversion shifts by one before each
division.
"""

import re

from openpyxl.utils.cell import coordinate_from_string
from openpyxl.utils.exceptions import CellCoordinatesException

_LETTERS_RE = re.compile(r"^[A-Z]+$")

# XFD, the last column an .xlsx sheet can address
MAX_COLUMN_INDEX = 16384


def column_index_of(letters: str) -> int:
    """
    Convert a column label to its 1-based index.

    Args:
        letters: One or more uppercase letters (e.g. "B", "AA")

    Returns:
        1-based column index
    """
    index = 0
    for char in letters:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index


def column_letters_of(index: int) -> str:
    """Convert a 1-based column index to its label (27 -> "AA")."""
    letters = ""
    while index > 0:
        remainder = (index - 1) % 26
        letters = chr(ord("A") + remainder) + letters
        index = (index - 1) // 26
    return letters


def is_column_label(value: str) -> bool:
    """True for one or more uppercase ASCII letters naming a column up to XFD."""
    if not (isinstance(value, str) and _LETTERS_RE.match(value)):
        return False
    return column_index_of(value) <= MAX_COLUMN_INDEX


def split_address(address: str) -> tuple[int, int]:
    """
    Split an A1-style address into (row, column).

    Raises:
        ValueError: if the address is not a valid cell reference
    """
    try:
        letters, row = coordinate_from_string(address.upper())
    except CellCoordinatesException as e:
        raise ValueError(f"Invalid cell address: {address!r}") from e
    return row, column_index_of(letters)
