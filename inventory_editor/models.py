"""
Data models for the Inventory Editor.

Cell values are a tagged union: plain scalars (str, int, float, dates),
RichText (fragments that render as one string) and FormulaResult (a formula
paired with its last computed value). Everything else here is a small
dataclass handed back to callers.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Optional, Union

from .columns import MAX_COLUMN_INDEX, column_index_of, column_letters_of


@dataclass(frozen=True)
class RichText:
    """Text split into formatted runs. Only the run text matters here."""
    fragments: tuple[str, ...] = ()


@dataclass(frozen=True)
class FormulaResult:
    """A formula together with the value it last evaluated to."""
    formula: str
    result: Optional["Scalar"] = None


Scalar = Union[str, int, float, bool, date, datetime, time]
CellValue = Union[None, Scalar, RichText, FormulaResult]


@dataclass(frozen=True)
class Fill:
    """
    Background fill of a cell.

    pattern is "none", "solid" or another pattern name; fg_color is an
    AARRGGBB hex string when the pattern carries a foreground colour.
    """
    pattern: str = "none"
    fg_color: Optional[str] = None

    @classmethod
    def solid(cls, color: str) -> "Fill":
        return cls(pattern="solid", fg_color=color)

    @classmethod
    def none(cls) -> "Fill":
        return cls(pattern="none")


@dataclass(frozen=True)
class ColumnRange:
    """Inclusive [start, end] range of 1-based column indices."""
    start: int
    end: int

    def __post_init__(self):
        if self.start < 1:
            raise ValueError(f"Column range must start at 1 or later, got {self.start}")
        if self.start > self.end:
            raise ValueError(
                f"Column range start {self.start} is after end {self.end}"
            )
        if self.end > MAX_COLUMN_INDEX:
            raise ValueError(f"Column range end {self.end} is past the last column (XFD)")

    @classmethod
    def from_letters(cls, start: str, end: str) -> "ColumnRange":
        return cls(column_index_of(start), column_index_of(end))

    def __iter__(self):
        return iter(range(self.start, self.end + 1))

    def __contains__(self, column: int) -> bool:
        return self.start <= column <= self.end

    @property
    def label(self) -> str:
        """Human form, e.g. "L-T"."""
        return f"{column_letters_of(self.start)}-{column_letters_of(self.end)}"


@dataclass
class MatchRecord:
    """One row located by a SKU search."""
    sheet_name: str
    row_number: int
    sku: CellValue
    quantity: CellValue


@dataclass
class QuantityChange:
    """What a save-quantity call wrote to a row."""
    sheet_name: str
    row_number: int
    old_quantity: int
    new_quantity: int
    audit_column: Optional[int] = None
    audit_entry: Optional[str] = None

    @property
    def delta(self) -> int:
        return self.new_quantity - self.old_quantity

    @property
    def audit_letters(self) -> Optional[str]:
        if self.audit_column is None:
            return None
        return column_letters_of(self.audit_column)


class OutcomeKind(Enum):
    """
    Result kinds reported to callers.

    CONFIGURATION_ERROR and VALIDATION_ERROR abort before any write.
    AUDIT_SLOT_UNAVAILABLE is reported after the quantity was written.
    """
    OK = "OK"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUDIT_SLOT_UNAVAILABLE = "AUDIT_SLOT_UNAVAILABLE"


@dataclass
class Outcome:
    """
    Structured result of one editor operation.

    Only the payload field matching the operation is filled in.
    """
    kind: OutcomeKind
    message: str = ""
    matches: list[MatchRecord] = field(default_factory=list)
    change: Optional[QuantityChange] = None
    highlighted: Optional[bool] = None
    header_text: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when nothing was refused. A full audit range still counts."""
        return self.kind in (OutcomeKind.OK, OutcomeKind.AUDIT_SLOT_UNAVAILABLE)
