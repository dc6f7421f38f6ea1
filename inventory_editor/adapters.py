"""
Document adapters - the spreadsheet the editor works on.

The editor only needs a handful of operations: list sheets, find a sheet,
walk its rows, and read/write a cell's value and fill. The adapter pattern
keeps openpyxl (workbook.py) out of the core and lets tests build documents
in memory.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .columns import column_letters_of, split_address
from .models import CellValue, Fill


class WorksheetAdapter(ABC):
    """One sheet: 1-based rows and columns, values and fills."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def row_numbers(self) -> Iterable[int]:
        """Row numbers that may hold data, in increasing order."""
        pass

    @abstractmethod
    def get_value(self, row: int, column: int) -> CellValue:
        pass

    @abstractmethod
    def set_value(self, row: int, column: int, value: CellValue) -> None:
        pass

    @abstractmethod
    def get_fill(self, row: int, column: int) -> Optional[Fill]:
        pass

    @abstractmethod
    def set_fill(self, row: int, column: int, fill: Fill) -> None:
        pass

    def row(self, number: int) -> "Row":
        return Row(self, number)

    def cell(self, row: int, column: int) -> "Cell":
        return Cell(self, row, column)

    def cell_at(self, address: str) -> "Cell":
        """Cell by A1-style address, e.g. "G1"."""
        row, column = split_address(address)
        return Cell(self, row, column)

    def iter_rows(self) -> Iterator["Row"]:
        for number in self.row_numbers():
            yield Row(self, number)


class WorkbookDocument(ABC):
    """An ordered collection of uniquely named sheets."""

    @abstractmethod
    def sheet_names(self) -> list[str]:
        pass

    @abstractmethod
    def get_sheet(self, name: str) -> Optional[WorksheetAdapter]:
        """Sheet by exact (case-sensitive) name, or None."""
        pass

    def sheets(self) -> Iterator[WorksheetAdapter]:
        for name in self.sheet_names():
            sheet = self.get_sheet(name)
            if sheet is not None:
                yield sheet


@dataclass
class Cell:
    """View of one cell; reads and writes go straight to the sheet."""
    sheet: WorksheetAdapter
    row: int
    column: int

    @property
    def value(self) -> CellValue:
        return self.sheet.get_value(self.row, self.column)

    @value.setter
    def value(self, value: CellValue) -> None:
        self.sheet.set_value(self.row, self.column, value)

    @property
    def fill(self) -> Optional[Fill]:
        return self.sheet.get_fill(self.row, self.column)

    @fill.setter
    def fill(self, fill: Fill) -> None:
        self.sheet.set_fill(self.row, self.column, fill)

    @property
    def coordinate(self) -> str:
        return f"{column_letters_of(self.column)}{self.row}"


@dataclass
class Row:
    """View of one row of a sheet."""
    sheet: WorksheetAdapter
    number: int

    def cell(self, column: int) -> Cell:
        return Cell(self.sheet, self.number, column)


class InMemorySheet(WorksheetAdapter):
    """Dict-backed sheet for tests and programmatic setup."""

    def __init__(self, name: str):
        self._name = name
        self._values: dict[tuple[int, int], CellValue] = {}
        self._fills: dict[tuple[int, int], Fill] = {}

    @property
    def name(self) -> str:
        return self._name

    def row_numbers(self) -> list[int]:
        return sorted({row for row, _ in self._values})

    def get_value(self, row: int, column: int) -> CellValue:
        return self._values.get((row, column))

    def set_value(self, row: int, column: int, value: CellValue) -> None:
        if value is None:
            self._values.pop((row, column), None)
        else:
            self._values[(row, column)] = value

    def get_fill(self, row: int, column: int) -> Optional[Fill]:
        return self._fills.get((row, column))

    def set_fill(self, row: int, column: int, fill: Fill) -> None:
        self._fills[(row, column)] = fill

    def set(self, address: str, value: CellValue) -> "InMemorySheet":
        """Write a value by address. Returns self so setup can chain."""
        self.cell_at(address).value = value
        return self


class InMemoryDocument(WorkbookDocument):
    """In-memory workbook. Sheets keep insertion order."""

    def __init__(self, sheets: Optional[list[InMemorySheet]] = None):
        self._sheets: dict[str, InMemorySheet] = {}
        for sheet in sheets or []:
            self._sheets[sheet.name] = sheet

    def add_sheet(self, name: str) -> InMemorySheet:
        if name in self._sheets:
            raise ValueError(f'Sheet "{name}" already exists')
        sheet = InMemorySheet(name)
        self._sheets[name] = sheet
        return sheet

    def sheet_names(self) -> list[str]:
        return list(self._sheets)

    def get_sheet(self, name: str) -> Optional[InMemorySheet]:
        return self._sheets.get(name)
