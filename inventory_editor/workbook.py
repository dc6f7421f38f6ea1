"""
openpyxl-backed workbook document.

Loads an .xlsx twice from the same bytes: once with formulas and rich text
kept (this copy is edited and saved), once with data_only=True to read the
results Excel cached for each formula.
"""

import logging
from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from openpyxl import Workbook, load_workbook
from openpyxl.cell.rich_text import CellRichText, TextBlock
from openpyxl.styles import PatternFill
from openpyxl.worksheet.formula import ArrayFormula
from openpyxl.worksheet.worksheet import Worksheet

from .adapters import WorkbookDocument, WorksheetAdapter
from .models import CellValue, Fill, FormulaResult, RichText

logger = logging.getLogger(__name__)


def _to_cell_value(raw, cached) -> CellValue:
    """Map an openpyxl cell value onto the editor's value union."""
    if isinstance(raw, CellRichText):
        fragments = tuple(
            block.text if isinstance(block, TextBlock) else str(block)
            for block in raw
        )
        return RichText(fragments)
    if isinstance(raw, ArrayFormula):
        return FormulaResult(raw.text or "", cached)
    if isinstance(raw, str) and raw.startswith("="):
        return FormulaResult(raw, cached)
    return raw


def _from_cell_value(value: CellValue):
    """Map an editor value back to something openpyxl can store."""
    if isinstance(value, RichText):
        return CellRichText(*value.fragments)
    if isinstance(value, FormulaResult):
        return value.formula
    return value


class OpenpyxlSheet(WorksheetAdapter):
    """Adapter over one openpyxl worksheet."""

    def __init__(self, ws: Worksheet, cached: Optional[Worksheet] = None):
        self._ws = ws
        self._cached = cached
        # Results for formulas written through set_value; openpyxl never evaluates.
        self._written_results: dict[tuple[int, int], object] = {}

    @property
    def name(self) -> str:
        return self._ws.title

    @property
    def worksheet(self) -> Worksheet:
        return self._ws

    def row_numbers(self) -> range:
        return range(1, self._ws.max_row + 1)

    def _cached_result(self, row: int, column: int):
        if (row, column) in self._written_results:
            return self._written_results[(row, column)]
        if self._cached is None:
            return None
        return self._cached.cell(row=row, column=column).value

    def get_value(self, row: int, column: int) -> CellValue:
        raw = self._ws.cell(row=row, column=column).value
        if raw is None:
            return None
        return _to_cell_value(raw, self._cached_result(row, column))

    def set_value(self, row: int, column: int, value: CellValue) -> None:
        self._written_results.pop((row, column), None)
        if isinstance(value, FormulaResult):
            self._written_results[(row, column)] = value.result
        self._ws.cell(row=row, column=column).value = _from_cell_value(value)

    def get_fill(self, row: int, column: int) -> Optional[Fill]:
        fill = self._ws.cell(row=row, column=column).fill
        if not isinstance(fill, PatternFill):
            # Gradient fills carry no single foreground colour
            return Fill(pattern="gradient")
        if fill.fill_type is None:
            return None
        rgb = getattr(fill.fgColor, "rgb", None)
        if not isinstance(rgb, str):
            # Theme and indexed colours have no literal hex value
            rgb = None
        return Fill(pattern=fill.fill_type, fg_color=rgb)

    def set_fill(self, row: int, column: int, fill: Fill) -> None:
        cell = self._ws.cell(row=row, column=column)
        if fill.pattern == "none":
            cell.fill = PatternFill(fill_type=None)
        elif fill.fg_color:
            cell.fill = PatternFill(fill_type=fill.pattern, fgColor=fill.fg_color)
        else:
            cell.fill = PatternFill(fill_type=fill.pattern)


class OpenpyxlDocument(WorkbookDocument):
    """
    Workbook document backed by openpyxl.

    Usage:
        doc = OpenpyxlDocument.load(Path("stock.xlsx"))
        ...
        doc.save(Path("stock_modified.xlsx"))
    """

    def __init__(self, wb: Workbook, cached: Optional[Workbook] = None):
        self._wb = wb
        self._cached = cached
        self._sheets: dict[str, OpenpyxlSheet] = {}

    @classmethod
    def load(cls, source: Union[str, Path, bytes]) -> "OpenpyxlDocument":
        """
        Load a workbook from a path or raw bytes.

        Raises:
            FileNotFoundError: if a path is given and does not exist
        """
        if isinstance(source, bytes):
            data = source
        else:
            path = Path(source)
            if not path.exists():
                raise FileNotFoundError(f"Workbook not found: {path}")
            data = path.read_bytes()

        try:
            wb = load_workbook(BytesIO(data), data_only=False, rich_text=True)
            cached = load_workbook(BytesIO(data), data_only=True)
        except Exception as e:
            logger.error(f"Failed to load workbook: {e}")
            raise

        logger.info(f"Loaded workbook ({len(wb.sheetnames)} sheets)")
        return cls(wb, cached)

    @property
    def workbook(self) -> Workbook:
        return self._wb

    def sheet_names(self) -> list[str]:
        return list(self._wb.sheetnames)

    def get_sheet(self, name: str) -> Optional[OpenpyxlSheet]:
        if name not in self._wb.sheetnames:
            return None
        if name not in self._sheets:
            cached_ws = None
            if self._cached is not None and name in self._cached.sheetnames:
                cached_ws = self._cached[name]
            self._sheets[name] = OpenpyxlSheet(self._wb[name], cached_ws)
        return self._sheets[name]

    def to_bytes(self) -> bytes:
        output = BytesIO()
        self._wb.save(output)
        output.seek(0)
        return output.read()

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        self._wb.save(path)
        logger.info(f"Saved workbook to {path}")
        return path


def modified_filename(filename: str) -> str:
    """Name for the edited copy: stock.xlsx -> stock_modified.xlsx."""
    path = Path(filename)
    return f"{path.stem}_modified{path.suffix or '.xlsx'}"
