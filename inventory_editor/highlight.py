"""
Low-stock highlight.

A row is painted solid yellow from column A through the column just past
the audit range. Detection only looks at the SKU cell.
"""

import logging
from typing import Optional

from .adapters import WorksheetAdapter
from .columns import MAX_COLUMN_INDEX
from .models import ColumnRange, Fill

logger = logging.getLogger(__name__)

HIGHLIGHT_COLOR = "FFFFFF00"
YELLOW = "FFFF00"


def is_highlight_fill(fill: Optional[Fill]) -> bool:
    """True for a solid fill whose colour contains FFFF00 (any case)."""
    if fill is None or fill.pattern != "solid" or not fill.fg_color:
        return False
    return YELLOW in fill.fg_color.upper()


def is_highlighted(
    sheet: Optional[WorksheetAdapter],
    row_number: int,
    sku_column: int,
) -> bool:
    """Whether the row is marked low-stock. A missing sheet is never highlighted."""
    if sheet is None:
        return False
    return is_highlight_fill(sheet.cell(row_number, sku_column).fill)


def set_highlighted(
    sheet: WorksheetAdapter,
    row_number: int,
    on: bool,
    audit_range: ColumnRange,
) -> None:
    """
    Paint or clear the row from column 1 through audit_range.end + 1,
    stopping at the last addressable column.

    Cells are written one at a time; a failure part way leaves the row
    partly painted.
    """
    fill = Fill.solid(HIGHLIGHT_COLOR) if on else Fill.none()
    last = min(audit_range.end + 1, MAX_COLUMN_INDEX)
    for column in range(1, last + 1):
        sheet.cell(row_number, column).fill = fill

    logger.info(
        f"Highlight {'set' if on else 'cleared'} on {sheet.name!r} row {row_number}"
    )
