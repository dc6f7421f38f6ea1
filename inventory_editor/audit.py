"""
Audit trail for quantity changes.

Each change writes "D/M/YY-N" (no zero padding, N = size of the change)
into the first empty column of the audit range, then blanks the column
after it so the next free slot is easy to spot. Downstream readers parse
this text by eye and by script, so the format is fixed.
"""

import logging
from datetime import date
from typing import Any, Optional

from .adapters import Row, WorksheetAdapter
from .cells import coerce_quantity, is_empty, parse_leading_int, resolve
from .columns import MAX_COLUMN_INDEX
from .errors import QuantityValidationError
from .models import ColumnRange, QuantityChange

logger = logging.getLogger(__name__)

HEADER_PREFIX = "Date Changed"


def format_date(day: date) -> str:
    """Format as D/M/YY, e.g. 5/1/25."""
    return f"{day.day}/{day.month}/{str(day.year)[-2:]}"


def compute_audit_entry(day: date, quantity_delta: int) -> str:
    """Audit text for a change, e.g. 16/12/25-3. The sign is dropped."""
    return f"{format_date(day)}-{abs(quantity_delta)}"


def allocate(row: Row, audit_range: ColumnRange) -> Optional[int]:
    """
    Find the first empty column in the audit range.

    Returns:
        Column index, or None when every column is filled
    """
    for column in audit_range:
        if is_empty(resolve(row.cell(column))):
            return column
    return None


def parse_new_quantity(value: Any) -> int:
    """
    Validate a quantity typed by the user.

    Raises:
        QuantityValidationError: if missing, non-numeric or negative
    """
    if isinstance(value, str):
        value = value.strip()
    quantity = parse_leading_int(value)
    if quantity is None or quantity < 0:
        raise QuantityValidationError("Please enter a valid quantity")
    return quantity


def apply_quantity_change(
    row: Row,
    new_quantity: int,
    quantity_column: int,
    audit_range: ColumnRange,
    today: date,
) -> QuantityChange:
    """
    Write a new quantity and log the change in the audit range.

    The quantity is always written. When the audit range is full the
    returned change has no audit_column and nothing else is touched.
    """
    quantity_cell = row.cell(quantity_column)
    old_quantity = coerce_quantity(resolve(quantity_cell))
    quantity_cell.value = new_quantity

    change = QuantityChange(
        sheet_name=row.sheet.name,
        row_number=row.number,
        old_quantity=old_quantity,
        new_quantity=new_quantity,
    )

    column = allocate(row, audit_range)
    if column is None:
        logger.warning(
            f"No empty audit column in {audit_range.label} for "
            f"{row.sheet.name!r} row {row.number}"
        )
        return change

    entry = compute_audit_entry(today, change.delta)
    row.cell(column).value = entry

    clear_column = column + 1
    if clear_column <= min(audit_range.end + 1, MAX_COLUMN_INDEX):
        row.cell(clear_column).value = None

    change.audit_column = column
    change.audit_entry = entry
    logger.info(
        f"Qty {old_quantity}->{new_quantity} on {row.sheet.name!r} row {row.number}, "
        f"audit {entry!r} in column {change.audit_letters}"
    )
    return change


def header_text(name: str, day: date) -> str:
    return f"{HEADER_PREFIX} - {format_date(day)} {name}"


def update_header(sheet: WorksheetAdapter, address: str, name: str, day: date) -> str:
    """
    Stamp the sheet's header cell with who changed it and when.

    Returns:
        The text written
    """
    text = header_text(name, day)
    sheet.cell_at(address).value = text
    logger.info(f"Header {sheet.name}!{address} set to {text!r}")
    return text
