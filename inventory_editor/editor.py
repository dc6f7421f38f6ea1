"""
Inventory Editor workflows.

Wraps the core operations (search, save quantity, toggle highlight, stamp
header) for a UI or API caller. Every call returns an Outcome; refused
operations are reported, not raised, and never leave partial writes.

Usage:
    editor = InventoryEditor(OpenpyxlDocument.load(path), load_config())
    outcome = editor.search("SKU001")
    editor.save_quantity(outcome.matches[0].sheet_name, outcome.matches[0].row_number, 47)
"""

import logging
from datetime import date
from typing import Any, Callable, Optional

from .adapters import WorkbookDocument, WorksheetAdapter
from .audit import apply_quantity_change, parse_new_quantity, update_header
from .config import EditorConfig
from .errors import EditorError, InputValidationError, SheetNotFoundError
from .highlight import is_highlighted, set_highlighted
from .locator import SearchScope, locate
from .models import Outcome, OutcomeKind

logger = logging.getLogger(__name__)


class InventoryEditor:
    """Editor bound to one document and one configuration."""

    def __init__(
        self,
        document: WorkbookDocument,
        config: Optional[EditorConfig] = None,
        today: Callable[[], date] = date.today,
    ):
        self.document = document
        self.config = config or EditorConfig()
        self._today = today

    def _require_sheet(self, sheet_name: Optional[str]) -> WorksheetAdapter:
        name = sheet_name or self.config.header_sheet
        sheet = self.document.get_sheet(name)
        if sheet is None:
            raise SheetNotFoundError(name)
        return sheet

    @staticmethod
    def _refused(error: EditorError) -> Outcome:
        logger.warning(f"{error.kind.value}: {error}")
        return Outcome(kind=error.kind, message=str(error))

    def search(self, query: str, scope: Optional[SearchScope] = None) -> Outcome:
        """Find rows by SKU. Zero matches is a normal OK outcome."""
        try:
            sku = (query or "").strip()
            if not sku:
                raise InputValidationError("Please enter a SKU to search")
            matches = locate(self.document, sku, self.config, scope)
        except EditorError as e:
            return self._refused(e)

        if not matches:
            message = f"No results found for SKU: {sku}"
        else:
            plural = "es" if len(matches) > 1 else ""
            message = f'Found {len(matches)} match{plural} for "{sku}"'
        return Outcome(kind=OutcomeKind.OK, message=message, matches=matches)

    def save_quantity(
        self,
        sheet_name: Optional[str],
        row_number: int,
        new_quantity: Any,
    ) -> Outcome:
        """
        Write a new quantity and an audit entry.

        Args:
            sheet_name: Sheet of the row (None means the header sheet)
            row_number: 1-based row
            new_quantity: Non-negative integer, or text holding one
        """
        try:
            quantity = parse_new_quantity(new_quantity)
            sheet = self._require_sheet(sheet_name)
        except EditorError as e:
            return self._refused(e)

        change = apply_quantity_change(
            sheet.row(row_number),
            quantity,
            self.config.quantity_index,
            self.config.audit_range,
            self._today(),
        )

        if change.audit_column is None:
            return Outcome(
                kind=OutcomeKind.AUDIT_SLOT_UNAVAILABLE,
                message=(
                    f"Saved on {sheet.name}: Qty={quantity} "
                    f"(No empty date column in {self.config.audit_range.label} range)"
                ),
                change=change,
            )

        sign = "+" if change.delta >= 0 else ""
        return Outcome(
            kind=OutcomeKind.OK,
            message=(
                f"Saved on {sheet.name}: Qty {change.old_quantity}→{change.new_quantity} "
                f"({sign}{change.delta}), Date in column {change.audit_letters}"
            ),
            change=change,
        )

    def is_highlighted(self, sheet_name: Optional[str], row_number: int) -> bool:
        sheet = self.document.get_sheet(sheet_name or self.config.header_sheet)
        return is_highlighted(sheet, row_number, self.config.sku_index)

    def toggle_highlight(
        self,
        sheet_name: Optional[str],
        row_number: int,
        on: Optional[bool] = None,
    ) -> Outcome:
        """
        Flip the low-stock highlight, or force it with on=True/False.

        Returns:
            Outcome whose highlighted field is the new state
        """
        try:
            sheet = self._require_sheet(sheet_name)
        except EditorError as e:
            return self._refused(e)

        if on is None:
            on = not is_highlighted(sheet, row_number, self.config.sku_index)

        set_highlighted(sheet, row_number, on, self.config.audit_range)

        if on:
            message = f"Row {row_number} highlighted on {sheet.name}"
        else:
            message = f"Highlight removed from row {row_number} on {sheet.name}"
        return Outcome(kind=OutcomeKind.OK, message=message, highlighted=on)

    def update_header(self, name: str) -> Outcome:
        """Write "Date Changed - D/M/YY name" into the configured header cell."""
        try:
            who = (name or "").strip()
            if not who:
                raise InputValidationError("Please enter your name")
            sheet = self._require_sheet(self.config.header_sheet)
        except EditorError as e:
            return self._refused(e)

        text = update_header(sheet, self.config.header_cell, who, self._today())
        return Outcome(
            kind=OutcomeKind.OK,
            message=f'Header updated: "{text}"',
            header_text=text,
        )
