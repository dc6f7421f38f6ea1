"""
Row Locator - find rows by SKU.

Row 1 of every sheet is the header and is never matched. Comparison is on
the resolved value's string form, case-insensitive; the query is not
trimmed here.
"""

import logging
from enum import Enum
from typing import Optional

from .adapters import WorkbookDocument, WorksheetAdapter
from .cells import display_text, is_empty, resolve
from .config import EditorConfig
from .errors import SheetNotFoundError
from .models import MatchRecord

logger = logging.getLogger(__name__)

HEADER_ROW = 1


class SearchScope(Enum):
    """Where a search looks."""
    SINGLE_SHEET = "single_sheet"  # the configured header sheet
    ALL_SHEETS = "all_sheets"      # every sheet not excluded


def scope_for(config: EditorConfig) -> SearchScope:
    return SearchScope.ALL_SHEETS if config.search_all_sheets else SearchScope.SINGLE_SHEET


def search_sheet(
    sheet: WorksheetAdapter,
    query: str,
    sku_column: int,
    quantity_column: int,
) -> list[MatchRecord]:
    """
    Scan one sheet for rows whose SKU equals the query.

    Returns:
        MatchRecords in row order
    """
    matches = []
    needle = query.lower()

    for row in sheet.iter_rows():
        if row.number == HEADER_ROW:
            continue

        sku = resolve(row.cell(sku_column))
        if is_empty(sku):
            continue

        if display_text(sku).lower() == needle:
            matches.append(MatchRecord(
                sheet_name=sheet.name,
                row_number=row.number,
                sku=sku,
                quantity=resolve(row.cell(quantity_column)),
            ))

    logger.debug(f"Sheet {sheet.name!r}: {len(matches)} match(es) for {query!r}")
    return matches


def locate(
    document: WorkbookDocument,
    query: str,
    config: EditorConfig,
    scope: Optional[SearchScope] = None,
) -> list[MatchRecord]:
    """
    Find every row whose SKU matches the query.

    Args:
        document: Workbook to search
        query: SKU to look for (case-insensitive)
        config: Column positions, header sheet and exclusions
        scope: SINGLE_SHEET or ALL_SHEETS; defaults to the config's toggle

    Returns:
        MatchRecords, sheets in document order and rows in row order.
        An empty list means no match.

    Raises:
        SheetNotFoundError: SINGLE_SHEET scope and the header sheet is missing
    """
    if scope is None:
        scope = scope_for(config)

    sku_column = config.sku_index
    quantity_column = config.quantity_index

    if scope is SearchScope.SINGLE_SHEET:
        sheet = document.get_sheet(config.header_sheet)
        if sheet is None:
            raise SheetNotFoundError(config.header_sheet)
        return search_sheet(sheet, query, sku_column, quantity_column)

    matches = []
    for name in document.sheet_names():
        if config.is_excluded(name):
            continue
        sheet = document.get_sheet(name)
        if sheet is None:
            continue
        matches.extend(search_sheet(sheet, query, sku_column, quantity_column))

    return matches
