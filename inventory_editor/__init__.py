# Inventory Editor - search, adjust and flag rows of stock count workbooks

from .models import (
    RichText,
    FormulaResult,
    Fill,
    ColumnRange,
    MatchRecord,
    QuantityChange,
    Outcome,
    OutcomeKind,
)
from .columns import column_index_of, column_letters_of
from .cells import resolve, resolve_value
from .config import EditorConfig, load_config
from .errors import EditorError, SheetNotFoundError, QuantityValidationError
from .adapters import WorkbookDocument, WorksheetAdapter, InMemoryDocument, InMemorySheet
from .workbook import OpenpyxlDocument
from .locator import SearchScope, locate
from .audit import allocate, compute_audit_entry, format_date, apply_quantity_change, update_header
from .highlight import is_highlighted, set_highlighted
from .editor import InventoryEditor

__version__ = "1.0.0"

__all__ = [
    # Models
    "RichText",
    "FormulaResult",
    "Fill",
    "ColumnRange",
    "MatchRecord",
    "QuantityChange",
    "Outcome",
    "OutcomeKind",
    # Columns / cells
    "column_index_of",
    "column_letters_of",
    "resolve",
    "resolve_value",
    # Config
    "EditorConfig",
    "load_config",
    # Errors
    "EditorError",
    "SheetNotFoundError",
    "QuantityValidationError",
    # Documents
    "WorkbookDocument",
    "WorksheetAdapter",
    "InMemoryDocument",
    "InMemorySheet",
    "OpenpyxlDocument",
    # Operations
    "SearchScope",
    "locate",
    "allocate",
    "compute_audit_entry",
    "format_date",
    "apply_quantity_change",
    "update_header",
    "is_highlighted",
    "set_highlighted",
    "InventoryEditor",
]
