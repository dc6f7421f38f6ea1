"""
Configuration for the Inventory Editor.

Column positions, the header cell and the search scope are declarative
JSON - edit the file, not the code. Defaults match the warehouse count
sheet layout: SKU in B, quantity in J, audit trail in L-T.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .columns import column_index_of, is_column_label, split_address
from .models import ColumnRange

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "editor_config.json"


@dataclass
class EditorConfig:
    """Full configuration for the editor."""
    sku_column: str = "B"
    quantity_column: str = "J"
    audit_start_column: str = "L"  # K holds other data
    audit_end_column: str = "T"
    header_cell: str = "G1"
    header_sheet: str = "WAREHOUSE"
    search_all_sheets: bool = True
    exclude_sheets: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.validate()

    def validate(self):
        """
        Check column labels, header address and audit range bounds.

        Raises:
            ValueError: describing the first invalid setting
        """
        for label in ("sku_column", "quantity_column", "audit_start_column", "audit_end_column"):
            value = getattr(self, label)
            if not is_column_label(value):
                raise ValueError(f"{label} must be uppercase column letters from A to XFD, got {value!r}")
        split_address(self.header_cell)
        if not self.header_sheet:
            raise ValueError("header_sheet must not be empty")
        if not isinstance(self.search_all_sheets, bool):
            raise ValueError(f"search_all_sheets must be true or false, got {self.search_all_sheets!r}")
        if not isinstance(self.exclude_sheets, list) or not all(
            isinstance(name, str) for name in self.exclude_sheets
        ):
            raise ValueError(f"exclude_sheets must be a list of sheet names, got {self.exclude_sheets!r}")
        # ColumnRange rejects start > end
        ColumnRange.from_letters(self.audit_start_column, self.audit_end_column)

    @property
    def sku_index(self) -> int:
        return column_index_of(self.sku_column)

    @property
    def quantity_index(self) -> int:
        return column_index_of(self.quantity_column)

    @property
    def audit_range(self) -> ColumnRange:
        return ColumnRange.from_letters(self.audit_start_column, self.audit_end_column)

    def set_search_all_sheets(self, enabled: bool):
        """Toggle multi-sheet search."""
        self.search_all_sheets = bool(enabled)
        logger.info(f"Multi-sheet search {'enabled' if self.search_all_sheets else 'disabled'}")

    def set_excluded_sheets(self, names: list[str]):
        """Replace the set of sheet names skipped by multi-sheet search."""
        self.exclude_sheets = list(dict.fromkeys(names))

    def is_excluded(self, sheet_name: str) -> bool:
        return sheet_name in self.exclude_sheets

    def to_dict(self) -> dict:
        return {
            "columns": {
                "sku": self.sku_column,
                "quantity": self.quantity_column,
                "audit_start": self.audit_start_column,
                "audit_end": self.audit_end_column,
            },
            "header": {"cell": self.header_cell, "sheet": self.header_sheet},
            "search": {
                "all_sheets": self.search_all_sheets,
                "exclude_sheets": list(self.exclude_sheets),
            },
        }


def config_from_dict(data: dict) -> EditorConfig:
    """Build an EditorConfig from the JSON layout; missing keys keep defaults."""
    defaults = EditorConfig()
    columns = data.get("columns", {})
    header = data.get("header", {})
    search = data.get("search", {})

    return EditorConfig(
        sku_column=columns.get("sku", defaults.sku_column),
        quantity_column=columns.get("quantity", defaults.quantity_column),
        audit_start_column=columns.get("audit_start", defaults.audit_start_column),
        audit_end_column=columns.get("audit_end", defaults.audit_end_column),
        header_cell=header.get("cell", defaults.header_cell),
        header_sheet=header.get("sheet", defaults.header_sheet),
        search_all_sheets=search.get("all_sheets", defaults.search_all_sheets),
        exclude_sheets=search.get("exclude_sheets", []),
    )


def load_config(config_path: str | Path = DEFAULT_CONFIG_PATH) -> EditorConfig:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to editor_config.json

    Returns:
        Validated EditorConfig

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if a setting is invalid
    """
    path = Path(config_path)
    with open(path, "r") as f:
        data = json.load(f)

    config = config_from_dict(data)
    logger.debug(f"Loaded editor config from {path}")
    return config
