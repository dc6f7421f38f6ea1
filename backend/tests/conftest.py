"""
Test configuration and fixtures for the Inventory Editor service.

Provides:
- A temporary data directory holding a sample count workbook
- A WorkbookStore bound to that directory
- FastAPI TestClient fixture with the store dependency overridden
"""
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook
from openpyxl.styles import PatternFill

from inventory_editor.config import EditorConfig
from backend.core.workbooks import WorkbookStore, get_store


# ---------------------------------------------------------------------------
# Workbook fixtures
# ---------------------------------------------------------------------------

def create_count_workbook(path: Path) -> Path:
    """Write a small multi-sheet count workbook and return its path."""
    wb = Workbook()
    warehouse = wb.active
    warehouse.title = "WAREHOUSE"
    warehouse["A1"], warehouse["B1"], warehouse["J1"] = "Product", "SKU", "Quantity"
    warehouse["B2"], warehouse["G2"], warehouse["J2"] = "SKU001", "Test Product A", 100
    warehouse["B3"], warehouse["G3"], warehouse["J3"] = "SKU002", "Test Product B", 50
    warehouse["L3"] = "1/12/25-1"

    cigars = wb.create_sheet("CIGARS")
    cigars["A1"], cigars["B1"], cigars["J1"] = "Product", "SKU", "Quantity"
    cigars["B2"], cigars["J2"] = "SKU003", 25
    cigars["B3"], cigars["J3"] = "SKU001", 15
    cigars["B3"].fill = PatternFill(fill_type="solid", fgColor="FFFFFF00")

    wb.save(path)
    return path


@pytest.fixture()
def data_dir(tmp_path):
    create_count_workbook(tmp_path / "stock.xlsx")
    return tmp_path


@pytest.fixture()
def store(data_dir):
    return WorkbookStore(data_dir, EditorConfig())


@pytest.fixture()
def client(store):
    """Provide a FastAPI TestClient that uses the temporary store."""
    from backend.api.main import app

    app.dependency_overrides[get_store] = lambda: store
    # Lifespan creates DATA_DIR; keep it inside tmp_path
    with patch("backend.core.config.settings.DATA_DIR", str(store.data_dir)):
        with TestClient(app) as c:
            yield c
    app.dependency_overrides.clear()
