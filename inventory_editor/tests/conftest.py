"""
Shared fixtures for Inventory Editor tests.

mock_workbook mirrors a real count file: WAREHOUSE and CIGARS share SKU001,
ACCESSORIES has its own items. Row 1 of every sheet is the header.
"""

from datetime import date

import pytest

from inventory_editor.adapters import InMemoryDocument
from inventory_editor.config import EditorConfig
from inventory_editor.editor import InventoryEditor


TODAY = date(2025, 12, 16)


def build_mock_workbook() -> InMemoryDocument:
    doc = InMemoryDocument()

    warehouse = doc.add_sheet("WAREHOUSE")
    (warehouse
        .set("A1", "Product").set("B1", "SKU").set("J1", "Quantity").set("K1", "Date 1")
        .set("B2", "SKU001").set("G2", "Test Product A").set("J2", 100)
        .set("B3", "SKU002").set("G3", "Test Product B").set("J3", 50)
        .set("K3", "36028+5")       # code column, not part of the audit range
        .set("L3", "1/12/25-1"))

    cigars = doc.add_sheet("CIGARS")
    (cigars
        .set("A1", "Product").set("B1", "SKU").set("J1", "Quantity")
        .set("B2", "SKU003").set("G2", "Premium Cigar").set("J2", 25)
        .set("B3", "SKU001").set("G3", "Special Cigar").set("J3", 15))

    accessories = doc.add_sheet("ACCESSORIES")
    (accessories
        .set("A1", "Product").set("B1", "SKU").set("J1", "Quantity")
        .set("B2", "ACC001").set("G2", "Lighter").set("J2", 200))

    return doc


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def mock_workbook():
    return build_mock_workbook()


@pytest.fixture
def config():
    return EditorConfig()


@pytest.fixture
def editor(mock_workbook, config, today):
    return InventoryEditor(mock_workbook, config, today=lambda: today)
