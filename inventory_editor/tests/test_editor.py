"""
Tests for editor workflows and their outcomes.

Run with: pytest inventory_editor/tests/test_editor.py -v
"""

from inventory_editor.config import EditorConfig
from inventory_editor.editor import InventoryEditor
from inventory_editor.locator import SearchScope
from inventory_editor.models import OutcomeKind


class TestSearch:

    def test_found(self, editor):
        outcome = editor.search("SKU001")
        assert outcome.kind is OutcomeKind.OK
        assert len(outcome.matches) == 2
        assert outcome.message == 'Found 2 matches for "SKU001"'

    def test_trims_query(self, editor):
        outcome = editor.search("  sku002 ")
        assert outcome.message == 'Found 1 match for "sku002"'
        assert outcome.matches[0].row_number == 3

    def test_not_found_is_ok(self, editor):
        outcome = editor.search("NOTEXIST")
        assert outcome.ok
        assert outcome.matches == []
        assert "No results found" in outcome.message

    def test_blank_query(self, editor):
        outcome = editor.search("   ")
        assert outcome.kind is OutcomeKind.VALIDATION_ERROR

    def test_single_sheet_missing(self, mock_workbook):
        editor = InventoryEditor(mock_workbook, EditorConfig(header_sheet="GONE"))
        outcome = editor.search("SKU001", SearchScope.SINGLE_SHEET)
        assert outcome.kind is OutcomeKind.CONFIGURATION_ERROR
        assert outcome.message == 'Sheet "GONE" not found'
        assert not outcome.ok


class TestSaveQuantity:

    def test_decrease_logs_absolute_delta(self, editor, mock_workbook):
        # WAREHOUSE row 3 starts at 50 with L3 already used
        outcome = editor.save_quantity("WAREHOUSE", 3, 47)
        sheet = mock_workbook.get_sheet("WAREHOUSE")

        assert outcome.kind is OutcomeKind.OK
        assert sheet.get_value(3, 10) == 47
        assert sheet.get_value(3, 13) == "16/12/25-3"
        assert sheet.get_value(3, 14) is None
        assert outcome.change.delta == -3
        assert outcome.message == "Saved on WAREHOUSE: Qty 50→47 (-3), Date in column M"

    def test_empty_audit_range(self, editor, mock_workbook, today):
        sheet = mock_workbook.get_sheet("CIGARS")
        sheet.set("J2", 50)

        outcome = editor.save_quantity("CIGARS", 2, "47")

        assert sheet.get_value(2, 10) == 47
        assert sheet.get_value(2, 12) == f"{today.day}/{today.month}/{today.year % 100}-3"
        assert sheet.get_value(2, 13) is None
        assert outcome.change.audit_letters == "L"

    def test_increase_message_has_plus(self, editor):
        outcome = editor.save_quantity("CIGARS", 3, 20)
        assert "(+5)" in outcome.message

    def test_defaults_to_header_sheet(self, editor, mock_workbook):
        outcome = editor.save_quantity(None, 2, 90)
        assert outcome.change.sheet_name == "WAREHOUSE"
        assert mock_workbook.get_sheet("WAREHOUSE").get_value(2, 10) == 90

    def test_invalid_quantity_leaves_document_untouched(self, editor, mock_workbook):
        for bad in (-1, "abc", None, ""):
            outcome = editor.save_quantity("WAREHOUSE", 2, bad)
            assert outcome.kind is OutcomeKind.VALIDATION_ERROR
            assert outcome.message == "Please enter a valid quantity"

        sheet = mock_workbook.get_sheet("WAREHOUSE")
        assert sheet.get_value(2, 10) == 100
        assert sheet.get_value(2, 12) is None

    def test_missing_sheet(self, editor):
        outcome = editor.save_quantity("NOPE", 2, 5)
        assert outcome.kind is OutcomeKind.CONFIGURATION_ERROR

    def test_full_audit_range(self, editor, mock_workbook):
        sheet = mock_workbook.get_sheet("WAREHOUSE")
        for column in range(12, 21):
            sheet.set_value(2, column, "1/1/25-1")

        outcome = editor.save_quantity("WAREHOUSE", 2, 99)

        assert outcome.kind is OutcomeKind.AUDIT_SLOT_UNAVAILABLE
        assert outcome.ok
        assert sheet.get_value(2, 10) == 99
        assert outcome.message == "Saved on WAREHOUSE: Qty=99 (No empty date column in L-T range)"


class TestHighlight:

    def test_toggle(self, editor):
        assert not editor.is_highlighted("CIGARS", 2)

        outcome = editor.toggle_highlight("CIGARS", 2)
        assert outcome.highlighted is True
        assert editor.is_highlighted("CIGARS", 2)
        assert outcome.message == "Row 2 highlighted on CIGARS"

        outcome = editor.toggle_highlight("CIGARS", 2)
        assert outcome.highlighted is False
        assert not editor.is_highlighted("CIGARS", 2)
        assert outcome.message == "Highlight removed from row 2 on CIGARS"

    def test_forced_state(self, editor):
        editor.toggle_highlight("WAREHOUSE", 2, on=True)
        outcome = editor.toggle_highlight("WAREHOUSE", 2, on=True)
        assert outcome.highlighted is True
        assert editor.is_highlighted("WAREHOUSE", 2)

    def test_missing_sheet(self, editor):
        assert not editor.is_highlighted("NONEXISTENT", 2)
        outcome = editor.toggle_highlight("NONEXISTENT", 2)
        assert outcome.kind is OutcomeKind.CONFIGURATION_ERROR


class TestUpdateHeader:

    def test_writes_header(self, editor, mock_workbook):
        outcome = editor.update_header("  Sam ")
        assert outcome.header_text == "Date Changed - 16/12/25 Sam"
        assert mock_workbook.get_sheet("WAREHOUSE").get_value(1, 7) == outcome.header_text

    def test_blank_name(self, editor, mock_workbook):
        outcome = editor.update_header("")
        assert outcome.kind is OutcomeKind.VALIDATION_ERROR
        assert mock_workbook.get_sheet("WAREHOUSE").get_value(1, 7) is None

    def test_missing_header_sheet(self, mock_workbook):
        editor = InventoryEditor(mock_workbook, EditorConfig(header_sheet="GONE"))
        outcome = editor.update_header("Sam")
        assert outcome.kind is OutcomeKind.CONFIGURATION_ERROR
