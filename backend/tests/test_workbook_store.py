"""
Tests for the in-memory workbook store.
"""
import threading

import pytest
from openpyxl import load_workbook

from backend.core.workbooks import WorkbookNotFoundError


class TestListing:

    def test_lists_xlsx_files(self, store, data_dir):
        (data_dir / "notes.txt").write_text("x")
        (data_dir / "~$stock.xlsx").write_bytes(b"")
        names = [w["name"] for w in store.list_workbooks()]
        assert names == ["stock.xlsx"]

    def test_missing_dir(self, tmp_path):
        from backend.core.workbooks import WorkbookStore
        assert WorkbookStore(tmp_path / "nope").list_workbooks() == []


class TestOpen:

    def test_cached(self, store):
        assert store.open("stock.xlsx") is store.open("stock.xlsx")

    @pytest.mark.parametrize("name", ["missing.xlsx", "../stock.xlsx", "stock.csv", ""])
    def test_rejects_unknown_names(self, store, name):
        with pytest.raises(WorkbookNotFoundError):
            store.open(name)

    def test_editor_shares_store_config(self, store):
        workbook = store.open("stock.xlsx")
        assert workbook.editor.config is store.config


class TestSaveAndClose:

    def test_save_writes_modified_copy(self, store, data_dir):
        with store.session("stock.xlsx") as workbook:
            workbook.editor.save_quantity("WAREHOUSE", 2, 90)
            workbook.dirty = True

        output = store.save("stock.xlsx")

        assert output == data_dir / "stock_modified.xlsx"
        assert load_workbook(output)["WAREHOUSE"]["J2"].value == 90
        assert load_workbook(data_dir / "stock.xlsx")["WAREHOUSE"]["J2"].value == 100
        assert store.open("stock.xlsx").dirty is False

    def test_close(self, store):
        store.open("stock.xlsx")
        assert store.close("stock.xlsx") is True
        assert store.close("stock.xlsx") is False


class TestSessionLock:

    def test_operations_serialized(self, store):
        """Concurrent saves on one row each get their own audit column."""
        errors = []

        def bump(quantity):
            try:
                with store.session("stock.xlsx") as workbook:
                    workbook.editor.save_quantity("WAREHOUSE", 2, quantity)
            except Exception as e:  # noqa: BLE001
                errors.append(e)

        threads = [threading.Thread(target=bump, args=(q,)) for q in range(101, 106)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        sheet = store.open("stock.xlsx").document.get_sheet("WAREHOUSE")
        entries = [sheet.get_value(2, column) for column in range(12, 17)]
        assert all(entries)
        assert sheet.get_value(2, 17) is None
