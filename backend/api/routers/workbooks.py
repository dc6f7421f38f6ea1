"""
Workbook editing API router.

Search SKUs, save quantities, toggle low-stock highlights and stamp the
header cell of workbooks in the data directory. Edits stay in memory
until POST /save writes <stem>_modified.xlsx.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from inventory_editor.locator import SearchScope
from inventory_editor.models import Outcome, OutcomeKind

from backend.api.models import HeaderRequest, HighlightRequest, QuantityRequest
from backend.api.security import require_api_key
from backend.core.workbooks import WorkbookNotFoundError, WorkbookStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/workbooks", tags=["Workbooks"])

ERROR_STATUS = {
    OutcomeKind.CONFIGURATION_ERROR: 404,
    OutcomeKind.VALIDATION_ERROR: 422,
}


def serialize_outcome(outcome: Outcome) -> Dict[str, Any]:
    """Turn an Outcome into the JSON body returned to the UI."""
    data: Dict[str, Any] = {
        "success": outcome.ok,
        "kind": outcome.kind.value,
        "message": outcome.message,
    }
    if outcome.matches:
        data["matches"] = [
            {
                "sheet": m.sheet_name,
                "row": m.row_number,
                "sku": m.sku,
                "quantity": m.quantity,
            }
            for m in outcome.matches
        ]
    if outcome.change is not None:
        change = outcome.change
        data["change"] = {
            "sheet": change.sheet_name,
            "row": change.row_number,
            "old_quantity": change.old_quantity,
            "new_quantity": change.new_quantity,
            "delta": change.delta,
            "audit_column": change.audit_letters,
            "audit_entry": change.audit_entry,
        }
    if outcome.highlighted is not None:
        data["highlighted"] = outcome.highlighted
    if outcome.header_text is not None:
        data["header_text"] = outcome.header_text
    return data


def _check(outcome: Outcome) -> Outcome:
    status = ERROR_STATUS.get(outcome.kind)
    if status is not None:
        raise HTTPException(status_code=status, detail=outcome.message)
    return outcome


@router.get("")
def list_workbooks(store: WorkbookStore = Depends(get_store)):
    """List workbooks available in the data directory."""
    workbooks = store.list_workbooks()
    return {"workbooks": workbooks, "count": len(workbooks)}


@router.get("/{name}/sheets")
def list_sheets(name: str, store: WorkbookStore = Depends(get_store)):
    """Sheet names of a workbook, in order."""
    try:
        with store.session(name) as workbook:
            sheets = workbook.document.sheet_names()
    except WorkbookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"workbook": name, "sheets": sheets}


@router.get("/{name}/search")
def search_workbook(
    name: str,
    sku: str = Query(..., description="SKU to find (case-insensitive)"),
    all_sheets: Optional[bool] = Query(None, description="Override the multi-sheet setting"),
    store: WorkbookStore = Depends(get_store),
):
    """Find rows by SKU. Each match reports whether it is highlighted."""
    scope = None
    if all_sheets is not None:
        scope = SearchScope.ALL_SHEETS if all_sheets else SearchScope.SINGLE_SHEET

    try:
        with store.session(name) as workbook:
            outcome = _check(workbook.editor.search(sku, scope))
            data = serialize_outcome(outcome)
            for match in data.get("matches", []):
                match["highlighted"] = workbook.editor.is_highlighted(match["sheet"], match["row"])
    except WorkbookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    data.setdefault("matches", [])
    return data


@router.post("/{name}/quantity", dependencies=[Depends(require_api_key)])
def save_quantity(name: str, request: QuantityRequest, store: WorkbookStore = Depends(get_store)):
    """Save a new quantity and append the dated audit entry."""
    try:
        with store.session(name) as workbook:
            outcome = _check(
                workbook.editor.save_quantity(request.sheet, request.row, request.quantity)
            )
            workbook.dirty = True
    except WorkbookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return serialize_outcome(outcome)


@router.post("/{name}/highlight", dependencies=[Depends(require_api_key)])
def toggle_highlight(name: str, request: HighlightRequest, store: WorkbookStore = Depends(get_store)):
    """Toggle (or set) the low-stock highlight on a row."""
    try:
        with store.session(name) as workbook:
            outcome = _check(
                workbook.editor.toggle_highlight(request.sheet, request.row, request.on)
            )
            workbook.dirty = True
    except WorkbookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return serialize_outcome(outcome)


@router.post("/{name}/header", dependencies=[Depends(require_api_key)])
def update_header(name: str, request: HeaderRequest, store: WorkbookStore = Depends(get_store)):
    """Stamp the header cell with today's date and the editor's name."""
    try:
        with store.session(name) as workbook:
            outcome = _check(workbook.editor.update_header(request.name))
            workbook.dirty = True
    except WorkbookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return serialize_outcome(outcome)


@router.post("/{name}/save", dependencies=[Depends(require_api_key)])
def save_workbook(name: str, store: WorkbookStore = Depends(get_store)):
    """Write the edited workbook as <stem>_modified.xlsx."""
    try:
        output = store.save(name)
    except WorkbookNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True, "saved_as": output.name}


@router.delete("/{name}", dependencies=[Depends(require_api_key)])
def close_workbook(name: str, store: WorkbookStore = Depends(get_store)):
    """Drop a workbook from memory without saving."""
    if not store.close(name):
        raise HTTPException(status_code=404, detail="Workbook not open")
    return {"success": True}
