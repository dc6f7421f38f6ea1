"""
Editor configuration API router.
"""
from fastapi import APIRouter, Depends

from backend.api.models import EditorConfigUpdate
from backend.api.security import require_api_key
from backend.core.workbooks import WorkbookStore, get_store

router = APIRouter(prefix="/api/editor/config", tags=["Editor Config"])


@router.get("")
def get_editor_config(store: WorkbookStore = Depends(get_store)):
    """Current column layout and search scope."""
    return store.config.to_dict()


@router.put("", dependencies=[Depends(require_api_key)])
def update_editor_config(request: EditorConfigUpdate, store: WorkbookStore = Depends(get_store)):
    """Toggle multi-sheet search or replace the excluded sheet list."""
    if request.search_all_sheets is not None:
        store.config.set_search_all_sheets(request.search_all_sheets)
    if request.exclude_sheets is not None:
        store.config.set_excluded_sheets(request.exclude_sheets)
    return {"success": True, "config": store.config.to_dict()}
