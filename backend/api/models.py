"""
Pydantic request/response models for the API.
"""
from pydantic import BaseModel, Field, StrictInt, StrictStr
from typing import List, Optional, Union


# ============== Workbook edits ==============

class QuantityRequest(BaseModel):
    sheet: Optional[str] = None  # defaults to the header sheet
    row: int = Field(..., ge=1)
    # Strict: JSON true/false must not become 1/0. The editor validates the
    # rest so bad input gets the same message everywhere
    quantity: Optional[Union[StrictInt, StrictStr]] = None


class HighlightRequest(BaseModel):
    sheet: Optional[str] = None
    row: int = Field(..., ge=1)
    on: Optional[bool] = None  # None toggles


class HeaderRequest(BaseModel):
    name: str


# ============== Editor config ==============

class EditorConfigUpdate(BaseModel):
    search_all_sheets: Optional[bool] = None
    exclude_sheets: Optional[List[str]] = None
