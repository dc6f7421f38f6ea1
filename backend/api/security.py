"""
Guard for the workbook edit endpoints.

Reads stay open. Quantity saves, highlights, header stamps and saves need
the X-API-Key header once a key is configured.
"""
from typing import Optional

from fastapi import Header, HTTPException

from backend.core.config import settings


def require_api_key(x_api_key: Optional[str] = Header(None)) -> None:
    """No-op while INVENTORY_EDITOR_API_KEY is unset; otherwise the header must match."""
    if not settings.API_KEY:
        return
    if x_api_key != settings.API_KEY:
        raise HTTPException(status_code=401, detail="Invalid API key")
