"""
API Routers package.

Each module contains a FastAPI router for a specific domain.
"""

from .workbooks import router as workbooks_router
from .editor_config import router as editor_config_router

__all__ = [
    "workbooks_router",
    "editor_config_router",
]
