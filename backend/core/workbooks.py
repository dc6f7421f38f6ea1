"""
Workbook store - open workbooks shared by API requests.

Each workbook in the data directory is loaded once and kept in memory
until saved or closed. Requests run in a threadpool, so every top-level
operation on a workbook holds that workbook's lock for its whole run.
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional

from inventory_editor.config import EditorConfig, load_config, DEFAULT_CONFIG_PATH
from inventory_editor.editor import InventoryEditor
from inventory_editor.workbook import OpenpyxlDocument, modified_filename

from backend.core.config import settings

logger = logging.getLogger(__name__)

WORKBOOK_SUFFIX = ".xlsx"


class WorkbookNotFoundError(FileNotFoundError):
    """Requested workbook is not a file in the data directory."""


@dataclass
class OpenWorkbook:
    """A loaded workbook and the editor bound to it."""
    name: str
    path: Path
    document: OpenpyxlDocument
    editor: InventoryEditor
    lock: threading.Lock = field(default_factory=threading.Lock)
    dirty: bool = False


class WorkbookStore:
    """Loads, caches and saves workbooks from one directory."""

    def __init__(self, data_dir: Path, config: Optional[EditorConfig] = None):
        self.data_dir = Path(data_dir)
        self.config = config or EditorConfig()
        self._open: dict[str, OpenWorkbook] = {}
        self._lock = threading.Lock()

    def list_workbooks(self) -> list[dict]:
        """Workbooks available in the data directory, by name."""
        if not self.data_dir.exists():
            return []

        workbooks = []
        for path in sorted(self.data_dir.glob(f"*{WORKBOOK_SUFFIX}")):
            if path.name.startswith("~$"):
                continue  # Excel lock file
            stat = path.stat()
            workbooks.append({
                "name": path.name,
                "size": stat.st_size,
                "modified_at": datetime.fromtimestamp(stat.st_mtime).isoformat(),
                "open": path.name in self._open,
            })
        return workbooks

    def _resolve_path(self, name: str) -> Path:
        # Only plain file names inside data_dir
        if not name or Path(name).name != name or not name.lower().endswith(WORKBOOK_SUFFIX):
            raise WorkbookNotFoundError(f"Workbook not found: {name}")
        path = self.data_dir / name
        if not path.is_file():
            raise WorkbookNotFoundError(f"Workbook not found: {name}")
        return path

    def open(self, name: str) -> OpenWorkbook:
        """
        Get an open workbook, loading it on first use.

        Raises:
            WorkbookNotFoundError: if no such workbook exists
        """
        with self._lock:
            if name in self._open:
                return self._open[name]

            path = self._resolve_path(name)
            document = OpenpyxlDocument.load(path)
            workbook = OpenWorkbook(
                name=name,
                path=path,
                document=document,
                editor=InventoryEditor(document, self.config),
            )
            self._open[name] = workbook
            logger.info(f"Opened workbook {name}")
            return workbook

    @contextmanager
    def session(self, name: str) -> Iterator[OpenWorkbook]:
        """Hold the workbook's lock for one operation."""
        workbook = self.open(name)
        with workbook.lock:
            yield workbook

    def save(self, name: str) -> Path:
        """Write the edited copy (<stem>_modified.xlsx) next to the source."""
        with self.session(name) as workbook:
            output = workbook.path.with_name(modified_filename(workbook.name))
            workbook.document.save(output)
            workbook.dirty = False
            return output

    def close(self, name: str) -> bool:
        """Drop a workbook from memory, discarding unsaved edits."""
        with self._lock:
            workbook = self._open.pop(name, None)
        if workbook is not None and workbook.dirty:
            logger.warning(f"Closed {name} with unsaved changes")
        return workbook is not None


def _load_editor_config() -> EditorConfig:
    path = Path(settings.CONFIG_PATH) if settings.CONFIG_PATH else DEFAULT_CONFIG_PATH
    return load_config(path)


_store: Optional[WorkbookStore] = None
_store_lock = threading.Lock()


def get_store() -> WorkbookStore:
    """Process-wide store built from settings on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = WorkbookStore(Path(settings.DATA_DIR), _load_editor_config())
    return _store
