from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from PySide6.QtCore import QMimeDatabase, QProcess, QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QFileDialog, QWidget

log = logging.getLogger(__name__)


def start_detached(command: Sequence[str]) -> bool:
    """Start a helper process that outlives us; Qt owns and reaps it."""
    program, *args = command
    ok, _pid = QProcess.startDetached(program, args, "")
    return bool(ok)


def file_filter_for(mime_name: str) -> str:
    """QFileDialog filter string for a MIME type, e.g. 'text/plain'."""
    mime = QMimeDatabase().mimeTypeForName(mime_name)
    if mime.isValid() and mime.globPatterns():
        return mime.filterString()
    return "All files (*)"


class QtLocationPicker:
    def __init__(self, parent: QWidget | None = None, *, title: str = "Save Note As"):
        self.parent = parent
        self._title = title

    def choose_save_location(
        self, suggested_name: str, suggested_type: str
    ) -> Optional[Path]:
        log.info("Opened 'Save Note As' dialog")
        path, _selected = QFileDialog.getSaveFileName(
            self.parent, self._title, suggested_name, file_filter_for(suggested_type)
        )
        if not path:
            return None
        return Path(path)


class QtFileRevealer:
    """
    Shows a note in the platform file browser.

    Finder and Explorer can select a file; elsewhere there is no portable way,
    so the containing folder is opened instead.
    """

    def __init__(
        self,
        *,
        launch: Callable[[Sequence[str]], bool] = start_detached,
        open_url: Callable[[QUrl], bool] = QDesktopServices.openUrl,
        platform: str = sys.platform,
    ):
        self._launch = launch
        self._open_url = open_url
        self._platform = platform

    def select_file(self, path: Path) -> None:
        path = Path(path)
        if self._platform == "darwin":
            command = ["open", "-R", str(path)]
        elif self._platform == "win32":
            command = ["explorer", f"/select,{path}"]
        else:
            self.open_folder(path.parent)
            return
        if not self._launch(command):
            raise OSError(f"Could not start {command[0]}")

    def open_folder(self, path: Path) -> None:
        if not self._open_url(QUrl.fromLocalFile(str(path))):
            raise OSError(f"Could not open folder: {path}")
