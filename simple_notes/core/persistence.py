from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Protocol

from simple_notes.core.filesystem import LocalFileSystem
from simple_notes.core.results import (
    Cancelled,
    LoadResult,
    Loaded,
    NotFound,
    ReadError,
    RevealError,
    RevealResult,
    Revealed,
    SaveAsResult,
    SaveResult,
    Saved,
    WriteError,
    describe_os_error,
)
from simple_notes.settings import (
    DEFAULT_NOTE_FILENAME,
    PLAIN_TEXT_TYPE,
    ConfigurationError,
    resolve_documents_dir,
)

log = logging.getLogger(__name__)


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def read_bytes(self, path: Path) -> bytes: ...

    def write_text_atomic(
        self, path: Path, text: str, *, create_parents: bool = False
    ) -> None: ...


class LocationPicker(Protocol):
    def choose_save_location(
        self, suggested_name: str, suggested_type: str
    ) -> Optional[Path]:
        """Chosen destination, or None when the user cancels."""
        ...


class FileRevealer(Protocol):
    def select_file(self, path: Path) -> None: ...

    def open_folder(self, path: Path) -> None: ...


class NotePersistence:
    """
    Load/save a single plain-text note and show where it lives.

    Every filesystem failure comes back as a typed result (see core.results);
    only misconfiguration raises ConfigurationError.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        *,
        picker: LocationPicker | None = None,
        revealer: FileRevealer | None = None,
        default_path: Path | None = None,
        documents_dir: Callable[[], Path] = resolve_documents_dir,
    ):
        self.fs = fs or LocalFileSystem()
        self.picker = picker
        self.revealer = revealer
        self._default_path = Path(default_path) if default_path is not None else None
        self._documents_dir = documents_dir

    def default_location(self) -> Path:
        if self._default_path is not None:
            return self._default_path
        return self._documents_dir() / DEFAULT_NOTE_FILENAME

    def load(self, path: Path) -> LoadResult:
        path = Path(path)
        try:
            if not self.fs.exists(path):
                log.info("No saved file found yet: %s", path)
                return NotFound(path)
            data = self.fs.read_bytes(path)
            text = data.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Load failed: %s (%s)", path, e)
            return ReadError(path, describe_os_error(e))

        log.info("Loaded from file: %s", path.name)
        return Loaded(path, text)

    def save(self, path: Path, text: str, *, create_parents: bool = False) -> SaveResult:
        path = Path(path)
        log.info("Saving note: %s (%d chars)", path, len(text))
        try:
            self.fs.write_text_atomic(path, text, create_parents=create_parents)
        except (OSError, UnicodeEncodeError) as e:
            log.exception("Save failed: %s", path)
            return WriteError(path, describe_os_error(e))
        return Saved(path)

    def save_as(
        self,
        text: str,
        suggested_name: str = DEFAULT_NOTE_FILENAME,
        suggested_type: str = PLAIN_TEXT_TYPE,
        *,
        create_parents: bool = False,
    ) -> SaveAsResult:
        if self.picker is None:
            raise ConfigurationError("save_as needs a location picker")

        try:
            chosen = self.picker.choose_save_location(suggested_name, suggested_type)
        except Exception as e:
            log.exception("Location picker failed")
            return WriteError(None, str(e) or e.__class__.__name__)

        if chosen is None:
            log.info("Save As cancelled")
            return Cancelled()

        return self.save(Path(chosen), text, create_parents=create_parents)

    def reveal(self, path: Path) -> RevealResult:
        if self.revealer is None:
            raise ConfigurationError("reveal needs a file revealer")

        path = Path(path)
        target = path.parent
        selected = False
        try:
            selected = self.fs.exists(path)
            if selected:
                target = path
                self.revealer.select_file(path)
            else:
                self.revealer.open_folder(target)
        except Exception as e:
            # best-effort: never fatal
            log.warning("Reveal failed: target=%s (%s)", target, e)
            return RevealError(path, str(e) or e.__class__.__name__)

        log.debug("Revealed %s selected=%s", target, selected)
        return Revealed(path, target, selected)
