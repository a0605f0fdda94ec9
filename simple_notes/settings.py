from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings, QStandardPaths

APP_NAME = "simple-notes"
LOGGER_NAME = "simple_notes"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

DEFAULT_NOTE_FILENAME = "notes.txt"
PLAIN_TEXT_TYPE = "text/plain"

# status line auto-clear
STATUS_CLEAR_MS = 2000


class ConfigurationError(RuntimeError):
    """Raised when the environment cannot provide a usable note location."""


@dataclass(frozen=True)
class SettingsKeys:
    UI_GEOMETRY: str = "ui/geometry"


def make_settings() -> QSettings:
    return QSettings(APP_NAME, APP_NAME)


def resolve_documents_dir() -> Path:
    """
    User documents directory as reported by the platform.
    Raises ConfigurationError if the host has none.
    """
    raw = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.DocumentsLocation
    )
    if not raw:
        raise ConfigurationError("Documents directory could not be resolved")
    return Path(raw)
