import logging

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QWidget

from simple_notes.settings import SettingsKeys


log = logging.getLogger(__name__)


class UiStateStore:
    """
    Saves/restores the window geometry in QSettings. Best-effort only.
    """
    def __init__(self, *, owner: QWidget, settings: QSettings):
        self._owner = owner
        self._settings = settings

    def restore(self, *, default_size: tuple[int, int] = (500, 420)) -> None:
        try:
            geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
            if geo and self._owner.restoreGeometry(geo):
                return
            self._owner.resize(*default_size)
        except Exception:
            log.exception("Failed to restore UI state from QSettings")

    def save(self) -> None:
        try:
            self._settings.setValue(SettingsKeys.UI_GEOMETRY, self._owner.saveGeometry())
        except Exception:
            log.exception("Failed to save UI state to QSettings")
