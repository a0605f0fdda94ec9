from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QApplication

from simple_notes.core.persistence import NotePersistence
from simple_notes.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from simple_notes.settings import (
    APP_NAME,
    DEFAULT_NOTE_FILENAME,
    PLAIN_TEXT_TYPE,
    ConfigurationError,
    make_settings,
)
from simple_notes.ui.collaborators import QtFileRevealer, QtLocationPicker
from simple_notes.ui.main_window import NotesWindow


def resolve_note_path(persistence: NotePersistence, log) -> Path | None:
    """
    Default note location; if the platform has no documents directory,
    ask the user for an explicit one. None means the user gave up.
    """
    try:
        return persistence.default_location()
    except ConfigurationError as e:
        log.warning("%s. Asking for an explicit note location", e)

    if persistence.picker is None:
        return None
    return persistence.picker.choose_save_location(DEFAULT_NOTE_FILENAME, PLAIN_TEXT_TYPE)


def main() -> int:
    log = setup_logging()
    install_global_exception_hooks(log)

    app = QApplication([])
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_NAME)

    picker = QtLocationPicker()
    persistence = NotePersistence(picker=picker, revealer=QtFileRevealer())

    note_path = resolve_note_path(persistence, log)
    if note_path is None:
        log.error("No note location available, exiting")
        return 1

    win = NotesWindow(persistence, note_path=note_path, settings=make_settings())
    picker.parent = win
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
