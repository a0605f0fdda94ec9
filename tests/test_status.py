import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import time
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from simple_notes.core.results import (
    Cancelled,
    Loaded,
    NotFound,
    ReadError,
    RevealError,
    Revealed,
    Saved,
    WriteError,
)
from simple_notes.ui.status import StatusMessageController, status_text_for


def test_status_text_for_save():
    p = Path("/tmp/notes.txt")
    assert status_text_for(Saved(p)) == "Saved!"
    assert status_text_for(Saved(Path("/x/other.txt")), save_as=True) == "Saved to other.txt"
    assert status_text_for(WriteError(p, "Permission denied")) == "Save failed: Permission denied"


def test_status_text_for_load():
    p = Path("/tmp/notes.txt")
    assert status_text_for(ReadError(p, "not valid UTF-8")) == "Load failed: not valid UTF-8"
    assert status_text_for(Loaded(p, "text")) is None
    assert status_text_for(NotFound(p)) is None


def test_status_text_silent_results():
    p = Path("/tmp/notes.txt")
    assert status_text_for(Cancelled(), save_as=True) is None
    assert status_text_for(Revealed(p, p, True)) is None
    assert status_text_for(RevealError(p, "boom")) is None


def test_show_and_clear(qapp):
    status = StatusMessageController()
    seen = []
    status.changed.connect(seen.append)

    status.show("Saved!")
    assert status.text == "Saved!"
    assert status.is_armed()

    status.clear()
    assert status.text == ""
    assert not status.is_armed()
    assert seen == ["Saved!", ""]


def test_new_message_replaces_text(qapp):
    status = StatusMessageController()
    status.show("Saved!")
    status.show("Save failed: disk full")
    assert status.text == "Save failed: disk full"
    assert status.is_armed()


def _spin_until(deadline, stop=lambda: False):
    while time.monotonic() < deadline and not stop():
        QCoreApplication.processEvents()
        time.sleep(0.005)


def test_new_message_restarts_countdown(qapp):
    status = StatusMessageController(clear_ms=300)
    start = time.monotonic()
    status.show("Saved!")

    _spin_until(start + 0.2)
    assert status.text == "Saved!"
    second = time.monotonic()
    status.show("Saved to other.txt")

    # past the first deadline, still inside the second one
    _spin_until(start + 0.4)
    assert status.text == "Saved to other.txt"

    _spin_until(second + 2.0, stop=lambda: not status.text)
    assert status.text == ""
    assert time.monotonic() - second >= 0.29


def test_auto_clear(qapp):
    status = StatusMessageController(clear_ms=20)
    status.show("Saved!")

    deadline = time.monotonic() + 2.0
    while status.text and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.005)

    assert status.text == ""
    assert not status.is_armed()
