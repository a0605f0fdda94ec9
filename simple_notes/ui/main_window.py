from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

from PySide6.QtCore import QSettings, QThreadPool, Slot
from PySide6.QtGui import QFont, QKeySequence
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from simple_notes.core.persistence import NotePersistence
from simple_notes.core.results import Loaded, RevealError, Saved
from simple_notes.ui.status import StatusMessageController, status_text_for
from simple_notes.ui.ui_state import UiStateStore
from simple_notes.ui.workers import PersistenceSignals, PersistenceTask

log = logging.getLogger(__name__)


class NotesWindow(QWidget):
    """
    Single note editor bound to `note_path`.

    Load/save run on a one-thread pool so they never block the UI and
    saves land in the order they were requested.
    """

    def __init__(
        self,
        persistence: NotePersistence,
        *,
        note_path: Path,
        settings: QSettings | None = None,
    ):
        super().__init__()
        self.persistence = persistence
        self.note_path = Path(note_path)
        log.info("Window initialized: note=%s", self.note_path)
        self.setWindowTitle("Simple Notes[*]")
        self.setMinimumSize(400, 400)

        self._pool = QThreadPool(self)
        self._pool.setMaxThreadCount(1)
        self._req_id = 0
        self._latest_load_id = 0
        # keep signal objects alive until their task reports back
        self._pending: dict[int, PersistenceSignals] = {}
        self._save_snapshots: dict[int, str] = {}
        self._loaded_once = False

        # UI
        title = QLabel("Simple Notes")
        font = QFont(title.font())
        font.setPointSizeF(font.pointSizeF() * 1.4)
        font.setWeight(QFont.Weight.DemiBold)
        title.setFont(font)

        self.editor = QPlainTextEdit()
        self.editor.setMinimumHeight(250)
        self.editor.document().modificationChanged.connect(self.setWindowModified)

        self.btn_save = QPushButton("Save")
        self.btn_save.setDefault(True)
        self.btn_save.setShortcut(QKeySequence(QKeySequence.StandardKey.Save))
        self.btn_load = QPushButton("Load")
        self.btn_save_as = QPushButton("Save As…")
        self.btn_save_as.setToolTip("Choose where to save the note")
        self.btn_reveal = QPushButton("Reveal")
        self.btn_reveal.setToolTip("Reveal the saved note in the file browser")

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: #2e7d32; font-size: 11px;")

        buttons = QHBoxLayout()
        buttons.setSpacing(24)
        buttons.addStretch(1)
        for btn in (self.btn_save, self.btn_load, self.btn_save_as, self.btn_reveal):
            buttons.addWidget(btn)
        buttons.addStretch(1)

        layout = QVBoxLayout(self)
        layout.setSpacing(16)
        layout.addWidget(title)
        layout.addWidget(self.editor, 1)
        layout.addLayout(buttons)
        layout.addWidget(self.status_label)

        self.status = StatusMessageController(self)

        # Signals
        self.status.changed.connect(self.status_label.setText)
        self.btn_save.clicked.connect(self.save_note)
        self.btn_load.clicked.connect(self.load_note)
        self.btn_save_as.clicked.connect(self.save_note_as)
        self.btn_reveal.clicked.connect(self.reveal_note)

        self.ui_state = UiStateStore(owner=self, settings=settings) if settings is not None else None
        if self.ui_state is not None:
            self.ui_state.restore()

    def showEvent(self, event):  # type: ignore[override]
        super().showEvent(event)
        if not self._loaded_once:
            self._loaded_once = True
            self.load_note()

    def closeEvent(self, event):  # type: ignore[override]
        """
        Let in-flight saves finish; a save is never cut off half way.
        """
        if self.ui_state is not None:
            self.ui_state.save()
        self._pool.waitForDone()
        super().closeEvent(event)

    # ---- actions ----

    def load_note(self) -> None:
        req_id = self._submit(partial(self.persistence.load, self.note_path), self._on_load_finished)
        self._latest_load_id = req_id

    def save_note(self) -> None:
        text = self.editor.toPlainText()
        # the platform may report a Documents dir that does not exist yet
        save = partial(self.persistence.save, self.note_path, text, create_parents=True)
        req_id = self._submit(save, self._on_save_finished)
        self._save_snapshots[req_id] = text

    def save_note_as(self) -> None:
        # the file dialog has to run on the GUI thread
        result = self.persistence.save_as(self.editor.toPlainText())
        self._show_result(result, save_as=True)

    def reveal_note(self) -> None:
        result = self.persistence.reveal(self.note_path)
        if isinstance(result, RevealError):
            log.info("Reveal skipped: %s", result.reason)

    # ---- background plumbing ----

    def _submit(self, call, on_finished) -> int:
        self._req_id += 1
        task = PersistenceTask(req_id=self._req_id, call=call)
        task.signals.finished.connect(on_finished)
        task.signals.failed.connect(self._on_task_failed)
        self._pending[self._req_id] = task.signals
        self._pool.start(task)
        return self._req_id

    @Slot(int, object)
    def _on_load_finished(self, req_id: int, result) -> None:
        self._pending.pop(req_id, None)
        if req_id != self._latest_load_id:
            log.debug("Stale load result dropped: req_id=%s", req_id)
            return
        if isinstance(result, Loaded):
            self.editor.setPlainText(result.text)
        self._show_result(result)

    @Slot(int, object)
    def _on_save_finished(self, req_id: int, result) -> None:
        self._pending.pop(req_id, None)
        text = self._save_snapshots.pop(req_id, None)
        if isinstance(result, Saved) and self.editor.toPlainText() == text:
            self.editor.document().setModified(False)
        self._show_result(result)

    @Slot(int, str)
    def _on_task_failed(self, req_id: int, err: str) -> None:
        self._pending.pop(req_id, None)
        self._save_snapshots.pop(req_id, None)
        log.error("Background note task failed: req_id=%s err=%s", req_id, err)

    def _show_result(self, result, *, save_as: bool = False) -> None:
        text = status_text_for(result, save_as=save_as)
        if text:
            self.status.show(text)
