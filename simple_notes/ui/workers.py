from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QRunnable, Signal


class PersistenceSignals(QObject):
    finished = Signal(int, object)
    failed = Signal(int, str)


class PersistenceTask(QRunnable):
    """Runs one NotePersistence call on a pool thread and reports back by signal."""

    def __init__(self, *, req_id: int, call: Callable[[], object]):
        super().__init__()
        self.req_id = req_id
        self.call = call
        self.signals = PersistenceSignals()

    def run(self):
        try:
            res = self.call()
            self.signals.finished.emit(self.req_id, res)
        except Exception as e:
            self.signals.failed.emit(self.req_id, str(e))
