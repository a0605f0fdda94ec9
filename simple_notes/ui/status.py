from __future__ import annotations

from PySide6.QtCore import QObject, QTimer, Signal

from simple_notes.core.results import ReadError, Saved, WriteError
from simple_notes.settings import STATUS_CLEAR_MS


def status_text_for(result, *, save_as: bool = False) -> str | None:
    """
    Status line text for an operation result; None means show nothing.
    """
    if isinstance(result, Saved):
        return f"Saved to {result.path.name}" if save_as else "Saved!"
    if isinstance(result, WriteError):
        return f"Save failed: {result.reason}"
    if isinstance(result, ReadError):
        return f"Load failed: {result.reason}"
    # Loaded / NotFound / Cancelled / Revealed / RevealError
    return None


class StatusMessageController(QObject):
    """
    Owns the transient status message. A new message replaces the current one
    and re-arms the clear timer.
    """
    changed = Signal(str)

    def __init__(self, parent: QObject | None = None, *, clear_ms: int = STATUS_CLEAR_MS):
        super().__init__(parent)
        self._text = ""
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(int(clear_ms))
        self._timer.timeout.connect(self.clear)

    @property
    def text(self) -> str:
        return self._text

    def is_armed(self) -> bool:
        return self._timer.isActive()

    def show(self, text: str) -> None:
        self._text = text
        self.changed.emit(text)
        self._timer.start()

    def clear(self) -> None:
        self._timer.stop()
        if self._text:
            self._text = ""
            self.changed.emit("")
