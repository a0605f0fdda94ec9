from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler

from simple_notes import settings

SESSION_ID = uuid.uuid4().hex[:8]

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"


class SessionFilter(logging.Filter):
    """Stamp every record with this process' session id."""
    def filter(self, record: logging.LogRecord) -> bool:
        record.session = SESSION_ID
        return True


def setup_logging() -> logging.Logger:
    """
    Package logger `simple_notes`: rotating file at DEBUG, stdout at INFO.
    Module loggers propagate into it. Safe to call twice.
    """
    logger = logging.getLogger(settings.LOGGER_NAME)
    if logger.handlers:
        return logger

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    fh = RotatingFileHandler(
        settings.LOG_PATH, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    ch = logging.StreamHandler(sys.stdout or sys.stderr)

    fmt = logging.Formatter(_FORMAT)
    for handler, level in ((fh, logging.DEBUG), (ch, logging.INFO)):
        handler.setLevel(level)
        handler.setFormatter(fmt)
        handler.addFilter(SessionFilter())
        logger.addHandler(handler)

    logger.info("Logging initialized. log_file=%s sid=%s", settings.LOG_PATH, SESSION_ID)
    return logger


def install_global_exception_hooks(log: logging.Logger) -> None:
    """Route uncaught Python exceptions and Qt messages into the log."""
    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    levels = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _qt_message_handler(mode, context, message):
        where = f"{context.file}:{context.line}" if context.file else "unknown"
        log.log(levels.get(mode, logging.WARNING), "Qt: %s | where=%s", message, where)

    qInstallMessageHandler(_qt_message_handler)
