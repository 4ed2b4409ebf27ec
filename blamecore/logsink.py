# -----------------------------------------------------------------------------
# Copyright (C) 2026 blamecore contributors.
# This file is part of blamecore, distributed under the GNU GPL v3.
# For full terms, see the included LICENSE file.
# -----------------------------------------------------------------------------

"""
Forward blamecore's log records to a host-provided output pane.
"""

import logging
from collections.abc import Callable

PACKAGE_LOGGER_NAME = "blamecore"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

WriteCallback = Callable[[int, str], None]


class OutputPaneHandler(logging.Handler):
    """
    Logging handler that passes each formatted record to `write(level, message)`.
    """

    def __init__(self, write: WriteCallback, level=logging.NOTSET):
        super().__init__(level)
        self.write = write
        self.setFormatter(logging.Formatter(LOG_FORMAT))

    def emit(self, record: logging.LogRecord):
        try:
            message = self.format(record)
            self.write(record.levelno, message)
        except Exception:
            self.handleError(record)


def installLogSink(write: WriteCallback, level: int = logging.WARNING) -> OutputPaneHandler:
    """
    Attach an OutputPaneHandler to the package logger and set the package's
    log level. Returns the handler so that the caller can remove it later.
    """
    handler = OutputPaneHandler(write)
    packageLogger = logging.getLogger(PACKAGE_LOGGER_NAME)
    packageLogger.addHandler(handler)
    packageLogger.setLevel(level)
    return handler


def removeLogSink(handler: logging.Handler):
    logging.getLogger(PACKAGE_LOGGER_NAME).removeHandler(handler)


def setPackageLogLevel(level: int):
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)
