"""
Logger - component-tagged logging for Flocking

    from flocking.utils.logger import logger

    logger.info("Simulation started", component="FLOCK")
    logger.warning("Cannot toggle", component="GUI", details=str(e))

Records go to stdout, to an optional log file, and out through a Qt signal
that the main window shows in its status bar.
"""

import logging
import sys
from datetime import datetime
from enum import IntEnum
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal


CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class LogLevel(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogSignalEmitter(QObject):
    log_message = pyqtSignal(str, int, str)  # message, level, HH:MM:SS


class StatusBarHandler(logging.Handler):
    """Forwards formatted records to a LogSignalEmitter."""

    def __init__(self, emitter: LogSignalEmitter, level=logging.INFO):
        super().__init__(level)
        self.emitter = emitter
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord):
        try:
            stamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
            self.emitter.log_message.emit(self.format(record), record.levelno, stamp)
        except Exception:
            self.handleError(record)


def tag(msg: str, component: Optional[str] = None,
        details: Optional[str] = None) -> str:
    """'[FLOCK] msg - details', leaving out the parts that are absent."""
    text = f"[{component}] {msg}" if component else msg
    return f"{text} - {details}" if details else text


class FlockLogger:
    """Wraps one stdlib logger with the app's handlers attached."""

    def __init__(self, name: str = "flocking"):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self.signal_emitter = LogSignalEmitter()

        self._console = logging.StreamHandler(sys.stdout)
        self._console.setLevel(logging.INFO)
        self._console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))

        self._file: Optional[logging.FileHandler] = None

        self._logger.addHandler(self._console)
        self._logger.addHandler(StatusBarHandler(self.signal_emitter))

    def set_level(self, level: LogLevel):
        """Minimum level printed on the console."""
        self._console.setLevel(level)

    def enable_file_logging(self, filepath: str):
        """Write every record, debug included, to filepath."""
        self.disable_file_logging()
        self._file = logging.FileHandler(filepath)
        self._file.setLevel(logging.DEBUG)
        self._file.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self._logger.addHandler(self._file)

    def disable_file_logging(self):
        if self._file is None:
            return
        self._logger.removeHandler(self._file)
        self._file.close()
        self._file = None

    def log(self, level: int, msg: str, component: Optional[str] = None,
            details: Optional[str] = None):
        self._logger.log(level, tag(msg, component, details))

    def debug(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self.log(logging.DEBUG, msg, component, details)

    def info(self, msg: str, component: Optional[str] = None,
             details: Optional[str] = None):
        self.log(logging.INFO, msg, component, details)

    def warning(self, msg: str, component: Optional[str] = None,
                details: Optional[str] = None):
        self.log(logging.WARNING, msg, component, details)

    def error(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self.log(logging.ERROR, msg, component, details)

    def flock(self, msg: str, details: Optional[str] = None):
        """Debug-level message from the simulation driver."""
        self.debug(msg, component="FLOCK", details=details)


logger = FlockLogger()


def set_log_level(level: LogLevel):
    """Set the console log level."""
    logger.set_level(level)
