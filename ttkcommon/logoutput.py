"""Logging handler that writes messages to dated, size-limited files."""

from __future__ import annotations

import logging
import sys
import threading
from datetime import date
from pathlib import Path
from typing import TextIO

__all__ = [
    "LOG_MAX_SIZE",
    "LogOutputHandler",
    "install_log_handler",
    "remove_log_handler",
]

LOG_MAX_SIZE = 5 * 1024 * 1024
_DATE_FORMAT = "%Y-%m-%d"


def _default_directory() -> Path:
    return Path(sys.argv[0] or ".").resolve().parent / "log"


def _today() -> str:
    return date.today().strftime(_DATE_FORMAT)


class LogOutputHandler(logging.Handler):
    """Write each record to ``<directory>/<date>_<n>.log``.

    A new file is started when the current one reaches *max_size* bytes or
    when the date changes; ``n`` counts up from 1 past files that are full.
    """

    def __init__(self, directory: str | Path | None = None, max_size: int = LOG_MAX_SIZE) -> None:
        super().__init__()
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self.directory = Path(directory) if directory is not None else _default_directory()
        self.max_size = max_size
        self.directory.mkdir(parents=True, exist_ok=True)
        self._date = ""
        self._stream: TextIO | None = None
        self.path: Path | None = None
        self._open()

    def _open(self) -> None:
        self._date = _today()
        index = 1
        while True:
            path = self.directory / f"{self._date}_{index}.log"
            index += 1
            if not path.exists() or path.stat().st_size < self.max_size:
                break
        self.path = path
        self._stream = path.open("a", encoding="utf-8")

    def _close_stream(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if self._stream is not None and self.path is not None:
                too_large = self.path.stat().st_size >= self.max_size
                next_date = _today().lower() != self._date.lower()
                if too_large or next_date:
                    self._close_stream()
                    self._open()
            if self._stream is not None:
                self._stream.write(message + "\n")
                self._stream.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            self._close_stream()
        finally:
            self.release()
        super().close()


_installed: LogOutputHandler | None = None
_install_lock = threading.Lock()


def install_log_handler(directory: str | Path | None = None,
                        max_size: int = LOG_MAX_SIZE) -> LogOutputHandler:
    """Attach a file handler to the root logger, replacing any installed before."""
    global _installed
    with _install_lock:
        root = logging.getLogger()
        if _installed is not None:
            root.removeHandler(_installed)
            _installed.close()
        _installed = LogOutputHandler(directory, max_size)
        root.addHandler(_installed)
        return _installed


def remove_log_handler() -> None:
    """Detach and close the handler attached by :func:`install_log_handler`."""
    global _installed
    with _install_lock:
        if _installed is None:
            return
        logging.getLogger().removeHandler(_installed)
        _installed.close()
        _installed = None