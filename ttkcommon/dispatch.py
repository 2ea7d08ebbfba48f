"""Deferred, retried work items processed periodically on a background thread."""

from __future__ import annotations

import enum
import os
import threading
from dataclasses import dataclass, field
from typing import Any, ClassVar

__all__ = ["MAX_RETRIES", "DispatchItem", "DispatchManager", "DispatchModule"]

MAX_RETRIES = 5
DEFAULT_INTERVAL = 5.0


class DispatchModule(enum.Enum):
    """Kinds of work the dispatch manager knows how to perform."""

    NULL = -1
    FILE_REMOVE = 0


@dataclass
class DispatchItem:
    """A queued piece of work with its arguments and failure count."""

    module: DispatchModule = DispatchModule.NULL
    args: list[Any] = field(default_factory=list)
    times: int = 0

    def is_empty(self) -> bool:
        """True when the item carries no arguments."""
        return not self.args

    def is_valid(self) -> bool:
        """True while the item has not failed more than the retry limit."""
        return self.times <= MAX_RETRIES


def _remove_file(path: Any) -> bool:
    try:
        os.remove(str(path))
    except OSError:
        return False
    return True


class DispatchManager:
    """Queue of work items, one of which is handled per tick.

    The most recently queued item is handled first. An item that fails is put
    back on the queue until it has failed more than :data:`MAX_RETRIES` times.
    """

    _instance: ClassVar[DispatchManager | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, interval: float = DEFAULT_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._items: list[DispatchItem] = []
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @classmethod
    def instance(cls) -> DispatchManager:
        """Return the shared, running manager, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                manager = cls()
                manager.start()
                cls._instance = manager
            return cls._instance

    def dispatch(self, module: DispatchModule, *args: Any) -> None:
        """Queue work of kind *module* with the given arguments."""
        item = DispatchItem(DispatchModule(module), list(args))
        with self._lock:
            self._items.append(item)

    @property
    def pending(self) -> tuple[DispatchItem, ...]:
        """The queued items, oldest first."""
        with self._lock:
            return tuple(self._items)

    def active_functions(self) -> bool:
        """Handle the newest queued item; return True if it completed."""
        with self._lock:
            if not self._items:
                return False
            item = self._items.pop()
            state = True
            if item.module is DispatchModule.FILE_REMOVE and item.args:
                state = _remove_file(item.args[0])
            if not state:
                item.times += 1
                if item.is_valid():
                    self._items.append(item)
            return state

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            self.active_functions()

    def start(self) -> None:
        """Start the background thread that handles items every interval."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="dispatch-manager", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the background thread and wait for it to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> DispatchManager:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)