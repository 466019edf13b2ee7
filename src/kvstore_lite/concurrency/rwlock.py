"""Read-write lock guarding a whole ConcurrentMap.

Shared mode (read) admits any number of holders at once. Exclusive
mode (write) admits exactly one holder and no readers.

Built on threading.Condition with a reader count. Writers get
preference: as soon as one is queued, new readers wait behind it.
A steady stream of get() calls therefore cannot starve a put() or a
save().

Usage:
    lock = ReadWriteLock()

    with lock.read():
        value = entries[key]

    with lock.write():
        entries[key] = value

The lock is not reentrant. A thread inside write() that calls read()
or write() again on the same lock deadlocks.
"""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Shared/exclusive lock with writer preference."""

    def __init__(self) -> None:
        self._readers: int = 0
        self._writers_waiting: int = 0
        self._writer_active: bool = False
        self._cond = threading.Condition(threading.Lock())

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold shared access. Waits while a writer holds or awaits the lock."""
        with self._cond:
            while self._writer_active or self._writers_waiting > 0:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold exclusive access. Waits for active readers and writers to leave."""
        with self._cond:
            self._writers_waiting += 1
            while self._writer_active or self._readers > 0:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer_active = True
        try:
            yield
        finally:
            with self._cond:
                self._writer_active = False
                self._cond.notify_all()

    @property
    def readers(self) -> int:
        """Number of threads currently holding shared access."""
        with self._cond:
            return self._readers

    @property
    def writer_active(self) -> bool:
        with self._cond:
            return self._writer_active
