"""Thread-safe key/value map with whole-store persistence.

One dict, one ReadWriteLock. Every public method is a single critical
section over that lock, so operations on one instance are linearizable:
any two calls appear to run one entirely before the other.

Lock modes:
    read  -> get, contains, size, keys, values, items, snapshot, print
    write -> put, update, delete, clear, save, load

save() takes the WRITE lock even though it only reads the dict. No writer
can interleave with the encode, and save/load exclude each other.

Unlike a striped map (one lock per hash bucket), size() and keys() here
are true point-in-time snapshots, because there is only one lock to hold.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from kvstore_lite.concurrency.rwlock import ReadWriteLock
from kvstore_lite.store.base import K, V, Storer
from kvstore_lite.store.errors import (
    KeyNotFound,
    PersistenceError,
    PersistenceIOError,
    StoreUnavailableError,
)
from kvstore_lite.store.serializer import PickleSerializer, Serializer

log = logging.getLogger(__name__)


class ConcurrentMap(Storer[K, V]):
    """Generic in-memory map safe for concurrent use from many threads.

    Args:
        serializer: Encoding used by save() and load()
            (default PickleSerializer).
    """

    def __init__(self, serializer: Serializer | None = None) -> None:
        self._entries: dict[K, V] = {}
        self._lock = ReadWriteLock()
        self._serializer = serializer or PickleSerializer()

    # --- CRUD ---

    def put(self, key: K, value: V) -> None:
        """Insert or overwrite. Never fails."""
        with self._lock.write():
            self._entries[key] = value

    def get(self, key: K) -> V:
        with self._lock.read():
            try:
                return self._entries[key]
            except KeyError:
                raise KeyNotFound(key) from None

    def update(self, key: K, value: V) -> None:
        """Overwrite an existing key. Unlike put(), never creates one."""
        with self._lock.write():
            if key not in self._entries:
                raise KeyNotFound(key)
            self._entries[key] = value

    def delete(self, key: K) -> V:
        """Remove key and return the value it held."""
        with self._lock.write():
            try:
                return self._entries.pop(key)
            except KeyError:
                raise KeyNotFound(key) from None

    def clear(self) -> None:
        with self._lock.write():
            self._entries.clear()

    # --- Introspection (all under one read lock, so each is atomic) ---

    def contains(self, key: K) -> bool:
        with self._lock.read():
            return key in self._entries

    def size(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def keys(self) -> list[K]:
        with self._lock.read():
            return list(self._entries)

    def values(self) -> list[V]:
        with self._lock.read():
            return list(self._entries.values())

    def items(self) -> list[tuple[K, V]]:
        with self._lock.read():
            return list(self._entries.items())

    def snapshot(self) -> dict[K, V]:
        """Shallow copy of every entry at a single point in time."""
        with self._lock.read():
            return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()})"

    # --- Diagnostics ---

    def format_entries(self) -> str:
        """One 'key: <k> value: <v>' line per entry."""
        return "\n".join(
            f"key: {k} value: {v}" for k, v in self.items()
        )

    def print(self, file: TextIO | None = None) -> None:
        """Write format_entries() to file (default stdout)."""
        out = file if file is not None else sys.stdout
        text = self.format_entries()
        if text:
            print(text, file=out)

    # --- Persistence ---

    def save(self, path: str | os.PathLike) -> None:
        """Write every entry to path, replacing whatever file is there.

        Raises:
            PersistenceEncodingError: the serializer rejected an entry.
                Any existing file at path is left untouched.
            PersistenceIOError: the file could not be removed, created
                or written.
        """
        with self._lock.write():
            try:
                data = self._serializer.encode(self._entries)
            except PersistenceError as exc:
                exc.path = path
                raise
            try:
                os.remove(path)
            except FileNotFoundError:
                log.debug("no previous store file at %s", path)
            except OSError as exc:
                raise PersistenceIOError(
                    f"cannot remove existing file {os.fspath(path)}: {exc}", path
                ) from exc
            try:
                with open(path, "wb") as f:
                    f.write(data)
            except OSError as exc:
                raise PersistenceIOError(
                    f"cannot save to file {os.fspath(path)}: {exc}", path
                ) from exc
            count = len(self._entries)
        log.debug("saved %d entries (%d bytes) to %s", count, len(data), path)

    def load(self, path: str | os.PathLike) -> None:
        """Replace the current entries with those saved at path.

        The map is only modified once the file has been read and decoded
        in full. On any error the current entries are left as they were.

        Raises:
            StoreUnavailableError: path does not exist or cannot be opened.
            PersistenceIOError: the file opened but could not be read.
            PersistenceDecodingError: the serializer rejected the contents.
        """
        with self._lock.write():
            try:
                f = open(path, "rb")
            except OSError as exc:
                raise StoreUnavailableError(
                    f"key/value store unavailable at {os.fspath(path)}: {exc}", path
                ) from exc
            with f:
                try:
                    data = f.read()
                except OSError as exc:
                    raise PersistenceIOError(
                        f"cannot read file {os.fspath(path)}: {exc}", path
                    ) from exc
            try:
                entries = self._serializer.decode(data)
            except PersistenceError as exc:
                exc.path = path
                raise
            self._entries = dict(entries)
            count = len(self._entries)
        log.debug("loaded %d entries from %s", count, path)
