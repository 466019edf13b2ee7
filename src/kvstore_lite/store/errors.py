"""Exceptions raised by the key/value store.

KeyNotFound is the everyday miss: get/update/delete on an absent key.
It subclasses KeyError so callers that already catch KeyError keep
working.

The Persistence* family covers save() and load(). The underlying
OSError or serializer exception is always chained as __cause__.
"""
from __future__ import annotations

import os
from typing import Any


class KVStoreError(Exception):
    """Base class for every error the store raises."""


class KeyNotFound(KVStoreError, KeyError):
    """Raised when get, update or delete targets a key that is not stored."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"the key ({key}) does not exist")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message a second time
        return self.args[0]


class PersistenceError(KVStoreError):
    """A save or load could not complete."""

    def __init__(self, message: str, path: str | os.PathLike | None = None) -> None:
        self.path = path
        super().__init__(message)


class PersistenceIOError(PersistenceError):
    """The store file could not be opened, created, written or removed."""


class StoreUnavailableError(PersistenceIOError):
    """load() found no readable store file at the given path."""


class PersistenceEncodingError(PersistenceError):
    """The serializer could not encode the current entries."""


class PersistenceDecodingError(PersistenceError):
    """The serializer could not decode the store file."""
