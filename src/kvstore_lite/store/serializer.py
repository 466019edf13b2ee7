"""Binary encoding of a whole entry mapping.

ConcurrentMap does not define a wire format. It hands its entries to
a Serializer on save() and takes a mapping back on load(), and only
requires that decode(encode(entries)) == entries for the types it
stores.

PickleSerializer is the default: an opaque, versionless encoding
that round-trips any picklable key and value. Pickle executes code
while loading, so only load store files this process (or one you
trust) wrote.
"""
from __future__ import annotations

import pickle
from abc import ABC, abstractmethod
from typing import Any

from kvstore_lite.store.errors import (
    PersistenceDecodingError,
    PersistenceEncodingError,
)


class Serializer(ABC):
    """encode/decode pair used by save() and load()."""

    @abstractmethod
    def encode(self, entries: dict[Any, Any]) -> bytes:
        """Encode entries. Raises PersistenceEncodingError on failure."""
        ...

    @abstractmethod
    def decode(self, data: bytes) -> dict[Any, Any]:
        """Decode bytes from encode(). Raises PersistenceDecodingError on failure."""
        ...


class PickleSerializer(Serializer):
    """Serializer backed by the pickle module.

    Args:
        protocol: Pickle protocol (default pickle.HIGHEST_PROTOCOL).
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = protocol

    def encode(self, entries: dict[Any, Any]) -> bytes:
        try:
            return pickle.dumps(entries, protocol=self._protocol)
        # pickle lets whatever __reduce__ or __getstate__ raises through
        except Exception as exc:
            raise PersistenceEncodingError(
                f"cannot encode entries: {exc}"
            ) from exc

    def decode(self, data: bytes) -> dict[Any, Any]:
        try:
            entries = pickle.loads(data)
        except Exception as exc:
            raise PersistenceDecodingError(
                f"cannot decode entries: {exc}"
            ) from exc
        if not isinstance(entries, dict):
            raise PersistenceDecodingError(
                f"expected a mapping, decoded {type(entries).__name__}"
            )
        return entries
