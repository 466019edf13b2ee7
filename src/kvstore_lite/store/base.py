"""Abstract interface every key/value store implements.

ConcurrentMap is the only implementation today. Callers that only
need CRUD should type against Storer so a different backing store
can be swapped in without touching them.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Storer(ABC, Generic[K, V]):
    """CRUD over unique keys."""

    @abstractmethod
    def put(self, key: K, value: V) -> None:
        """Insert or overwrite the entry for key."""
        ...

    @abstractmethod
    def get(self, key: K) -> V:
        """Return the value for key. Raises KeyNotFound if absent."""
        ...

    @abstractmethod
    def update(self, key: K, value: V) -> None:
        """Overwrite an existing key. Raises KeyNotFound if absent."""
        ...

    @abstractmethod
    def delete(self, key: K) -> V:
        """Remove key and return its value. Raises KeyNotFound if absent."""
        ...
