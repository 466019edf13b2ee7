"""Key/value store: the concurrent map, its interface, and persistence.

Public API:
    ConcurrentMap: thread-safe generic map with save/load
    Storer: abstract CRUD interface
    Serializer, PickleSerializer: encoding used by save/load
    KeyNotFound and the Persistence* errors
"""
from kvstore_lite.store.base import Storer
from kvstore_lite.store.concurrent_map import ConcurrentMap
from kvstore_lite.store.errors import (
    KeyNotFound,
    KVStoreError,
    PersistenceDecodingError,
    PersistenceEncodingError,
    PersistenceError,
    PersistenceIOError,
    StoreUnavailableError,
)
from kvstore_lite.store.serializer import PickleSerializer, Serializer

__all__ = [
    "ConcurrentMap",
    "KeyNotFound",
    "KVStoreError",
    "PersistenceDecodingError",
    "PersistenceEncodingError",
    "PersistenceError",
    "PersistenceIOError",
    "PickleSerializer",
    "Serializer",
    "StoreUnavailableError",
    "Storer",
]
