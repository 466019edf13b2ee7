"""Locking primitives for the key/value store.

  - ReadWriteLock: many readers OR one writer, writer preference
"""
from kvstore_lite.concurrency.rwlock import ReadWriteLock

__all__ = ["ReadWriteLock"]
