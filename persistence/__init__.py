from __future__ import annotations

from .disk_store import DiskKeyValueStore, StoreDocument
from .errors import AccessDenied, QuotaExceeded, StorageUnavailable
from .interfaces import KeyValueStore
from .memory_store import MemoryKeyValueStore
from .safe_store import SafeStore

__all__ = [
    "SafeStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "DiskKeyValueStore",
    "StoreDocument",
    "StorageUnavailable",
    "QuotaExceeded",
    "AccessDenied",
]
