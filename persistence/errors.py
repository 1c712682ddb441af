from __future__ import annotations


class StorageUnavailable(Exception):
    """
    The storage medium refused a write (capacity, permissions, I/O).

    Raised only on the write path; reads resolve every failure to a fallback.
    """

    def __init__(self, key: str, reason: str):
        super().__init__(f"storage unavailable for key {key!r}: {reason}")
        self.key = key
        self.reason = reason


class QuotaExceeded(StorageUnavailable):
    pass


class AccessDenied(StorageUnavailable):
    pass
