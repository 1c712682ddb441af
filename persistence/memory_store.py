from __future__ import annotations

from .capacity import check_quota
from .errors import AccessDenied
from .interfaces import KeyValueStore


class MemoryKeyValueStore(KeyValueStore):
    """
    Process-local medium backed by a dict.

    - quota_chars caps the total of len(key) + len(value) across entries.
    - read_only makes every mutating call raise AccessDenied.
    """

    def __init__(self, *, quota_chars: int | None = None, read_only: bool = False):
        self._entries: dict[str, str] = {}
        self._quota_chars = quota_chars
        self._read_only = read_only

    def raw_get(self, key: str) -> str | None:
        return self._entries.get(key)

    def raw_set(self, key: str, value: str) -> None:
        if self._read_only:
            raise AccessDenied(key, "store is read-only")
        check_quota(self._entries, key, value, self._quota_chars)
        self._entries[key] = value

    def raw_remove(self, key: str) -> None:
        if key not in self._entries:
            return
        if self._read_only:
            raise AccessDenied(key, "store is read-only")
        del self._entries[key]

    def keys(self) -> list[str]:
        return list(self._entries.keys())

    def __len__(self) -> int:
        return len(self._entries)
