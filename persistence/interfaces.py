from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """
    Minimal medium interface: a flat namespace of string keys holding string values.
    """

    def raw_get(self, key: str) -> str | None:
        """Return the current value, or None when the key is absent."""
        ...

    def raw_set(self, key: str, value: str) -> None:
        """Store value under key. Raises StorageUnavailable if the medium refuses."""
        ...

    def raw_remove(self, key: str) -> None:
        """Delete key; no-op when absent."""
        ...
