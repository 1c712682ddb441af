from __future__ import annotations

import logging
from typing import Any

from .errors import StorageUnavailable
from .interfaces import KeyValueStore
from .json_codec import DECODE_FAILED, decode, encode, to_text

logger = logging.getLogger(__name__)


class SafeStore:
    """
    Total access to a string key-value medium.

    Reads never raise: an absent key and a value that fails to decode both
    resolve to the caller's fallback. Writes raise only StorageUnavailable,
    when the medium itself refuses; encoding problems degrade to "null".
    SafeStore keeps no state of its own between calls.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    # -------------------------------------------------------------------
    # Raw strings
    # -------------------------------------------------------------------
    def get(self, key: str, fallback: str | None = None) -> str | None:
        value = self._store.raw_get(key)
        return fallback if value is None else value

    def set(self, key: str, value: Any) -> None:
        self._write(key, to_text(value))

    def remove(self, key: str) -> None:
        try:
            self._store.raw_remove(key)
        except StorageUnavailable as e:
            logger.warning("SAFESTORE REMOVE: %s", e)
            raise

    # -------------------------------------------------------------------
    # JSON documents
    # -------------------------------------------------------------------
    def get_json(self, key: str, fallback: Any = None) -> Any:
        raw = self._store.raw_get(key)
        value = decode(raw)
        if value is DECODE_FAILED:
            if raw is not None:
                logger.debug("SAFESTORE GET_JSON: %r holds malformed JSON, using fallback", key)
            return fallback
        return value

    def set_json(self, key: str, obj: Any) -> None:
        self._write(key, encode(obj))

    # Original helper names.
    getJSON = get_json
    setJSON = set_json

    def _write(self, key: str, text: str) -> None:
        try:
            self._store.raw_set(key, text)
        except StorageUnavailable as e:
            logger.warning("SAFESTORE SET: %s", e)
            raise
