from __future__ import annotations

import errno
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, Field

from json_store import atomic_write_json, read_json

from .capacity import check_quota
from .errors import AccessDenied, QuotaExceeded, StorageUnavailable
from .interfaces import KeyValueStore

_NO_SPACE = {errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)}


def _is_utf8(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class StoreDocument(BaseModel):
    """
    Mirrors the on-disk schema:
      { "entries": { "<key>": "<value>" } }
    """

    entries: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "StoreDocument":
        # Anything that isn't a UTF-8 string -> string mapping is treated as absent.
        if not isinstance(doc, Mapping):
            return cls()
        raw = doc.get("entries")
        if not isinstance(raw, Mapping):
            return cls()
        return cls(
            entries={
                k: v
                for k, v in raw.items()
                if isinstance(k, str) and isinstance(v, str) and _is_utf8(k) and _is_utf8(v)
            }
        )

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class DiskKeyValueStore(KeyValueStore):
    """
    Persists every entry in a single JSON document at a fixed path.

    - Reads never fail: a missing or corrupt file reads as an empty store.
    - Writes are atomic and raise StorageUnavailable when the disk refuses them.
    """

    def __init__(self, path: Path, *, quota_chars: int | None = None, read_only: bool = False):
        self._path = path
        self._quota_chars = quota_chars
        self._read_only = read_only

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> StoreDocument:
        return StoreDocument.from_disk_doc(read_json(self._path))

    def _save(self, key: str, doc: StoreDocument) -> None:
        if self._read_only:
            raise AccessDenied(key, f"{self._path} is read-only")
        try:
            atomic_write_json(self._path, doc.to_disk_doc())
        except OSError as e:
            cls: type[StorageUnavailable] = QuotaExceeded if e.errno in _NO_SPACE else AccessDenied
            raise cls(key, f"cannot write {self._path}: {e.strerror or e}") from e
        except ValueError as e:
            raise AccessDenied(key, f"cannot encode entry for {self._path}: {e}") from e

    def raw_get(self, key: str) -> str | None:
        return self._load().entries.get(key)

    def raw_set(self, key: str, value: str) -> None:
        if not (_is_utf8(key) and _is_utf8(value)):
            raise AccessDenied(key, "value is not encodable as UTF-8")
        doc = self._load()
        check_quota(doc.entries, key, value, self._quota_chars)
        doc.entries[key] = value
        self._save(key, doc)

    def raw_remove(self, key: str) -> None:
        doc = self._load()
        if doc.entries.pop(key, None) is None:
            return
        self._save(key, doc)

    def keys(self) -> list[str]:
        return list(self._load().entries.keys())
