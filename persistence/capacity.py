from __future__ import annotations

from typing import Mapping

from .errors import QuotaExceeded


def footprint(entries: Mapping[str, str]) -> int:
    return sum(len(k) + len(v) for k, v in entries.items())


def check_quota(entries: Mapping[str, str], key: str, value: str, quota_chars: int | None) -> None:
    """
    Raise QuotaExceeded if writing key=value would push the store past quota_chars.

    An overwrite only counts the new value for that key.
    """
    if not quota_chars:
        return
    current = footprint(entries)
    previous = entries.get(key)
    if previous is not None:
        current -= len(key) + len(previous)
    needed = current + len(key) + len(value)
    if needed > quota_chars:
        raise QuotaExceeded(key, f"needs {needed} chars, quota is {quota_chars}")
