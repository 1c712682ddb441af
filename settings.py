from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_QUOTA_CHARS = 5 * 1024 * 1024
BACKENDS = ("memory", "disk")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_quota(name: str, default: int) -> int | None:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw or raw == "0":
        return None
    quota = int(raw)
    if quota < 0:
        raise ValueError(f"{name} must be >= 0, got {quota}")
    return quota


@dataclass(frozen=True)
class Settings:
    # Medium
    backend: str
    store_path: Path | None
    quota_chars: int | None
    read_only: bool

    # Logging
    log_level: str


def get_settings() -> Settings:
    backend = os.getenv("SAFESTORE_BACKEND", "memory").strip().lower()
    if backend not in BACKENDS:
        raise ValueError(f"SAFESTORE_BACKEND must be one of {BACKENDS}, got {backend!r}")

    # None means "use persistence.paths.default_store_path()" at build time.
    raw_path = os.getenv("SAFESTORE_PATH", "").strip()
    store_path = Path(raw_path).expanduser() if raw_path else None

    return Settings(
        backend=backend,
        store_path=store_path,
        quota_chars=_env_quota("SAFESTORE_QUOTA_CHARS", DEFAULT_QUOTA_CHARS),
        read_only=_env_bool("SAFESTORE_READ_ONLY", False),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
