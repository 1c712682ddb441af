from __future__ import annotations

import logging

from dotenv import load_dotenv

from persistence import DiskKeyValueStore, KeyValueStore, MemoryKeyValueStore, SafeStore
from persistence import paths
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        logger.warning("LOGGING: unknown LOG_LEVEL %r, using INFO", level)
        resolved = logging.INFO
    root.setLevel(resolved)


def build_medium(settings: Settings) -> KeyValueStore:
    if settings.backend == "disk":
        path = settings.store_path or paths.default_store_path()
        logger.info("SAFESTORE: disk medium at %s", path)
        return DiskKeyValueStore(path, quota_chars=settings.quota_chars, read_only=settings.read_only)

    logger.info("SAFESTORE: in-memory medium (quota=%s)", settings.quota_chars)
    return MemoryKeyValueStore(quota_chars=settings.quota_chars, read_only=settings.read_only)


def create_store(settings: Settings | None = None) -> SafeStore:
    load_dotenv("local.env")
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return SafeStore(build_medium(settings))
