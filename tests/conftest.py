from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Redirect persistence paths to a temp project directory so tests never touch real ./data.
    """
    import persistence.paths as paths

    def _project_root() -> Path:
        return tmp_path

    def _data_dir() -> Path:
        p = tmp_path / "data"
        p.mkdir(parents=True, exist_ok=True)
        return p

    monkeypatch.setattr(paths, "project_root", _project_root)
    monkeypatch.setattr(paths, "data_dir", _data_dir)
    return tmp_path


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "SAFESTORE_BACKEND",
        "SAFESTORE_PATH",
        "SAFESTORE_QUOTA_CHARS",
        "SAFESTORE_READ_ONLY",
        "LOG_LEVEL",
    ):
        # set first so teardown also undoes anything load_dotenv writes
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def store_path(sandbox_project: Path) -> Path:
    data = sandbox_project / "data"
    data.mkdir(parents=True, exist_ok=True)
    return data / "store.json"


@pytest.fixture(params=["memory", "disk"])
def medium(request, store_path: Path):
    from persistence import DiskKeyValueStore, MemoryKeyValueStore

    if request.param == "memory":
        return MemoryKeyValueStore()
    return DiskKeyValueStore(store_path)


@pytest.fixture
def safe_store(medium):
    from persistence import SafeStore

    return SafeStore(medium)
