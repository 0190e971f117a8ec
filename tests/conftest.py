from __future__ import annotations

import sys
from pathlib import Path

import pytest

# make the pokehunter package importable for local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pokehunter.core import config as core_config  # noqa: E402
from pokehunter.db import models  # noqa: E402
from pokehunter.db import session as db_session  # noqa: E402
from pokehunter.repositories import get_storage  # noqa: E402
from pokehunter.repositories.memory_storage import MemoryStorage  # noqa: E402
from pokehunter.repositories.sql_repository import SQLRepository  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    get_storage.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a throwaway SQLite file and create the schema."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()


@pytest.fixture()
def sql_repo(temp_db) -> SQLRepository:
    return SQLRepository()


@pytest.fixture()
def seeded_memory() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def empty_memory() -> MemoryStorage:
    return MemoryStorage(seed=False)


@pytest.fixture(params=["memory", "sql"])
def storage(request):
    """Empty store of each backend, for behavior both must share."""
    if request.param == "memory":
        return MemoryStorage(seed=False)
    request.getfixturevalue("temp_db")
    return SQLRepository()
