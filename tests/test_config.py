from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from unittest.mock import patch

import pytest

from kinship import db, deps
from kinship.config import DEFAULT_SEED_FILE, Settings
from kinship.deps import get_person_store, seeded_memory_store
from kinship.logging_config import configure_logging
from kinship.store import MemoryPersonStore, PostgresPersonStore

from fake_pg import FakeConn, smith_conn


class TestSettings:
    @patch.dict("os.environ", {}, clear=True)
    def test_defaults(self) -> None:
        s = Settings.from_env()
        assert s.database_url is None
        assert s.seed_file == DEFAULT_SEED_FILE
        assert s.log_level == "INFO"

    @patch.dict(
        "os.environ",
        {"DATABASE_URL": "postgresql://x/y", "KINSHIP_SEED_FILE": "/tmp/seed.json", "KINSHIP_LOG_LEVEL": "debug"},
        clear=True,
    )
    def test_from_env(self) -> None:
        s = Settings.from_env()
        assert s.database_url == "postgresql://x/y"
        assert s.seed_file == Path("/tmp/seed.json")
        assert s.log_level == "DEBUG"


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("WARNING")
    handlers = list(logger.handlers)
    again = configure_logging("DEBUG")
    assert again is logger
    assert again.handlers == handlers
    assert again.level == logging.DEBUG


@patch.dict("os.environ", {}, clear=True)
def test_memory_store_used_without_database_url() -> None:
    gen = get_person_store()
    store = next(gen)
    assert isinstance(store, MemoryPersonStore)
    assert store is seeded_memory_store(DEFAULT_SEED_FILE)
    assert store.find_by_name("King Arthur") is not None
    gen.close()


@patch.dict("os.environ", {"DATABASE_URL": "postgresql://fake/db"}, clear=True)
def test_postgres_store_used_with_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    conn = smith_conn()
    opened: list[tuple] = []

    @contextmanager
    def fake_db_conn(*args):
        opened.append(args)
        yield conn

    monkeypatch.setattr(deps, "db_conn", fake_db_conn)

    gen = get_person_store()
    store = next(gen)
    assert isinstance(store, PostgresPersonStore)
    assert store.find_by_name("Morty Smith").parent_ids == [2, 3]
    # The URL comes from the environment, not from the caller.
    assert opened == [()]
    gen.close()


class TestDatabaseUrl:
    @patch.dict("os.environ", {}, clear=True)
    def test_missing_database_url(self) -> None:
        with pytest.raises(RuntimeError, match="DATABASE_URL is not set"):
            db.get_database_url()

    @patch.dict("os.environ", {"DATABASE_URL": "postgresql://fake/db"}, clear=True)
    def test_db_conn_reads_database_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        urls: list[str] = []

        def fake_connect(url: str) -> FakeConn:
            urls.append(url)
            return FakeConn()

        monkeypatch.setattr(db.psycopg, "connect", fake_connect)
        with db.db_conn() as conn:
            assert isinstance(conn, FakeConn)
        assert urls == ["postgresql://fake/db"]
