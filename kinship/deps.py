from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterator

from .config import get_settings
from .db import db_conn
from .importer import load_people, read_seed_file
from .store import MemoryPersonStore, PersonStore, PostgresPersonStore

log = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def seeded_memory_store(seed_file: Path) -> MemoryPersonStore:
    """Process-wide in-memory store, seeded once per seed file."""

    store = MemoryPersonStore()
    load_people(store, read_seed_file(seed_file))
    log.info("seeded in-memory store with %d people from %s", len(store), seed_file)
    return store


def get_person_store() -> Iterator[PersonStore]:
    """FastAPI dependency: Postgres when DATABASE_URL is set, else the seeded memory store."""

    settings = get_settings()
    if settings.database_url:
        with db_conn() as conn:
            yield PostgresPersonStore(conn)
        return
    yield seeded_memory_store(settings.seed_file)
