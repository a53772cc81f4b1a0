from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_SEED_FILE = _REPO_ROOT / "data" / "royal_family.json"
DEFAULT_SCHEMA_SQL = _REPO_ROOT / "sql" / "schema.sql"


@dataclass(frozen=True)
class Settings:
    database_url: str | None
    seed_file: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        seed = os.environ.get("KINSHIP_SEED_FILE", "").strip()
        return cls(
            database_url=os.environ.get("DATABASE_URL") or None,
            seed_file=Path(seed) if seed else DEFAULT_SEED_FILE,
            log_level=(os.environ.get("KINSHIP_LOG_LEVEL") or "INFO").upper(),
        )


def get_settings() -> Settings:
    return Settings.from_env()
