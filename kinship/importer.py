"""Seed importer: loads a JSON family file into a person store.

File format (a JSON array, one object per person)::

    {"name": "Beth Smith", "parents": ["Rick Sanchez"], "male": false,
     "royal": true, "spouse": "Jerry Smith"}

Records are imported in order. Anyone referenced as a spouse or parent must
appear earlier in the file, so spouses come first.

Usage:
    python -m kinship.importer --file data/royal_family.json --database-url=postgresql://...
"""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable

import psycopg

from .config import DEFAULT_SCHEMA_SQL
from .errors import InconsistentDataError
from .logging_config import configure_logging
from .models import Gender, Person
from .store import PersonStore, PostgresPersonStore

log = logging.getLogger(__name__)


def read_seed_file(path: Path) -> list[dict[str, Any]]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Could not find data file: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Data file {path} must contain a JSON array of people")
    return data


def _find_by_name_or_raise(store: PersonStore, name: str) -> Person:
    person = store.find_by_name(name)
    if person is None:
        raise InconsistentDataError(f'Could not find person named "{name}"')
    return person


def load_people(store: PersonStore, records: Iterable[dict[str, Any]]) -> list[Person]:
    """Add every record to *store* and return the created people in file order."""

    people: list[Person] = []
    for r in records:
        name = (r.get("name") or "").strip()
        if not name:
            raise ValueError(f"Record without a name: {r!r}")

        spouse_id = None
        spouse_name = (r.get("spouse") or "").strip()
        if spouse_name:
            spouse_id = _find_by_name_or_raise(store, spouse_name).id

        parent_ids = [_find_by_name_or_raise(store, p).id for p in (r.get("parents") or []) if p]

        people.append(
            store.add_person(
                name,
                Gender.MALE if r.get("male") else Gender.FEMALE,
                bool(r.get("royal", False)),
                spouse_id=spouse_id,
                parent_ids=parent_ids,
            )
        )

    log.info("imported %d people", len(people))
    return people


def _apply_schema(conn: psycopg.Connection, schema_sql_path: Path) -> None:
    sql = schema_sql_path.read_text(encoding="utf-8")
    with conn.cursor() as cur:
        cur.execute(sql)


def _truncate_all(conn: psycopg.Connection) -> None:
    # person_parent first due to FKs.
    with conn.cursor() as cur:
        for t in ("person_parent", "person"):
            cur.execute(f"TRUNCATE TABLE {t} RESTART IDENTITY CASCADE;")


def load_file(data_file: Path, schema_sql_path: Path, database_url: str, truncate: bool) -> dict[str, int]:
    records = read_seed_file(data_file)

    with psycopg.connect(database_url) as conn:
        _apply_schema(conn, schema_sql_path)
        if truncate:
            _truncate_all(conn)

        people = load_people(PostgresPersonStore(conn), records)
        conn.commit()

    return {
        "person": len(people),
        "person_parent": sum(len(p.parents) for p in people),
    }


def main() -> int:
    parser = argparse.ArgumentParser(description="Load a JSON family file into Postgres")
    parser.add_argument("--file", required=True, help="JSON array of people (spouses first)")
    parser.add_argument(
        "--database-url",
        default=os.environ.get("DATABASE_URL") or "",
        help="Postgres URL (or set DATABASE_URL env var)",
    )
    parser.add_argument(
        "--schema-sql",
        default=str(DEFAULT_SCHEMA_SQL),
        help="Path to schema.sql",
    )
    parser.add_argument("--truncate", action="store_true", help="Truncate existing tables before load")
    parser.add_argument("--log-level", default=os.environ.get("KINSHIP_LOG_LEVEL") or "INFO")

    args = parser.parse_args()
    configure_logging(args.log_level)
    if not args.database_url:
        raise SystemExit("Missing --database-url (or set DATABASE_URL)")

    counts = load_file(
        data_file=Path(args.file),
        schema_sql_path=Path(args.schema_sql),
        database_url=args.database_url,
        truncate=args.truncate,
    )

    print(json.dumps({"loaded": counts}, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
