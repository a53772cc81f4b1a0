"""Person lookup capability used by the relationship core.

Two implementations share one interface:

- ``MemoryPersonStore`` keeps people in an arena keyed by integer id. Parent
  links and spouses are stored as ids only, so no object graph (and no cycle)
  is ever held in memory.
- ``PostgresPersonStore`` runs raw SQL against the ``person`` and
  ``person_parent`` tables (see ``sql/schema.sql``).
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol

import psycopg

from .errors import DuplicatePersonError, InconsistentDataError
from .models import Gender, ParentLink, Person


class PersonStore(Protocol):
    def find_by_name(self, name: str) -> Person | None: ...

    def find_by_id(self, person_id: int) -> Person | None: ...

    def find_spouse(self, person: Person) -> Person | None: ...

    def list_people(self) -> list[Person]: ...

    def add_person(
        self,
        name: str,
        gender: Gender,
        is_royal: bool,
        *,
        spouse_id: int | None = None,
        parent_ids: Iterable[int] = (),
    ) -> Person: ...


def _name_key(name: str) -> str:
    # Same folding as Postgres lower(name) in PostgresPersonStore.
    return name.strip().lower()


class MemoryPersonStore:
    def __init__(self) -> None:
        self._people: dict[int, Person] = {}
        self._ids_by_name: dict[str, int] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._people)

    def find_by_name(self, name: str) -> Person | None:
        if name is None:
            raise ValueError("name is required")
        pid = self._ids_by_name.get(_name_key(name))
        return self._people.get(pid) if pid is not None else None

    def find_by_id(self, person_id: int) -> Person | None:
        return self._people.get(person_id)

    def find_spouse(self, person: Person) -> Person | None:
        if person is None:
            raise ValueError("person is required")
        if person.spouse_id is not None:
            return self._people.get(person.spouse_id)
        # Only one side of a marriage owns the spouse_id.
        for other in self._people.values():
            if other.spouse_id == person.id:
                return other
        return None

    def list_people(self) -> list[Person]:
        return sorted(self._people.values(), key=lambda p: (_name_key(p.name), p.id))

    def add_person(
        self,
        name: str,
        gender: Gender,
        is_royal: bool,
        *,
        spouse_id: int | None = None,
        parent_ids: Iterable[int] = (),
    ) -> Person:
        if not (name or "").strip():
            raise ValueError("name is required")
        key = _name_key(name)
        if key in self._ids_by_name:
            raise DuplicatePersonError(name)

        pid = self._next_id
        links: list[ParentLink] = []
        for parent_id in parent_ids:
            if parent_id not in self._people:
                raise InconsistentDataError(f"parent id {parent_id} does not exist")
            if any(link.parent_id == parent_id for link in links):
                continue
            links.append(ParentLink(parent_id=parent_id, child_id=pid))
        if spouse_id is not None and spouse_id not in self._people:
            raise InconsistentDataError(f"spouse id {spouse_id} does not exist")

        person = Person(
            id=pid,
            name=name.strip(),
            gender=Gender(gender),
            is_royal=bool(is_royal),
            spouse_id=spouse_id,
            parents=tuple(links),
        )
        self._people[pid] = person
        self._ids_by_name[key] = pid
        self._next_id += 1
        return person


_PERSON_COLUMNS = "id, name, gender, is_royal, spouse_id"


class PostgresPersonStore:
    """Person store backed by an open psycopg connection.

    The caller owns the connection (see ``kinship.db.db_conn``) and commits.
    """

    def __init__(self, conn: psycopg.Connection):
        self._conn = conn

    def _parent_links(self, person_ids: list[int]) -> dict[int, list[ParentLink]]:
        out: dict[int, list[ParentLink]] = {pid: [] for pid in person_ids}
        if not person_ids:
            return out
        for child_id, parent_id in self._conn.execute(
            """
            SELECT child_id, parent_id
            FROM person_parent
            WHERE child_id = ANY(%s)
            ORDER BY child_id, position, parent_id
            """.strip(),
            (person_ids,),
        ).fetchall():
            out.setdefault(child_id, []).append(ParentLink(parent_id=parent_id, child_id=child_id))
        return out

    def _rows_to_people(self, rows: list[tuple[Any, ...]]) -> list[Person]:
        links = self._parent_links([r[0] for r in rows])
        return [
            Person(
                id=r[0],
                name=r[1],
                gender=Gender(r[2]),
                is_royal=bool(r[3]),
                spouse_id=r[4],
                parents=tuple(links.get(r[0], [])),
            )
            for r in rows
        ]

    def _fetch_one(self, where: str, params: tuple[Any, ...]) -> Person | None:
        row = self._conn.execute(
            f"SELECT {_PERSON_COLUMNS} FROM person WHERE {where} LIMIT 1",
            params,
        ).fetchone()
        if not row:
            return None
        return self._rows_to_people([tuple(row)])[0]

    def find_by_name(self, name: str) -> Person | None:
        if name is None:
            raise ValueError("name is required")
        return self._fetch_one("lower(name) = lower(%s)", (name.strip(),))

    def find_by_id(self, person_id: int) -> Person | None:
        return self._fetch_one("id = %s", (person_id,))

    def find_spouse(self, person: Person) -> Person | None:
        if person is None:
            raise ValueError("person is required")
        if person.spouse_id is not None:
            return self.find_by_id(person.spouse_id)
        return self._fetch_one("spouse_id = %s", (person.id,))

    def list_people(self) -> list[Person]:
        rows = self._conn.execute(
            f"SELECT {_PERSON_COLUMNS} FROM person ORDER BY lower(name), id"
        ).fetchall()
        return self._rows_to_people([tuple(r) for r in rows])

    def add_person(
        self,
        name: str,
        gender: Gender,
        is_royal: bool,
        *,
        spouse_id: int | None = None,
        parent_ids: Iterable[int] = (),
    ) -> Person:
        if not (name or "").strip():
            raise ValueError("name is required")
        if self.find_by_name(name) is not None:
            raise DuplicatePersonError(name)

        ordered: list[int] = []
        for parent_id in parent_ids:
            if parent_id not in ordered:
                ordered.append(parent_id)
        for ref_id in ordered + ([spouse_id] if spouse_id is not None else []):
            if self.find_by_id(ref_id) is None:
                raise InconsistentDataError(f"person id {ref_id} does not exist")

        row = self._conn.execute(
            """
            INSERT INTO person (name, gender, is_royal, spouse_id)
            VALUES (%s, %s, %s, %s)
            RETURNING id
            """.strip(),
            (name.strip(), int(gender), bool(is_royal), spouse_id),
        ).fetchone()
        pid = row[0]

        if ordered:
            with self._conn.cursor() as cur:
                cur.executemany(
                    """
                    INSERT INTO person_parent (child_id, parent_id, position)
                    VALUES (%s, %s, %s)
                    ON CONFLICT (child_id, parent_id) DO NOTHING
                    """.strip(),
                    [(pid, parent_id, pos) for pos, parent_id in enumerate(ordered)],
                )

        return Person(
            id=pid,
            name=name.strip(),
            gender=Gender(gender),
            is_royal=bool(is_royal),
            spouse_id=spouse_id,
            parents=tuple(ParentLink(parent_id=p, child_id=pid) for p in ordered),
        )
