"""Relationship resolution between two named people.

Pipeline per query: look both names up, swap any non-royal person for their
royal spouse, trace both royal ancestries, cut them at the nearest common
ancestor, classify the shape and render it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .ancestry import remove_common_ancestry, trace_royal_ancestry
from .classify import classify_relationship
from .errors import InconsistentDataError, PersonNotFoundError
from .models import Person, Relationship
from .names import relationship_name
from .store import PersonStore

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelationshipResult:
    from_person: Person
    to_person: Person
    relationship: Relationship
    label: str

    def to_public(self) -> dict[str, Any]:
        return {
            "from": self.from_person.name,
            "to": self.to_person.name,
            "relationship": self.label,
            "descriptor": self.relationship.to_public(),
        }


def _require_name(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{field} is required")
    return value.strip()


def _find_person(store: PersonStore, name: str) -> Person:
    person = store.find_by_name(name)
    if person is None:
        raise PersonNotFoundError(name)
    return person


def _royal_anchor(store: PersonStore, person: Person) -> Person:
    """The person, or their spouse when the person married into the royal line."""

    if person.is_royal:
        return person
    spouse = store.find_spouse(person)
    if spouse is None:
        log.error("non-royal person %s (%s) has no spouse on record", person.id, person.name)
        raise InconsistentDataError(f"{person.name} is not royal and has no spouse on record")
    return spouse


def describe_relationship(store: PersonStore, from_name: str, to_name: str) -> RelationshipResult:
    from_name = _require_name(from_name, "from_name")
    to_name = _require_name(to_name, "to_name")
    if store is None:
        raise ValueError("store is required")

    from_person = _find_person(store, from_name)
    to_person = _find_person(store, to_name)

    anchor_a = _royal_anchor(store, from_person)
    anchor_b = _royal_anchor(store, to_person)

    chain_a, chain_b = remove_common_ancestry(
        trace_royal_ancestry(store, anchor_a),
        trace_royal_ancestry(store, anchor_b),
    )

    relationship = classify_relationship(from_person, to_person, chain_a, chain_b)
    return RelationshipResult(
        from_person=from_person,
        to_person=to_person,
        relationship=relationship,
        label=relationship_name(relationship),
    )


def resolve_relationship(store: PersonStore, from_name: str, to_name: str) -> str:
    """Return how *to_name* relates to *from_name*, e.g. "Maternal grandfather"."""

    return describe_relationship(store, from_name, to_name).label
