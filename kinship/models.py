from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional


class Gender(IntEnum):
    MALE = 1
    FEMALE = 2


class RelationshipType(str, Enum):
    SELF = "self"
    SPOUSE = "spouse"
    ANCESTOR = "ancestor"
    DESCENDANT = "descendant"
    SIBLING = "sibling"
    SIBLINGS_DESCENDANT = "siblings_descendant"
    ANCESTORS_SIBLING = "ancestors_sibling"
    COUSIN = "cousin"


class ParentalLine(str, Enum):
    NONE = "none"
    PATERNAL = "paternal"
    MATERNAL = "maternal"


@dataclass(frozen=True)
class ParentLink:
    """One parent -> child edge. Only ids are kept; walks re-fetch through the store."""

    parent_id: int
    child_id: int


@dataclass(frozen=True)
class Person:
    id: int
    name: str
    gender: Gender
    is_royal: bool = True
    spouse_id: Optional[int] = None
    parents: tuple[ParentLink, ...] = ()

    @property
    def parent_ids(self) -> list[int]:
        return [link.parent_id for link in self.parents]

    def to_public(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "gender": "male" if self.gender == Gender.MALE else "female",
            "is_royal": self.is_royal,
            "spouse_id": self.spouse_id,
            "parent_ids": self.parent_ids,
        }


@dataclass(frozen=True)
class Relationship:
    """Structured description of how the target person relates to the subject.

    ``distance_removed`` is generations for ancestors/descendants, the generation
    gap for nephew/niece and uncle/aunt lines, and the cousin degree offset
    (0 = first cousin) for cousins. ``gender`` is the target's gender and is
    ``None`` for SELF and COUSIN.
    """

    type: RelationshipType
    distance_removed: int = 0
    parental_line: ParentalLine = ParentalLine.NONE
    in_law: bool = False
    gender: Optional[Gender] = None

    def to_public(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "distance_removed": self.distance_removed,
            "parental_line": None if self.parental_line == ParentalLine.NONE else self.parental_line.value,
            "in_law": self.in_law,
            "gender": None if self.gender is None else self.gender.name.lower(),
        }

