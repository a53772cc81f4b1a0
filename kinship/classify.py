from __future__ import annotations

import logging
from typing import Sequence

from .models import Gender, ParentalLine, Person, Relationship, RelationshipType

log = logging.getLogger(__name__)


def parental_line(chain: Sequence[Person]) -> ParentalLine:
    """Whether *chain* climbs through the subject's mother or father."""

    if chain is None:
        raise ValueError("ancestry chain is required")
    if len(chain) <= 1:
        return ParentalLine.NONE
    return ParentalLine.MATERNAL if chain[1].gender == Gender.FEMALE else ParentalLine.PATERNAL


def classify_relationship(
    person_a: Person,
    person_b: Person,
    chain_a: Sequence[Person],
    chain_b: Sequence[Person],
) -> Relationship:
    """Describe how *person_b* relates to *person_a*.

    *chain_a* and *chain_b* are the reduced royal ancestries of the two anchor
    persons (the people themselves, or their royal spouses), leaf first and
    ending at the common ancestor when there is one.
    """

    if person_a is None or person_b is None:
        raise ValueError("both persons are required")
    if not chain_a or not chain_b:
        raise ValueError("ancestry chains must not be empty")

    # 0 is the person themself, 1 a parent, and so on.
    level_a = len(chain_a) - 1
    level_b = len(chain_b) - 1

    # Anyone outside the royal line is related by marriage.
    in_law = not (person_a.is_royal and person_b.is_royal)

    if level_a == 0 and level_b == 0:
        if person_a.id == person_b.id:
            rel = Relationship(type=RelationshipType.SELF)
        else:
            rel = Relationship(type=RelationshipType.SPOUSE, gender=person_b.gender)
    elif level_a == 0:
        rel = Relationship(
            type=RelationshipType.DESCENDANT,
            distance_removed=level_b,
            in_law=in_law,
            gender=person_b.gender,
        )
    elif level_b == 0:
        rel = Relationship(
            type=RelationshipType.ANCESTOR,
            distance_removed=level_a,
            parental_line=parental_line(chain_a),
            in_law=in_law,
            gender=person_b.gender,
        )
    elif level_a == level_b:
        if level_a == 1:
            rel = Relationship(type=RelationshipType.SIBLING, in_law=in_law, gender=person_b.gender)
        else:
            # 2:2 first cousins, 3:3 once removed, 4:4 second cousins ...
            rel = Relationship(type=RelationshipType.COUSIN, distance_removed=level_a - 2, in_law=in_law)
    elif level_a < level_b:
        rel = Relationship(
            type=RelationshipType.SIBLINGS_DESCENDANT,
            distance_removed=abs(level_a - level_b),
            in_law=in_law,
            gender=person_b.gender,
        )
    else:
        rel = Relationship(
            type=RelationshipType.ANCESTORS_SIBLING,
            distance_removed=abs(level_a - level_b),
            parental_line=parental_line(chain_a),
            in_law=in_law,
            gender=person_b.gender,
        )

    log.debug("%s -> %s classified as %s", person_a.name, person_b.name, rel)
    return rel
