from __future__ import annotations

from .errors import InconsistentDataError
from .models import Gender, ParentalLine, Relationship, RelationshipType

# (male, female) nouns per relationship type.
_GENDERED_NOUNS: dict[RelationshipType, tuple[str, str]] = {
    RelationshipType.SPOUSE: ("husband", "wife"),
    RelationshipType.SIBLING: ("brother", "sister"),
    RelationshipType.ANCESTOR: ("father", "mother"),
    RelationshipType.DESCENDANT: ("son", "daughter"),
    RelationshipType.SIBLINGS_DESCENDANT: ("nephew", "niece"),
    RelationshipType.ANCESTORS_SIBLING: ("uncle", "aunt"),
}

_NEUTRAL_NOUNS: dict[RelationshipType, str] = {
    RelationshipType.SELF: "self",
    RelationshipType.COUSIN: "cousin",
}

# Only these lineages take "grand"/"great-grand" prefixes.
_GENERATIONAL = frozenset(
    {
        RelationshipType.ANCESTOR,
        RelationshipType.DESCENDANT,
        RelationshipType.SIBLINGS_DESCENDANT,
        RelationshipType.ANCESTORS_SIBLING,
    }
)


def related_prefix(distance_removed: int) -> str:
    """Prefix for relations more than one generation apart.

    1 -> "", 2 -> "grand", 3 -> "great-grand", 4 -> "great-great-grand".
    """

    if distance_removed <= 1:
        return ""
    return "great-" * (distance_removed - 2) + "grand"


def _capitalize_first(s: str) -> str:
    return s[:1].upper() + s[1:]


def relationship_name(relationship: Relationship) -> str:
    """Render a relationship as a label, e.g. "Maternal granduncle-in-law"."""

    if relationship is None:
        raise ValueError("relationship is required")

    rtype = relationship.type
    fragments: list[str] = []

    if relationship.parental_line != ParentalLine.NONE:
        fragments.append(f"{relationship.parental_line.value} ")

    if rtype in _NEUTRAL_NOUNS:
        fragments.append(_NEUTRAL_NOUNS[rtype])
    elif rtype in _GENDERED_NOUNS:
        if rtype in _GENERATIONAL:
            fragments.append(related_prefix(relationship.distance_removed))
        male, female = _GENDERED_NOUNS[rtype]
        fragments.append(male if relationship.gender == Gender.MALE else female)
    else:
        raise InconsistentDataError(f"Relationship type {rtype!r} is not supported")

    if relationship.in_law:
        fragments.append("-in-law")

    return _capitalize_first("".join(fragments))
