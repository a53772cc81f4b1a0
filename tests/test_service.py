from __future__ import annotations

import pytest

from kinship.errors import InconsistentDataError, PersonNotFoundError
from kinship.models import Gender, ParentalLine, RelationshipType
from kinship.service import describe_relationship, resolve_relationship
from kinship.store import MemoryPersonStore


@pytest.mark.parametrize(
    ("from_name", "to_name", "expected"),
    [
        ("Summer Smith", "Morty Smith", "Brother"),
        ("Morty Smith", "Summer Smith", "Sister"),
        ("Beth Smith", "Jerry Smith", "Husband"),
        ("Jerry Smith", "Beth Smith", "Wife"),
        ("Jerry Smith", "Jerry Smith", "Self"),
        ("Morty Smith", "Rick Sanchez", "Maternal grandfather"),
        ("Rick Sanchez", "Morty Smith", "Grandson"),
        ("Morty Jr", "Rick Sanchez", "Paternal great-grandfather"),
        ("Morty Smith", "Gwen Sanchez", "Cousin"),
        ("Beth Smith", "Gwen Sanchez", "Niece"),
        ("Summer Smith", "Morty Jr", "Nephew"),
        ("Steve Sanchez", "Morty Jr", "Grandnephew"),
        ("Morty Smith", "Steve Sanchez", "Maternal uncle"),
        ("Morty Smith", "Tammy Sanchez", "Maternal aunt-in-law"),
        ("Morty Jr", "Steve Sanchez", "Paternal granduncle"),
        ("Jerry Smith", "Steve Sanchez", "Brother-in-law"),
        ("Morty Smith", "Mrs Sanchez", "Maternal grandmother-in-law"),
        ("Beth Smith", "Rick Sanchez", "Paternal father"),
    ],
)
def test_resolve_relationship(family: MemoryPersonStore, from_name: str, to_name: str, expected: str) -> None:
    assert resolve_relationship(family, from_name, to_name) == expected


def test_names_are_case_insensitive(family: MemoryPersonStore) -> None:
    assert resolve_relationship(family, "morty smith", "RICK SANCHEZ") == "Maternal grandfather"


def test_everyone_is_their_own_self(family: MemoryPersonStore) -> None:
    for person in family.list_people():
        assert resolve_relationship(family, person.name, person.name) == "Self"


def test_ancestor_and_descendant_are_symmetric(family: MemoryPersonStore) -> None:
    up = describe_relationship(family, "Morty Jr", "Rick Sanchez").relationship
    down = describe_relationship(family, "Rick Sanchez", "Morty Jr").relationship
    assert up.type == RelationshipType.ANCESTOR
    assert down.type == RelationshipType.DESCENDANT
    assert up.distance_removed == down.distance_removed == 3


def test_royal_spouses_are_not_in_law() -> None:
    store = MemoryPersonStore()
    queen = store.add_person("Queen", Gender.FEMALE, True)
    store.add_person("King", Gender.MALE, True, spouse_id=queen.id)

    rel = describe_relationship(store, "Queen", "King").relationship
    assert rel.type == RelationshipType.SPOUSE
    assert rel.gender == Gender.MALE
    assert rel.in_law is False


def test_describe_exposes_descriptor(family: MemoryPersonStore) -> None:
    result = describe_relationship(family, "Morty Smith", "Tammy Sanchez")
    assert result.label == "Maternal aunt-in-law"
    assert result.relationship.parental_line == ParentalLine.MATERNAL
    assert result.to_public() == {
        "from": "Morty Smith",
        "to": "Tammy Sanchez",
        "relationship": "Maternal aunt-in-law",
        "descriptor": {
            "type": "ancestors_sibling",
            "distance_removed": 1,
            "parental_line": "maternal",
            "in_law": True,
            "gender": "female",
        },
    }


def test_unknown_person(family: MemoryPersonStore) -> None:
    with pytest.raises(PersonNotFoundError) as exc_info:
        resolve_relationship(family, "Morty Smith", "Birdperson")
    assert exc_info.value.name == "Birdperson"
    assert str(exc_info.value) == 'Unknown person "Birdperson"'


@pytest.mark.parametrize(("from_name", "to_name"), [(None, "Morty Smith"), ("Morty Smith", "   "), ("", "")])
def test_blank_names_rejected(family: MemoryPersonStore, from_name, to_name) -> None:
    with pytest.raises(ValueError):
        resolve_relationship(family, from_name, to_name)


def test_non_royal_without_spouse_is_inconsistent() -> None:
    store = MemoryPersonStore()
    store.add_person("King", Gender.MALE, True)
    store.add_person("Stranger", Gender.FEMALE, False)
    with pytest.raises(InconsistentDataError):
        resolve_relationship(store, "King", "Stranger")
