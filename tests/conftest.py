from __future__ import annotations

import pytest

from kinship.models import Gender
from kinship.store import MemoryPersonStore


@pytest.fixture()
def family() -> MemoryPersonStore:
    """A fresh three-generation family per test.

    Rick Sanchez (royal) + Mrs Sanchez
    ├── Beth Smith + Jerry Smith
    │   ├── Morty Smith
    │   │   └── Morty Jr
    │   └── Summer Smith
    └── Steve Sanchez + Tammy Sanchez
        └── Gwen Sanchez
    """

    store = MemoryPersonStore()
    mrs = store.add_person("Mrs Sanchez", Gender.FEMALE, False)
    rick = store.add_person("Rick Sanchez", Gender.MALE, True, spouse_id=mrs.id)
    jerry = store.add_person("Jerry Smith", Gender.MALE, False)
    beth = store.add_person(
        "Beth Smith", Gender.FEMALE, True, spouse_id=jerry.id, parent_ids=[rick.id, mrs.id]
    )
    morty = store.add_person("Morty Smith", Gender.MALE, True, parent_ids=[beth.id, jerry.id])
    store.add_person("Summer Smith", Gender.FEMALE, True, parent_ids=[beth.id, jerry.id])
    store.add_person("Morty Jr", Gender.MALE, True, parent_ids=[morty.id])
    tammy = store.add_person("Tammy Sanchez", Gender.FEMALE, False)
    steve = store.add_person(
        "Steve Sanchez", Gender.MALE, True, spouse_id=tammy.id, parent_ids=[rick.id, mrs.id]
    )
    store.add_person("Gwen Sanchez", Gender.FEMALE, True, parent_ids=[tammy.id, steve.id])
    return store
