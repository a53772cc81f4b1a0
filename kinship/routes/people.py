from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_person_store
from ..store import PersonStore

router = APIRouter(tags=["people"])


@router.get("/people")
def list_people(store: PersonStore = Depends(get_person_store)) -> dict[str, Any]:
    """List everyone in the store, ordered by name.

    Intended for populating the name pickers of the relationship form.
    """

    people = store.list_people()
    return {
        "results": [p.to_public() for p in people],
        "total": len(people),
    }


@router.get("/people/{name}")
def get_person(name: str, store: PersonStore = Depends(get_person_store)) -> dict[str, Any]:
    person = store.find_by_name(name)
    if person is None:
        raise HTTPException(status_code=404, detail=f'Unknown person "{name}"')

    out = person.to_public()
    spouse = store.find_spouse(person)
    out["spouse"] = spouse.name if spouse else None
    out["parents"] = [p.name for p in (store.find_by_id(pid) for pid in person.parent_ids) if p]
    return out
