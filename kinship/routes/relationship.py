from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field, field_validator

from ..deps import get_person_store
from ..errors import PersonNotFoundError
from ..service import describe_relationship
from ..store import PersonStore

log = logging.getLogger(__name__)

router = APIRouter(tags=["relationship"])


class RelationshipQuery(BaseModel):
    name1: str = Field(min_length=1, max_length=200, description="Person's name")
    name2: str = Field(min_length=1, max_length=200, description="Other person's name")

    @field_validator("name1", "name2")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


def _relationship_payload(store: PersonStore, from_name: str, to_name: str) -> dict[str, Any]:
    try:
        result = describe_relationship(store, from_name, to_name)
    except PersonNotFoundError as exc:
        log.warning("relationship lookup failed: %s", exc)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return result.to_public()


@router.get("/relationship")
def get_relationship(
    from_name: str = Query(min_length=1, max_length=200),
    to_name: str = Query(min_length=1, max_length=200),
    store: PersonStore = Depends(get_person_store),
) -> dict[str, Any]:
    """How ``to_name`` relates to ``from_name``, e.g. "Maternal grandfather"."""

    return _relationship_payload(store, from_name, to_name)


@router.post("/relationship")
def post_relationship(
    body: RelationshipQuery,
    store: PersonStore = Depends(get_person_store),
) -> dict[str, Any]:
    return _relationship_payload(store, body.name1, body.name2)
