"""
api.entities
============

Read endpoint consumed by the listing view.

``GET /api/entities?search=&country=&status=`` returns
``{"data": [Entity, ...]}`` in registry order.  Every parameter is
optional and an empty value means *no constraint*.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from entityview.registry import EntityRegistry
from .deps import get_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/entities", tags=["entities"])


class RegistrationOut(BaseModel):
    type: str
    status: str


class EntityOut(BaseModel):
    """Wire shape of one entity (camelCase, as the view expects)."""
    id: str
    name: str
    country: str
    status: str
    legalForm: Optional[str] = None
    createdAt: str
    registrations: List[RegistrationOut] = []


class EntityListResponse(BaseModel):
    data: List[EntityOut]


@router.get("", response_model=EntityListResponse)
async def list_entities(
    search: str = Query("", description="Case-insensitive name substring"),
    country: str = Query("", description="Jurisdiction code, e.g. AE"),
    status: str = Query("", description="Life-cycle status, e.g. ACTIVE"),
    registry: EntityRegistry = Depends(get_registry),
):
    """
    List entities matching all given constraints.

    Omitted and empty parameters are ignored.
    """
    matches = registry.search(search=search, country=country, status=status)
    logger.info(f"Listing {len(matches)} entities (search={search!r}, country={country!r}, status={status!r})")
    return {"data": [e.to_json() for e in matches]}


@router.get("/{entity_id}", response_model=EntityOut)
async def get_entity(entity_id: str, registry: EntityRegistry = Depends(get_registry)):
    """Return one entity by id, 404 if unknown."""
    try:
        return registry.get(entity_id).to_json()
    except KeyError:
        raise HTTPException(status_code=404, detail="Entity not found")
