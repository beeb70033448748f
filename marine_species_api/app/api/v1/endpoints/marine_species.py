"""
Marine species endpoints for API v1.

CRUD routes over marine species records.  Creating or updating a
species requires ``taxonomy_id`` to name an existing taxonomy; an
unknown reference is answered with 400.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from marine_species_api.app.api.deps import get_dispatcher, unwrap
from marine_species_api.app.schemas.marine_specie import MarineSpecie, MarineSpeciePayload
from marine_species_api.app.services.dispatcher import Dispatcher

router = APIRouter()


@router.post("/", response_model=MarineSpecie, status_code=status.HTTP_201_CREATED)
async def add_marinespecie(
    payload: MarineSpeciePayload,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> MarineSpecie:
    """Create a marine species.

    Returns 422 for an empty field and 400 if ``taxonomy_id`` does not
    name an existing taxonomy.
    """
    return unwrap(dispatcher.add_marinespecie(payload))


@router.get("/", response_model=List[MarineSpecie])
async def list_marinespecies(
    conservation_status: Optional[str] = Query(None),
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> List[MarineSpecie]:
    """Return all species, or only those with the given conservation status.

    The status filter is an exact match; no match yields an empty list.
    """
    if conservation_status is None:
        return unwrap(dispatcher.get_all_marinespecie())
    return unwrap(dispatcher.get_marinespecie_by_conservation_status(conservation_status))


@router.get("/{specie_id}", response_model=MarineSpecie)
async def get_marinespecie(specie_id: int, dispatcher: Dispatcher = Depends(get_dispatcher)) -> MarineSpecie:
    """Retrieve a marine species by ID.  Returns 404 if it does not exist."""
    return unwrap(dispatcher.get_marinespecie(specie_id))


@router.put("/{specie_id}", response_model=MarineSpecie)
async def update_marinespecie(
    specie_id: int,
    payload: MarineSpeciePayload,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> MarineSpecie:
    """Replace every field of an existing marine species.

    The taxonomy reference is checked again; 404 if the species is missing.
    """
    return unwrap(dispatcher.update_marinespecie(specie_id, payload))


@router.delete("/{specie_id}", response_model=MarineSpecie)
async def delete_marinespecie(specie_id: int, dispatcher: Dispatcher = Depends(get_dispatcher)) -> MarineSpecie:
    """Delete a marine species and return it.  Returns 404 if it does not exist."""
    return unwrap(dispatcher.delete_marinespecie(specie_id))
