"""
Taxonomy endpoints for API v1.

CRUD routes over taxonomy records.  Request bodies use the
``TaxonomyPayload`` schema; the ``class`` rank is sent and returned
under its plain name.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from marine_species_api.app.api.deps import get_dispatcher, unwrap
from marine_species_api.app.schemas.taxonomy import Taxonomy, TaxonomyPayload
from marine_species_api.app.services.dispatcher import Dispatcher

router = APIRouter()


@router.post("/", response_model=Taxonomy, status_code=status.HTTP_201_CREATED)
async def add_taxonomy(
    payload: TaxonomyPayload,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Taxonomy:
    """Create a taxonomy.  Every rank must be non-empty (422 otherwise)."""
    return unwrap(dispatcher.add_taxonomy(payload))


@router.get("/", response_model=List[Taxonomy])
async def get_all_taxonomy(dispatcher: Dispatcher = Depends(get_dispatcher)) -> List[Taxonomy]:
    """Return every stored taxonomy; an empty store yields an empty list."""
    return unwrap(dispatcher.get_all_taxonomy())


@router.get("/{taxonomy_id}", response_model=Taxonomy)
async def get_taxonomy(taxonomy_id: int, dispatcher: Dispatcher = Depends(get_dispatcher)) -> Taxonomy:
    """Retrieve a taxonomy by ID.  Returns 404 if it does not exist."""
    return unwrap(dispatcher.get_taxonomy(taxonomy_id))


@router.put("/{taxonomy_id}", response_model=Taxonomy)
async def update_taxonomy(
    taxonomy_id: int,
    payload: TaxonomyPayload,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Taxonomy:
    """Replace every rank of an existing taxonomy.

    Returns 422 for an empty rank and 404 if the taxonomy does not exist.
    """
    return unwrap(dispatcher.update_taxonomy(taxonomy_id, payload))


@router.delete("/{taxonomy_id}", response_model=Taxonomy)
async def delete_taxonomy(taxonomy_id: int, dispatcher: Dispatcher = Depends(get_dispatcher)) -> Taxonomy:
    """Delete a taxonomy and return it.

    Species referencing the taxonomy are left in place.
    """
    return unwrap(dispatcher.delete_taxonomy(taxonomy_id))
