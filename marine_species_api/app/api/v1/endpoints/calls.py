"""
Generic call endpoint for API v1.

Clients that prefer a remote-call style over REST resources post the
arguments of an operation to ``/call/{operation}``.  The response is
always 200 with ``{"Ok": ...}`` or ``{"Err": ...}`` in the body, so
the client decides how to present failures.  ``/operations`` lists
what can be called.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from marine_species_api.app.api.deps import get_dispatcher
from marine_species_api.app.services.dispatcher import OPERATIONS, Dispatcher, UnknownOperation

router = APIRouter()


@router.get("/operations", response_model=List[Dict[str, str]])
async def list_operations() -> List[Dict[str, str]]:
    """Return every callable operation with its kind (``query`` or ``update``)."""
    return [{"name": op.name, "kind": op.kind} for op in OPERATIONS.values()]


@router.post("/call/{operation}", response_model=Dict[str, Any])
async def call_operation(
    operation: str,
    arguments: Optional[Dict[str, Any]] = Body(None),
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Dict[str, Any]:
    """Run ``operation`` with the posted arguments and return its result.

    Failures come back as ``{"Err": ...}`` with status 200; only an
    unknown operation name is answered with 404.
    """
    try:
        result = dispatcher.call(operation, arguments)
    except UnknownOperation as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown operation '{e.args[0]}'"
        ) from e
    return result.to_wire()
