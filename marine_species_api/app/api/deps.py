"""
Dependencies shared by the API routers.

The dispatcher lives on ``app.state`` and is handed to route handlers
through ``get_dispatcher``.  ``unwrap`` converts a dispatcher result
into a response value or the matching ``HTTPException``.
"""

from typing import Any, Dict, Type

from fastapi import HTTPException, Request, status

from marine_species_api.app.core.errors import Err, InvalidInput, NotFound, Result, ServiceError, ValidationFailed
from marine_species_api.app.services.dispatcher import Dispatcher

ERROR_STATUS: Dict[Type[ServiceError], int] = {
    NotFound: status.HTTP_404_NOT_FOUND,
    ValidationFailed: 422,
    InvalidInput: status.HTTP_400_BAD_REQUEST,
}


def get_dispatcher(request: Request) -> Dispatcher:
    return request.app.state.dispatcher


def unwrap(result: Result) -> Any:
    """Return the value of an ``Ok`` or raise ``HTTPException`` for an ``Err``."""
    if isinstance(result, Err):
        raise HTTPException(
            status_code=ERROR_STATUS.get(type(result.error), status.HTTP_400_BAD_REQUEST),
            detail=result.error.to_wire(),
        )
    return result.value
