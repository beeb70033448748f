"""
Information endpoint for API v1.

Reports the service name and version together with the number of
records currently held in each store.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from marine_species_api.app.api.deps import get_dispatcher
from marine_species_api.app.services.dispatcher import Dispatcher

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(request: Request, dispatcher: Dispatcher = Depends(get_dispatcher)) -> Dict[str, Any]:
    """Return the project name, version and record count of each store."""
    settings = request.app.state.settings
    return {
        "project": settings.project_name,
        "version": settings.api_version,
        "records": {
            "taxonomy": len(dispatcher.taxonomy_service.store),
            "marinespecie": len(dispatcher.marinespecie_service.store),
        },
    }
