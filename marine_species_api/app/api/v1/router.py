"""
Top-level router for version 1 of the API.

Aggregates the resource routers under a unified prefix.  When a new
resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import calls, info, marine_species, taxonomy

router = APIRouter()

router.include_router(taxonomy.router, prefix="/taxonomy", tags=["taxonomy"])
router.include_router(marine_species.router, prefix="/marine-species", tags=["marine species"])
# The call router defines its own "/call" and "/operations" paths.
router.include_router(calls.router, tags=["calls"])
router.include_router(info.router, prefix="/info", tags=["info"])
