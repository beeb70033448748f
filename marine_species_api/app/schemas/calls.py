"""
Argument models for the generic call endpoint.

``POST /api/v1/call/{operation}`` accepts a JSON object of named
arguments.  Each operation parses that object with one of the models
below; unknown keys are rejected so that a misspelt argument is not
silently ignored, and identifiers must be real integers (``true`` or
``"1"`` is not an id).
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .marine_specie import MarineSpeciePayload
from .taxonomy import TaxonomyPayload


class CallArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")


class NoArgs(CallArgs):
    pass


class IdArgs(CallArgs):
    id: StrictInt = Field(..., ge=0)


class TaxonomyCreateArgs(CallArgs):
    payload: TaxonomyPayload


class TaxonomyUpdateArgs(CallArgs):
    id: StrictInt = Field(..., ge=0)
    payload: TaxonomyPayload


class MarineSpecieCreateArgs(CallArgs):
    payload: MarineSpeciePayload


class MarineSpecieUpdateArgs(CallArgs):
    id: StrictInt = Field(..., ge=0)
    payload: MarineSpeciePayload


class ConservationStatusArgs(CallArgs):
    conservation_status: str
