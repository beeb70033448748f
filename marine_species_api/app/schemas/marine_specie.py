"""
Pydantic models for marine species records.

Each species points at the taxonomy record describing its
classification through ``taxonomy_id``.  The reference is checked when
the species is written, not afterwards.
"""

from pydantic import BaseModel, Field, StrictInt

from .record import RecordBase


class MarineSpeciePayload(BaseModel):
    """Species fields supplied by the client."""

    name: str = Field(..., examples=["Clownfish"])
    habitat: str = Field(..., examples=["Reef"])
    taxonomy_id: StrictInt = Field(..., ge=0, examples=[1])
    conservation_status: str = Field(
        ...,
        examples=["Least Concern"],
        description="e.g. Extinct, Critically Endangered, Endangered, Vulnerable, Least Concern",
    )


class MarineSpecie(RecordBase, MarineSpeciePayload):
    """A stored marine species record."""
