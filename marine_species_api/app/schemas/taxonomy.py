"""
Pydantic models for taxonomy records.

``TaxonomyPayload`` is what clients send on create and update; the
store adds ``id`` and the timestamps to form a ``Taxonomy``.  The
``class`` rank is a Python keyword, so it lives in the ``class_``
attribute and is exposed under its alias everywhere on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field

from .record import RecordBase


class TaxonomyPayload(BaseModel):
    """Classification ranks supplied by the client."""

    kingdom: str = Field(..., examples=["Animalia"])
    phylum: str = Field(..., examples=["Chordata"])
    class_: str = Field(..., alias="class", examples=["Actinopterygii"])
    order: str = Field(..., examples=["Perciformes"])
    family: str = Field(..., examples=["Pomacentridae"])
    genus: str = Field(..., examples=["Amphiprion"])
    species: str = Field(..., examples=["ocellaris"])

    model_config = ConfigDict(populate_by_name=True)


class Taxonomy(RecordBase, TaxonomyPayload):
    """A stored taxonomy record."""
