"""
Fields shared by every stored record.

``id``, ``created_at`` and ``updated_at`` are assigned by the record
store and never accepted from clients.  Timestamps are nanoseconds
since the Unix epoch.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecordBase(BaseModel):
    id: int = Field(..., ge=1, examples=[1])
    created_at: int = Field(..., description="Insertion time, nanoseconds since the epoch")
    updated_at: Optional[int] = Field(None, description="Time of the last update, absent until the first one")

    model_config = ConfigDict(populate_by_name=True)
