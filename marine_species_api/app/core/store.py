"""
In-memory keyed storage for one record type.

A ``RecordStore`` owns the records of a single model class together
with the identifier counter used to key them.  Identifiers start at 1
and are never reused, even after a record is deleted.  Each record
carries ``created_at`` (set on insertion) and ``updated_at`` (``None``
until the first update), both in integer nanoseconds taken from the
store's clock.

Stores are plain objects owned by the application state; nothing in
this module is global.
"""

import logging
import time
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic_core import PydanticSerializationError

from ..schemas.record import RecordBase
from .errors import InvalidInput, NotFound, ValidationFailed

R = TypeVar("R", bound=RecordBase)

logger = logging.getLogger(__name__)

# Fields managed by the store itself; callers cannot overwrite them.
_PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class RecordStore(Generic[R]):
    """Keyed storage with identifier assignment and timestamping."""

    def __init__(
        self,
        model: Type[R],
        name: Optional[str] = None,
        clock: Callable[[], int] = time.time_ns,
        max_record_bytes: int = 1024,
    ) -> None:
        self._model = model
        self.name = name or model.__name__.lower()
        self._clock = clock
        self._max_record_bytes = max_record_bytes
        self._records: Dict[int, R] = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def next_id(self) -> int:
        """Issue an identifier greater than every one issued before."""
        self._counter += 1
        return self._counter

    def insert(self, fields: Mapping[str, Any]) -> R:
        """Create a record from ``fields`` and store it under a fresh id."""
        values = {k: v for k, v in fields.items() if k not in _PROTECTED_FIELDS}
        record = self._model(id=self._counter + 1, created_at=self._clock(), updated_at=None, **values)
        self._check_size(record)
        self._records[self.next_id()] = record
        logger.debug("Inserted %s %s", self.name, record.id)
        return record

    def get(self, record_id: int) -> R:
        try:
            return self._records[record_id]
        except KeyError:
            raise NotFound(f"{self.name} with id={record_id} not found") from None

    def update(self, record_id: int, changes: Mapping[str, Any]) -> R:
        """Apply ``changes`` to an existing record and stamp ``updated_at``.

        The stored record is replaced only after the updated version has
        been built and checked, so a rejected update leaves it untouched.
        """
        current = self.get(record_id)
        data = current.model_dump()
        data.update({k: v for k, v in changes.items() if k not in _PROTECTED_FIELDS})
        # A clock that stepped backwards must not produce updated_at < created_at.
        data["updated_at"] = max(self._clock(), current.created_at)
        record = self._model.model_validate(data)
        self._check_size(record)
        self._records[record_id] = record
        logger.debug("Updated %s %s", self.name, record_id)
        return record

    def delete(self, record_id: int) -> R:
        record = self.get(record_id)
        del self._records[record_id]
        logger.debug("Deleted %s %s", self.name, record_id)
        return record

    def scan(self, predicate: Optional[Callable[[R], bool]] = None) -> List[R]:
        """Return every record for which ``predicate`` holds (all when omitted)."""
        return [r for r in self._records.values() if predicate is None or predicate(r)]

    def _check_size(self, record: R) -> None:
        if not self._max_record_bytes:
            return
        try:
            size = len(record.model_dump_json(by_alias=True).encode("utf-8"))
        except PydanticSerializationError as exc:
            # Text that is not valid Unicode (e.g. a lone surrogate).
            raise InvalidInput(f"{self.name} record cannot be encoded: {exc}") from None
        if size > self._max_record_bytes:
            raise ValidationFailed(
                f"{self.name} record is {size} bytes, larger than the {self._max_record_bytes} byte limit"
            )
