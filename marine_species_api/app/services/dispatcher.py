"""
Call dispatcher: the external contract of the service.

Every public operation maps onto exactly one service call.  Service
errors are caught here and returned as ``Err`` values; anything else
is a bug and propagates.  ``call`` offers the same operations by name
with loosely typed arguments, which is what the generic HTTP call
endpoint uses.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import ValidationError

from marine_species_api.app.core.config import Settings
from marine_species_api.app.core.errors import Err, InvalidInput, Ok, Result, ServiceError
from marine_species_api.app.core.store import RecordStore
from marine_species_api.app.schemas.calls import (
    CallArgs,
    ConservationStatusArgs,
    IdArgs,
    MarineSpecieCreateArgs,
    MarineSpecieUpdateArgs,
    NoArgs,
    TaxonomyCreateArgs,
    TaxonomyUpdateArgs,
)
from marine_species_api.app.schemas.marine_specie import MarineSpecie, MarineSpeciePayload
from marine_species_api.app.schemas.taxonomy import Taxonomy, TaxonomyPayload
from marine_species_api.app.services.marine_specie_service import MarineSpecieService
from marine_species_api.app.services.taxonomy_service import TaxonomyService

logger = logging.getLogger(__name__)


class UnknownOperation(LookupError):
    """Raised by ``Dispatcher.call`` for a name that is not an operation."""


@dataclass(frozen=True)
class Operation:
    name: str
    kind: str  # "query" or "update"
    args: Type[CallArgs]
    # Turns parsed arguments into the positional arguments of the method.
    unpack: Callable[[Any], Tuple[Any, ...]]


def _none(_: Any) -> Tuple[Any, ...]:
    return ()


OPERATIONS: Dict[str, Operation] = {
    op.name: op
    for op in (
        Operation("add_taxonomy", "update", TaxonomyCreateArgs, lambda a: (a.payload,)),
        Operation("get_taxonomy", "query", IdArgs, lambda a: (a.id,)),
        Operation("get_all_taxonomy", "query", NoArgs, _none),
        Operation("update_taxonomy", "update", TaxonomyUpdateArgs, lambda a: (a.id, a.payload)),
        Operation("delete_taxonomy", "update", IdArgs, lambda a: (a.id,)),
        Operation("add_marinespecie", "update", MarineSpecieCreateArgs, lambda a: (a.payload,)),
        Operation("get_marinespecie", "query", IdArgs, lambda a: (a.id,)),
        Operation("get_all_marinespecie", "query", NoArgs, _none),
        Operation(
            "get_marinespecie_by_conservation_status",
            "query",
            ConservationStatusArgs,
            lambda a: (a.conservation_status,),
        ),
        Operation("update_marinespecie", "update", MarineSpecieUpdateArgs, lambda a: (a.id, a.payload)),
        Operation("delete_marinespecie", "update", IdArgs, lambda a: (a.id,)),
    )
}


class Dispatcher:
    """Expose the taxonomy and species services as ``Ok``/``Err`` operations."""

    def __init__(self, taxonomy_service: TaxonomyService, marinespecie_service: MarineSpecieService) -> None:
        self.taxonomy_service = taxonomy_service
        self.marinespecie_service = marinespecie_service

    @staticmethod
    def _run(func: Callable[..., Any], *args: Any) -> Result:
        try:
            return Ok(func(*args))
        except ServiceError as exc:
            logger.debug("%s failed: %s", func.__name__, exc.kind)
            return Err(exc)

    # Taxonomy

    def add_taxonomy(self, payload: TaxonomyPayload) -> Result[Taxonomy]:
        return self._run(self.taxonomy_service.add_taxonomy, payload)

    def get_taxonomy(self, taxonomy_id: int) -> Result[Taxonomy]:
        return self._run(self.taxonomy_service.get_taxonomy, taxonomy_id)

    def get_all_taxonomy(self) -> Result[List[Taxonomy]]:
        return self._run(self.taxonomy_service.get_all_taxonomy)

    def update_taxonomy(self, taxonomy_id: int, payload: TaxonomyPayload) -> Result[Taxonomy]:
        return self._run(self.taxonomy_service.update_taxonomy, taxonomy_id, payload)

    def delete_taxonomy(self, taxonomy_id: int) -> Result[Taxonomy]:
        return self._run(self.taxonomy_service.delete_taxonomy, taxonomy_id)

    # Marine species

    def add_marinespecie(self, payload: MarineSpeciePayload) -> Result[MarineSpecie]:
        return self._run(self.marinespecie_service.add_marinespecie, payload)

    def get_marinespecie(self, specie_id: int) -> Result[MarineSpecie]:
        return self._run(self.marinespecie_service.get_marinespecie, specie_id)

    def get_all_marinespecie(self) -> Result[List[MarineSpecie]]:
        return self._run(self.marinespecie_service.get_all_marinespecie)

    def get_marinespecie_by_conservation_status(self, conservation_status: str) -> Result[List[MarineSpecie]]:
        return self._run(
            self.marinespecie_service.get_marinespecie_by_conservation_status,
            conservation_status,
        )

    def update_marinespecie(self, specie_id: int, payload: MarineSpeciePayload) -> Result[MarineSpecie]:
        return self._run(self.marinespecie_service.update_marinespecie, specie_id, payload)

    def delete_marinespecie(self, specie_id: int) -> Result[MarineSpecie]:
        return self._run(self.marinespecie_service.delete_marinespecie, specie_id)

    # Generic entry point

    def call(self, operation: str, arguments: Optional[Mapping[str, Any]] = None) -> Result:
        """Run ``operation`` with raw, JSON-style ``arguments``.

        Arguments that do not fit the operation's shape produce
        ``Err(InvalidInput)``.  An unknown operation name raises
        ``UnknownOperation``.
        """
        op = OPERATIONS.get(operation)
        if op is None:
            raise UnknownOperation(operation)
        try:
            parsed = op.args.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            logger.warning("Malformed arguments for %s: %s", operation, exc.error_count())
            return Err(InvalidInput(f"malformed arguments for {operation}"))
        return getattr(self, operation)(*op.unpack(parsed))


def build_dispatcher(settings: Settings, clock: Callable[[], int] = time.time_ns) -> Dispatcher:
    """Create fresh stores and services and wire them into a ``Dispatcher``."""
    taxonomy_store: RecordStore[Taxonomy] = RecordStore(
        Taxonomy, name="taxonomy", clock=clock, max_record_bytes=settings.max_record_bytes
    )
    marinespecie_store: RecordStore[MarineSpecie] = RecordStore(
        MarineSpecie, name="marine specie", clock=clock, max_record_bytes=settings.max_record_bytes
    )
    taxonomy_service = TaxonomyService(taxonomy_store)
    return Dispatcher(taxonomy_service, MarineSpecieService(marinespecie_store, taxonomy_service))
