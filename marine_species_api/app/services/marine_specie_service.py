"""
Service layer for marine species records.

A species must point at an existing taxonomy when it is written.  The
reference is resolved through the ``TaxonomyService`` before any
change reaches the store; a species whose taxonomy is deleted later
stays as it is.
"""

import logging
from typing import List

from marine_species_api.app.core.errors import InvalidInput, NotFound
from marine_species_api.app.core.store import RecordStore
from marine_species_api.app.schemas.marine_specie import MarineSpecie, MarineSpeciePayload
from marine_species_api.app.services.taxonomy_service import TaxonomyService
from marine_species_api.app.services.validation import require_valid_text

logger = logging.getLogger(__name__)


class MarineSpecieService:
    """CRUD operations over a marine species ``RecordStore``."""

    def __init__(self, store: RecordStore[MarineSpecie], taxonomy_service: TaxonomyService) -> None:
        self.store = store
        self.taxonomy_service = taxonomy_service

    def add_marinespecie(self, payload: MarineSpeciePayload) -> MarineSpecie:
        """Store a new species after checking its fields and taxonomy reference.

        Raises ``ValidationFailed`` for empty text fields and
        ``InvalidInput`` when ``taxonomy_id`` does not resolve.
        """
        self._check_payload(payload)
        specie = self.store.insert(payload.model_dump())
        logger.info("Created marine specie %s (%s)", specie.id, specie.name)
        return specie

    def get_marinespecie(self, specie_id: int) -> MarineSpecie:
        return self.store.get(specie_id)

    def get_all_marinespecie(self) -> List[MarineSpecie]:
        return self.store.scan()

    def get_marinespecie_by_conservation_status(self, conservation_status: str) -> List[MarineSpecie]:
        """Return the species whose status equals ``conservation_status`` exactly.

        No match is not an error; the result is simply empty.
        """
        return self.store.scan(lambda specie: specie.conservation_status == conservation_status)

    def update_marinespecie(self, specie_id: int, payload: MarineSpeciePayload) -> MarineSpecie:
        """Replace the fields of an existing species.

        The payload is checked first, then the taxonomy reference, and
        only then is the species looked up, so ``NotFound`` is reported
        for an otherwise valid request.
        """
        self._check_payload(payload)
        specie = self.store.update(specie_id, payload.model_dump())
        logger.info("Updated marine specie %s", specie_id)
        return specie

    def delete_marinespecie(self, specie_id: int) -> MarineSpecie:
        specie = self.store.delete(specie_id)
        logger.info("Deleted marine specie %s", specie_id)
        return specie

    def _check_payload(self, payload: MarineSpeciePayload) -> None:
        require_valid_text(payload, "marine specie")
        try:
            self.taxonomy_service.get_taxonomy(payload.taxonomy_id)
        except NotFound:
            logger.warning("Rejected marine specie payload, unknown taxonomy %s", payload.taxonomy_id)
            raise InvalidInput(f"taxonomy with id={payload.taxonomy_id} does not exist") from None
