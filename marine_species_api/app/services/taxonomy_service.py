"""
Service layer for taxonomy records.

Taxonomy records hold the seven classification ranks from kingdom down
to species.  Every rank is required; empty values are rejected before
anything is written.  Deleting a taxonomy does not touch the species
that reference it.
"""

import logging
from typing import List

from marine_species_api.app.core.store import RecordStore
from marine_species_api.app.schemas.taxonomy import Taxonomy, TaxonomyPayload
from marine_species_api.app.services.validation import require_valid_text

logger = logging.getLogger(__name__)


class TaxonomyService:
    """CRUD operations over a taxonomy ``RecordStore``."""

    def __init__(self, store: RecordStore[Taxonomy]) -> None:
        self.store = store

    def add_taxonomy(self, payload: TaxonomyPayload) -> Taxonomy:
        """Validate ``payload`` and store it as a new taxonomy."""
        require_valid_text(payload, "taxonomy")
        taxonomy = self.store.insert(payload.model_dump())
        logger.info("Created taxonomy %s (%s %s)", taxonomy.id, taxonomy.genus, taxonomy.species)
        return taxonomy

    def get_taxonomy(self, taxonomy_id: int) -> Taxonomy:
        return self.store.get(taxonomy_id)

    def get_all_taxonomy(self) -> List[Taxonomy]:
        return self.store.scan()

    def update_taxonomy(self, taxonomy_id: int, payload: TaxonomyPayload) -> Taxonomy:
        """Replace every rank of an existing taxonomy.

        Raises ``ValidationFailed`` for empty ranks and ``NotFound`` if
        no taxonomy has the given id.
        """
        require_valid_text(payload, "taxonomy")
        taxonomy = self.store.update(taxonomy_id, payload.model_dump())
        logger.info("Updated taxonomy %s", taxonomy_id)
        return taxonomy

    def delete_taxonomy(self, taxonomy_id: int) -> Taxonomy:
        taxonomy = self.store.delete(taxonomy_id)
        logger.info("Deleted taxonomy %s", taxonomy_id)
        return taxonomy
