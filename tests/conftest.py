"""Pytest configuration and fixtures."""

import itertools

import pytest
from fastapi.testclient import TestClient

from marine_species_api.app.core.config import Settings
from marine_species_api.app.main import create_app
from marine_species_api.app.schemas.marine_specie import MarineSpeciePayload
from marine_species_api.app.schemas.taxonomy import TaxonomyPayload
from marine_species_api.app.services.dispatcher import build_dispatcher


@pytest.fixture
def clock():
    """Deterministic clock advancing 1000 ns per reading."""
    ticks = itertools.count(1_000, 1_000)
    return lambda: next(ticks)


@pytest.fixture
def settings():
    return Settings(log_level="WARNING", max_record_bytes=1024)


@pytest.fixture
def dispatcher(settings, clock):
    return build_dispatcher(settings, clock=clock)


@pytest.fixture
def taxonomy_service(dispatcher):
    return dispatcher.taxonomy_service


@pytest.fixture
def marinespecie_service(dispatcher):
    return dispatcher.marinespecie_service


@pytest.fixture
def client(settings, clock):
    with TestClient(create_app(settings, clock=clock)) as test_client:
        yield test_client


@pytest.fixture
def taxonomy_data():
    return {
        "kingdom": "Animalia",
        "phylum": "Chordata",
        "class": "Actinopterygii",
        "order": "Perciformes",
        "family": "Pomacentridae",
        "genus": "Amphiprion",
        "species": "ocellaris",
    }


@pytest.fixture
def taxonomy_payload(taxonomy_data):
    return TaxonomyPayload(**taxonomy_data)


@pytest.fixture
def specie_payload():
    def make(taxonomy_id=1, name="Clownfish", habitat="Reef", conservation_status="Least Concern"):
        return MarineSpeciePayload(
            name=name,
            habitat=habitat,
            taxonomy_id=taxonomy_id,
            conservation_status=conservation_status,
        )

    return make
