"""Tests for the call dispatcher and the Ok/Err contract."""

import pytest

from marine_species_api.app.core.errors import Err, InvalidInput, NotFound, Ok, ValidationFailed
from marine_species_api.app.services.dispatcher import OPERATIONS, UnknownOperation


class TestDispatcher:
    """Tests for the typed operations."""

    def test_scenario_without_cascade(self, dispatcher, taxonomy_payload, specie_payload):
        taxonomy = dispatcher.add_taxonomy(taxonomy_payload)
        assert isinstance(taxonomy, Ok)
        assert taxonomy.value.id == 1

        specie = dispatcher.add_marinespecie(specie_payload(taxonomy_id=1))
        assert isinstance(specie, Ok)
        assert specie.value.id == 1

        dangling = dispatcher.add_marinespecie(specie_payload(taxonomy_id=999))
        assert isinstance(dangling, Err)
        assert isinstance(dangling.error, InvalidInput)

        assert dispatcher.delete_taxonomy(1).is_ok
        assert dispatcher.get_marinespecie(1) == Ok(specie.value)

    def test_not_found_is_err(self, dispatcher):
        result = dispatcher.get_taxonomy(3)

        assert not result.is_ok
        assert isinstance(result.error, NotFound)

    def test_validation_failed_is_err(self, dispatcher, taxonomy_data):
        from marine_species_api.app.schemas.taxonomy import TaxonomyPayload

        taxonomy_data["family"] = ""
        result = dispatcher.add_taxonomy(TaxonomyPayload(**taxonomy_data))

        assert isinstance(result.error, ValidationFailed)
        assert dispatcher.get_all_taxonomy() == Ok([])

    def test_ids_increase_across_deletes(self, dispatcher, taxonomy_payload):
        ids = []
        for _ in range(3):
            ids.append(dispatcher.add_taxonomy(taxonomy_payload).value.id)
            dispatcher.delete_taxonomy(ids[-1])

        assert ids == [1, 2, 3]

    def test_empty_status_query_is_ok(self, dispatcher):
        assert dispatcher.get_marinespecie_by_conservation_status("Endangered") == Ok([])

    def test_update_operations(self, dispatcher, taxonomy_payload, taxonomy_data, specie_payload):
        from marine_species_api.app.schemas.taxonomy import TaxonomyPayload

        dispatcher.add_taxonomy(taxonomy_payload)
        dispatcher.add_marinespecie(specie_payload())
        taxonomy_data["genus"] = "Premnas"

        taxonomy = dispatcher.update_taxonomy(1, TaxonomyPayload(**taxonomy_data))
        specie = dispatcher.update_marinespecie(1, specie_payload(conservation_status="Vulnerable"))

        assert taxonomy.value.genus == "Premnas"
        assert taxonomy.value.updated_at >= taxonomy.value.created_at
        assert specie.value.conservation_status == "Vulnerable"
        assert specie.value.updated_at >= specie.value.created_at
        assert isinstance(dispatcher.update_taxonomy(9, TaxonomyPayload(**taxonomy_data)).error, NotFound)
        assert isinstance(dispatcher.update_marinespecie(1, specie_payload(taxonomy_id=9)).error, InvalidInput)


class TestDispatcherCall:
    """Tests for Dispatcher.call and the wire format."""

    def test_operations_cover_public_methods(self, dispatcher):
        assert len(OPERATIONS) == 11
        for name in OPERATIONS:
            assert callable(getattr(dispatcher, name))

    def test_call_add_and_get(self, dispatcher, taxonomy_data):
        created = dispatcher.call("add_taxonomy", {"payload": taxonomy_data})
        fetched = dispatcher.call("get_taxonomy", {"id": 1})

        wire = fetched.to_wire()
        assert created == fetched
        assert wire["Ok"]["class"] == "Actinopterygii"
        assert wire["Ok"]["id"] == 1
        assert wire["Ok"]["updated_at"] is None

    def test_call_without_arguments(self, dispatcher):
        assert dispatcher.call("get_all_marinespecie").to_wire() == {"Ok": []}

    def test_not_found_wire_shape(self, dispatcher):
        wire = dispatcher.call("delete_marinespecie", {"id": 4}).to_wire()

        assert list(wire["Err"]) == ["NotFound"]
        assert "id=4" in wire["Err"]["NotFound"]["msg"]

    def test_validation_failed_wire_shape(self, dispatcher, taxonomy_data):
        taxonomy_data["phylum"] = ""

        wire = dispatcher.call("add_taxonomy", {"payload": taxonomy_data}).to_wire()

        assert wire == {"Err": {"ValidationFailed": {"content": "phylum: must not be empty"}}}

    def test_unresolved_taxonomy_wire_shape(self, dispatcher):
        payload = {"name": "Orca", "habitat": "Open ocean", "taxonomy_id": 999, "conservation_status": "Data Deficient"}

        assert dispatcher.call("add_marinespecie", {"payload": payload}).to_wire() == {"Err": "InvalidInput"}

    @pytest.mark.parametrize(
        "operation, arguments",
        [
            ("get_taxonomy", {}),
            ("get_taxonomy", {"id": -1}),
            ("get_taxonomy", {"id": "abc"}),
            ("get_taxonomy", {"id": True}),
            ("get_taxonomy", {"id": "1"}),
            ("delete_marinespecie", {"id": 1.5}),
            (
                "add_marinespecie",
                {"payload": {"name": "Orca", "habitat": "Ocean", "taxonomy_id": True, "conservation_status": "Data Deficient"}},
            ),
            ("get_all_taxonomy", {"unexpected": True}),
            ("add_taxonomy", {"payload": {"kingdom": "Animalia"}}),
            ("update_marinespecie", {"payload": {}}),
            ("get_marinespecie_by_conservation_status", {"status": "Endangered"}),
        ],
    )
    def test_malformed_arguments_are_invalid_input(self, dispatcher, operation, arguments):
        result = dispatcher.call(operation, arguments)

        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidInput)
        assert len(dispatcher.taxonomy_service.store) == 0

    def test_unencodable_text_is_invalid_input(self, dispatcher, taxonomy_data):
        taxonomy_data["genus"] = "\ud800"

        result = dispatcher.call("add_taxonomy", {"payload": taxonomy_data})

        assert result.to_wire() == {"Err": "InvalidInput"}
        assert len(dispatcher.taxonomy_service.store) == 0

    def test_unknown_operation(self, dispatcher):
        with pytest.raises(UnknownOperation):
            dispatcher.call("greet", {"name": "reef"})
