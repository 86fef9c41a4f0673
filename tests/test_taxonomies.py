# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Tests for the taxonomies request builder.
"""

import pytest

from tests.conftest import FakeTransport
from wpapi import TaxonomiesRequest, WPRequest
from wpapi.errors import UnsupportedMethodError


class TestTaxonomiesConstructor:

    def test_creates_a_taxonomies_request(self) -> None:
        taxonomies = TaxonomiesRequest()
        assert isinstance(taxonomies, TaxonomiesRequest)
        assert isinstance(taxonomies, WPRequest)

    def test_keeps_passed_in_options(self) -> None:
        taxonomies = TaxonomiesRequest({"booleanProp": True, "strProp": "Some string"})
        assert taxonomies._options["booleanProp"] is True
        assert taxonomies._options["strProp"] == "Some string"

    def test_defaults_options_to_empty_mapping(self) -> None:
        assert TaxonomiesRequest()._options == {}

    def test_initializes_instance_state(self) -> None:
        taxonomies = TaxonomiesRequest()
        assert taxonomies._action is None
        assert taxonomies._action_id is None
        assert taxonomies._id is None
        assert "|".join(sorted(taxonomies._supported_methods)) == "get|head"


class TestTaxonomiesRequestUri:

    @pytest.fixture
    def taxonomies(self) -> TaxonomiesRequest:
        return TaxonomiesRequest({"endpoint": "/wp-json/"})

    def test_all_taxonomies(self, taxonomies: TaxonomiesRequest) -> None:
        assert taxonomies.generate_request_uri() == "/wp-json/taxonomies"

    def test_specific_taxonomy(self, taxonomies: TaxonomiesRequest) -> None:
        url = taxonomies.id("my-tax").generate_request_uri()
        assert url == "/wp-json/taxonomies/my-tax"

    def test_all_terms_of_a_taxonomy(self, taxonomies: TaxonomiesRequest) -> None:
        url = taxonomies.id("my-tax").terms().generate_request_uri()
        assert url == "/wp-json/taxonomies/my-tax/terms"

    def test_specific_term(self, taxonomies: TaxonomiesRequest) -> None:
        url = taxonomies.id("my-tax").terms().id(1337).generate_request_uri()
        assert url == "/wp-json/taxonomies/my-tax/terms/1337"

    def test_endpoint_without_trailing_slash(self) -> None:
        taxonomies = TaxonomiesRequest({"endpoint": "https://example.com/wp-json"})
        assert (
            taxonomies.id("category").generate_request_uri()
            == "https://example.com/wp-json/taxonomies/category"
        )

    def test_chaining_leaves_the_receiver_untouched(
        self, taxonomies: TaxonomiesRequest
    ) -> None:
        category = taxonomies.id("category")
        terms = category.terms()

        assert taxonomies.generate_request_uri() == "/wp-json/taxonomies"
        assert category.generate_request_uri() == "/wp-json/taxonomies/category"
        assert terms.id(3).generate_request_uri() == (
            "/wp-json/taxonomies/category/terms/3"
        )
        assert terms.generate_request_uri() == "/wp-json/taxonomies/category/terms"


class TestTaxonomiesVerbs:

    async def test_get_targets_the_generated_uri(
        self, transport: FakeTransport
    ) -> None:
        transport.respond(body=[{"id": 1, "name": "Uncategorized"}])
        request = TaxonomiesRequest({"endpoint": "/wp-json"}, transport)

        result = await request.id("category").terms()

        assert result == [{"id": 1, "name": "Uncategorized"}]
        assert transport.last_request.url == "/wp-json/taxonomies/category/terms"

    @pytest.mark.parametrize("verb", ["post", "put", "delete", "patch"])
    def test_write_verbs_are_rejected(
        self, transport: FakeTransport, verb: str
    ) -> None:
        request = TaxonomiesRequest({"endpoint": "/wp-json"}, transport)

        with pytest.raises(UnsupportedMethodError):
            getattr(request, verb)()

        assert transport.requests == []
