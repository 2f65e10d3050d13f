"""
Tests for request and envelope models.
"""

from collections import OrderedDict

import pytest

from graphql_fetch.models import (
    GraphQLRequest,
    ParsedResponse,
    is_batch,
    normalize_operation,
    normalize_request,
)


class TestGraphQLRequest:
    """Test GraphQLRequest."""

    def test_to_dict(self):
        request = GraphQLRequest(
            query="query User { user { id } }",
            variables={"id": "1"},
            operation_name="User",
            extensions={"persistedQuery": {"version": 1}},
            context={"local": True},
        )

        assert request.to_dict() == {
            "query": "query User { user { id } }",
            "variables": {"id": "1"},
            "operationName": "User",
            "extensions": {"persistedQuery": {"version": 1}},
        }

    def test_minimal_to_dict(self):
        assert GraphQLRequest(query="{ a }").to_dict() == {"query": "{ a }"}


class TestNormalization:
    """Test operation normalization."""

    def test_is_batch(self):
        assert is_batch([])
        assert is_batch(({"query": "{ a }"},))
        assert not is_batch({"query": "{ a }"})

    def test_dict_passes_through(self):
        operation = {"query": "{ a }"}

        assert normalize_operation(operation) is operation

    def test_mapping_is_copied_to_dict(self):
        operation = normalize_operation(OrderedDict(query="{ a }"))

        assert type(operation) is dict

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            normalize_operation("{ a }")

    def test_batch_becomes_list(self):
        batch = normalize_request((GraphQLRequest(query="{ a }"), {"query": "{ b }"}))

        assert batch == [{"query": "{ a }"}, {"query": "{ b }"}]


class TestParsedResponse:
    """Test ParsedResponse."""

    def test_from_transport_reads_reason(self):
        class Response:
            status = 201
            reason = "Created"
            headers = {"X-Id": 1}
            url = "https://api.example.com/graphql"

        original = Response()
        response = ParsedResponse.from_transport(original, raw="{}")

        assert response.status == 201
        assert response.status_text == "Created"
        assert response.headers == {"X-Id": "1"}
        assert response.raw == "{}"
        assert response.parsed is None
        assert response.original is original
        assert response.ok

    def test_status_text_preferred(self):
        class Response:
            status = 500
            status_text = "Internal Server Error"
            reason = "ignored"

        response = ParsedResponse.from_transport(Response(), raw="")

        assert response.status_text == "Internal Server Error"
        assert response.headers == {}
        assert response.url is None
        assert not response.ok
