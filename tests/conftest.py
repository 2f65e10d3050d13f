"""
Shared test fixtures and configuration for the graphql_fetch test suite.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock

import aioresponses
import pytest

from graphql_fetch import GraphQLFetch


class FakeResponse:
    """Minimal transport response."""

    def __init__(
        self,
        body: Any = None,
        status: int = 200,
        reason: str = "OK",
        headers: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
    ) -> None:
        self.status = status
        self.reason = reason
        self.headers = headers or {"Content-Type": "application/json"}
        self.url = "https://api.example.com/graphql"
        self._text = text if text is not None else json.dumps(body)

    async def text(self) -> str:
        return self._text


@pytest.fixture
def make_response():
    """Factory for fake transport responses."""
    return FakeResponse


@pytest.fixture
def sample_result() -> Dict[str, Any]:
    """Sample GraphQL result body."""
    return {"data": {"user": {"id": "1", "name": "Ada"}}}


@pytest.fixture
def sample_request() -> Dict[str, Any]:
    """Sample GraphQL operation."""
    return {
        "query": "query User($id: ID!) { user(id: $id) { id name } }",
        "variables": {"id": "1"},
        "operationName": "User",
    }


@pytest.fixture
def mock_fetch(sample_result):
    """Transport returning ``sample_result`` with status 200."""
    return AsyncMock(return_value=FakeResponse(sample_result))


@pytest.fixture
def client(mock_fetch) -> GraphQLFetch:
    """Client wired to ``mock_fetch``."""
    return GraphQLFetch(uri="/graphql", custom_fetch=mock_fetch)


@pytest.fixture
def mock_aiohttp():
    """Mock aiohttp responses for testing."""
    with aioresponses.aioresponses() as m:
        yield m
