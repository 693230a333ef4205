"""Shared pytest fixtures for all tests."""

from unittest.mock import AsyncMock

import pytest

from perplexity_search.tools.dispatcher import EscalatingDispatcher

STRONG_ANSWER = (
    "## FastAPI 0.115 release notes\n\n"
    "FastAPI 0.115 adds support for Pydantic models in query and header parameters.\n"
    "- Query parameter models: declare several query params with one model\n"
    "- Header parameter models: same idea for headers\n"
    "See https://fastapi.tiangolo.com/release-notes/ for the full changelog.\n"
)

WEAK_ANSWER = "FastAPI is a web framework. It is fast and modern, ok."


@pytest.fixture
def strong_answer() -> str:
    """An answer that passes every weak-answer check."""
    return STRONG_ANSWER


@pytest.fixture
def weak_answer() -> str:
    """A short single-line answer."""
    return WEAK_ANSWER


@pytest.fixture
def mock_completion_client() -> AsyncMock:
    """Completion client whose complete() is an AsyncMock."""
    client = AsyncMock()
    client.complete = AsyncMock()
    return client


@pytest.fixture
def dispatcher(mock_completion_client: AsyncMock) -> EscalatingDispatcher:
    """Dispatcher with default heuristic wired to the mock client."""
    return EscalatingDispatcher(mock_completion_client)
