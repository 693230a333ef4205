"""Unit tests for custom exceptions."""

import pytest

pytestmark = pytest.mark.unit

from perplexity_search.utils.exceptions import (  # noqa: E402
    CompletionError,
    ConfigurationError,
    EscalationExhaustedError,
    InvalidSearchArgumentsError,
    PerplexitySearchError,
    RateLimitError,
)


class TestExceptions:
    """Tests for exception hierarchy."""

    def test_completion_error_is_base_error(self):
        assert issubclass(CompletionError, PerplexitySearchError)

    def test_rate_limit_error_is_completion_error(self):
        assert issubclass(RateLimitError, CompletionError)

    def test_configuration_error_is_base_error(self):
        assert issubclass(ConfigurationError, PerplexitySearchError)

    def test_exhaustion_is_not_completion_error(self):
        assert not issubclass(EscalationExhaustedError, CompletionError)

    def test_completion_error_keeps_model(self):
        err = CompletionError("boom", model="llama-3.1-sonar-small-128k-online")
        assert err.model == "llama-3.1-sonar-small-128k-online"
        assert str(err) == "boom"

    def test_invalid_arguments_defaults_errors(self):
        assert InvalidSearchArgumentsError("bad").errors == []

    def test_exhaustion_context(self):
        err = EscalationExhaustedError(
            "All model attempts failed", attempted_models=["a", "b"], errors=["timeout"]
        )
        assert err.attempted_models == ["a", "b"]
        assert err.errors == ["timeout"]
        assert str(err) == "All model attempts failed"
