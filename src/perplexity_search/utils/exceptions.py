"""Custom exceptions for the Perplexity search server."""


class PerplexitySearchError(Exception):
    """Base exception for all Perplexity search errors."""

    pass


class ConfigurationError(PerplexitySearchError):
    """Raised when configuration is invalid."""

    pass


class InvalidSearchArgumentsError(PerplexitySearchError):
    """Raised when a tool call payload does not match the search_web schema."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class CompletionError(PerplexitySearchError):
    """Raised when a Perplexity completion call fails (API or transport)."""

    def __init__(self, message: str, model: str | None = None) -> None:
        super().__init__(message)
        self.model = model


class RateLimitError(CompletionError):
    """Raised when we hit API rate limits."""

    pass


class EscalationExhaustedError(PerplexitySearchError):
    """Raised when no model tier produced an acceptable answer.

    Attributes:
        message: Human-readable error description
        attempted_models: List of model IDs that were tried
        errors: List of error messages from each failed attempt
    """

    def __init__(
        self,
        message: str,
        attempted_models: list[str] | None = None,
        errors: list[str] | None = None,
    ) -> None:
        """Initialize EscalationExhaustedError with context.

        Args:
            message: Human-readable error description
            attempted_models: Models that were tried before giving up
            errors: Error messages from each failed model attempt
        """
        super().__init__(message)
        self.attempted_models = attempted_models or []
        self.errors = errors or []
