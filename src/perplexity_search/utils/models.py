"""Data models for the search_web tool."""

from pydantic import BaseModel, Field

from perplexity_search.config.intents import (
    DEFAULT_COMPLEXITY,
    DEFAULT_INTENT,
    Complexity,
    SearchIntent,
)


class SearchRequest(BaseModel):
    """A validated search_web call."""

    query: str = Field(min_length=1, strict=True, description="The search query")
    intent: SearchIntent = Field(
        default=DEFAULT_INTENT, description="Which instruction steers the model"
    )
    complexity: Complexity = Field(
        default=DEFAULT_COMPLEXITY, description="Tier the escalation starts from"
    )

    model_config = {"frozen": True}


class CompletionAttempt(BaseModel):
    """One remote call made while escalating a single request."""

    tier_index: int = Field(ge=0)
    tier: Complexity
    model: str
    answer: str | None = None
    error: str | None = None
    weak_signals: list[str] = Field(default_factory=list)
    accepted: bool = False

    model_config = {"frozen": True}


class DispatchOutcome(BaseModel):
    """Terminal result of dispatching one request: an answer or an error."""

    answer: str | None = None
    error: str | None = None
    tier: Complexity | None = Field(default=None, description="Tier that produced the answer")
    model: str | None = None
    attempts: list[CompletionAttempt] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        """True when an answer was accepted."""
        return self.answer is not None

    @classmethod
    def success(
        cls, attempt: CompletionAttempt, attempts: list[CompletionAttempt]
    ) -> "DispatchOutcome":
        return cls(
            answer=attempt.answer,
            tier=attempt.tier,
            model=attempt.model,
            attempts=attempts,
        )

    @classmethod
    def failure(cls, error: str, attempts: list[CompletionAttempt]) -> "DispatchOutcome":
        return cls(error=error, attempts=attempts)
