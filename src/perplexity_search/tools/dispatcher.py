"""Escalating dispatcher - walks the complexity ladder until an answer sticks."""

import structlog

from perplexity_search.clients.base import CompletionClient
from perplexity_search.config.intents import (
    COMPLEXITY_LADDER,
    DEFAULT_COMPLEXITY,
    DEFAULT_INTENT,
    Complexity,
    SearchIntent,
    instruction_for,
    model_for,
)
from perplexity_search.tools.heuristics import AnswerHeuristic
from perplexity_search.utils.exceptions import CompletionError, EscalationExhaustedError
from perplexity_search.utils.models import CompletionAttempt, DispatchOutcome, SearchRequest

logger = structlog.get_logger()

DEFAULT_MAX_TOKENS = 4000


class EscalatingDispatcher:
    """Answers a query on the cheapest tier that gives an acceptable answer.

    Starting from the requested tier, each tier is called at most once, in
    ascending order. An answer is accepted as soon as the heuristic finds no
    weak signal in it, and always on the top tier. A failing call below the
    top tier escalates; on the top tier it is the final error.
    """

    def __init__(
        self,
        client: CompletionClient,
        heuristic: AnswerHeuristic | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            client: Completion client used for every tier
            heuristic: Weak-answer checks (defaults reproduce the stock thresholds)
            max_tokens: Output cap sent with every call
        """
        self.client = client
        self.heuristic = heuristic or AnswerHeuristic()
        self.max_tokens = max_tokens

    async def escalate(
        self,
        query: str,
        intent: SearchIntent = DEFAULT_INTENT,
        complexity: Complexity = DEFAULT_COMPLEXITY,
        attempts: list[CompletionAttempt] | None = None,
    ) -> CompletionAttempt:
        """
        Run the escalation loop and return the accepted attempt.

        Args:
            query: Raw user query
            intent: Selects the system instruction
            complexity: Tier to start from
            attempts: Optional list that receives every attempt made

        Raises:
            CompletionError: If the top tier's call fails
            EscalationExhaustedError: If no tier produced a usable answer
        """
        if attempts is None:
            attempts = []
        instruction = instruction_for(intent)
        start = COMPLEXITY_LADDER.index(complexity)
        last = len(COMPLEXITY_LADDER) - 1

        for index in range(start, last + 1):
            tier = COMPLEXITY_LADDER[index]
            model = model_for(tier)
            is_last = index == last
            logger.info("Querying tier", tier=tier.value, model=model, intent=intent.value)

            try:
                answer = await self.client.complete(model, instruction, query, self.max_tokens)
            except CompletionError as e:
                attempts.append(
                    CompletionAttempt(tier_index=index, tier=tier, model=model, error=str(e))
                )
                if is_last:
                    logger.error("Top tier failed", tier=tier.value, model=model, error=str(e))
                    raise
                logger.warning("Tier failed, escalating", tier=tier.value, error=str(e))
                continue

            if not answer:
                attempts.append(
                    CompletionAttempt(
                        tier_index=index,
                        tier=tier,
                        model=model,
                        weak_signals=["empty"],
                    )
                )
                logger.warning("Tier returned no content", tier=tier.value, model=model)
                continue

            # The top tier has nothing above it, so its answer is never judged
            signals = [] if is_last else self.heuristic.weak_signals(answer)
            attempt = CompletionAttempt(
                tier_index=index,
                tier=tier,
                model=model,
                answer=answer,
                weak_signals=signals,
                accepted=not signals,
            )
            attempts.append(attempt)
            if attempt.accepted:
                logger.info("Answer accepted", tier=tier.value, model=model, length=len(answer))
                return attempt
            logger.info("Weak answer, escalating", tier=tier.value, signals=signals)

        raise EscalationExhaustedError(
            "All model attempts failed",
            attempted_models=[a.model for a in attempts],
            errors=[a.error for a in attempts if a.error],
        )

    async def dispatch(self, request: SearchRequest) -> DispatchOutcome:
        """
        Answer a validated request.

        Dispatcher failures (top-tier error or exhaustion) come back as a
        failed DispatchOutcome rather than an exception.
        """
        attempts: list[CompletionAttempt] = []
        try:
            accepted = await self.escalate(
                request.query, request.intent, request.complexity, attempts
            )
        except (CompletionError, EscalationExhaustedError) as e:
            logger.error(
                "Search failed",
                error=str(e),
                attempted_models=[a.model for a in attempts],
            )
            return DispatchOutcome.failure(f"Perplexity API error: {e}", attempts)

        return DispatchOutcome.success(accepted, attempts)
