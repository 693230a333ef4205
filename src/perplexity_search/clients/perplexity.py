"""Perplexity chat-completion client (OpenAI-compatible API)."""

from typing import Any

import openai
import structlog
from openai import AsyncOpenAI
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from perplexity_search.utils.config import Settings
from perplexity_search.utils.exceptions import CompletionError, RateLimitError

logger = structlog.get_logger()

# Worth retrying on the same tier before the dispatcher escalates
TRANSIENT_ERRORS = (openai.RateLimitError, openai.APIConnectionError)


class PerplexityClient:
    """Async client for Perplexity's chat/completions endpoint."""

    HTTP_TOO_MANY_REQUESTS = 429

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.perplexity.ai",
        timeout: float = 120.0,
        retry_attempts: int = 3,
    ) -> None:
        # Retries are handled here with tenacity, not by the SDK
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )
        self.retry_attempts = retry_attempts
        self.wait = wait_exponential(multiplier=1, min=1, max=10)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PerplexityClient":
        """Build a client from settings. Raises ConfigurationError without a key."""
        return cls(
            api_key=settings.get_api_key(),
            base_url=settings.perplexity_base_url,
            timeout=settings.request_timeout,
            retry_attempts=settings.completion_retry_attempts,
        )

    async def complete(
        self,
        model: str,
        instruction: str,
        query: str,
        max_tokens: int,
    ) -> str | None:
        """Send a system + user exchange and return the first choice's text."""
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.retry_attempts),
                wait=self.wait,
                retry=retry_if_exception_type(TRANSIENT_ERRORS),
                reraise=True,
            ):
                with attempt:
                    if attempt.retry_state.attempt_number > 1:
                        logger.info(
                            "Retrying completion",
                            model=model,
                            attempt=attempt.retry_state.attempt_number,
                        )
                    response = await self._client.chat.completions.create(
                        model=model,
                        messages=[
                            {"role": "system", "content": instruction},
                            {"role": "user", "content": query},
                        ],
                        max_tokens=max_tokens,
                    )
        except openai.APIStatusError as e:
            if e.status_code == self.HTTP_TOO_MANY_REQUESTS:
                raise RateLimitError(f"Perplexity rate limit exceeded: {e.message}", model) from e
            raise CompletionError(f"{e.status_code} {e.message}", model) from e
        except openai.APIError as e:
            raise CompletionError(e.message, model) from e

        return self._extract_content(response)

    @staticmethod
    def _extract_content(response: Any) -> str | None:
        choices = getattr(response, "choices", None)
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        return content or None

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()
