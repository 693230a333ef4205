"""Base protocol for completion clients."""

from typing import Protocol


class CompletionClient(Protocol):
    """Protocol defining the outbound completion boundary."""

    async def complete(
        self,
        model: str,
        instruction: str,
        query: str,
        max_tokens: int,
    ) -> str | None:
        """
        Run one chat completion and return the answer text.

        Args:
            model: Remote model identifier
            instruction: System-level directive
            query: User-level content
            max_tokens: Output length cap

        Returns:
            The first choice's text, or None if the response carried none

        Raises:
            CompletionError: If the remote call fails
        """
        ...
