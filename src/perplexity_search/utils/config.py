"""Application configuration using Pydantic Settings."""

import logging
import sys
from typing import Literal

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from perplexity_search.utils.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Strongly-typed application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Perplexity API
    perplexity_api_key: str | None = Field(default=None, description="Perplexity API key")
    perplexity_base_url: str = Field(
        default="https://api.perplexity.ai", description="OpenAI-compatible Perplexity endpoint"
    )
    max_output_tokens: int = Field(default=4000, ge=1, description="Output cap per completion")
    request_timeout: float = Field(
        default=120.0, gt=0.0, description="Seconds to wait for a single completion"
    )
    completion_retry_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts per tier on rate limits or connection errors",
    )

    # Weak-answer heuristic (changing these changes when queries escalate)
    weak_answer_min_length: int = Field(default=200, ge=0)
    weak_answer_require_line_break: bool = True
    weak_answer_phrases: list[str] = Field(
        default_factory=lambda: ["I apologize", "I'm not sure"],
        description="Substrings that mark an answer as weak",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    def get_api_key(self) -> str:
        """Get the Perplexity API key, failing fast if it is missing."""
        if not self.perplexity_api_key:
            raise ConfigurationError("PERPLEXITY_API_KEY environment variable is required")
        return self.perplexity_api_key

    @property
    def has_api_key(self) -> bool:
        """Check if the Perplexity API key is available."""
        return bool(self.perplexity_api_key)


def get_settings() -> Settings:
    """Factory function to get settings (allows mocking in tests)."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure structured logging with the configured log level.

    Logs go to stderr: stdout carries the MCP stdio transport.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(message)s",
        stream=sys.stderr,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


# Singleton for easy import
settings = get_settings()
