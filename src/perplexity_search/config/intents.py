"""Search intent profiles and the complexity ladder.

This module holds the two fixed lookup tables behind the search_web tool:
which system instruction steers each search intent, and which Perplexity
model backs each complexity tier.

Usage:
    from perplexity_search.config.intents import (
        Complexity,
        SearchIntent,
        instruction_for,
        model_for,
    )

    instruction = instruction_for(SearchIntent.TROUBLESHOOT)
    model = model_for(Complexity.HIGH)
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel

from perplexity_search.prompts.search import (
    RESEARCH_INSTRUCTION,
    TROUBLESHOOT_INSTRUCTION,
    UPDATE_INSTRUCTION,
)


class SearchIntent(str, Enum):
    """Caller-declared purpose of a search."""

    RESEARCH = "research"
    TROUBLESHOOT = "troubleshoot"
    UPDATE = "update"


class Complexity(str, Enum):
    """Caller-declared starting tier on the escalation ladder."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class IntentProfile(BaseModel):
    """Everything the server needs to know about one search intent."""

    name: str
    description: str
    instruction: str

    model_config = {"frozen": True}


# ─────────────────────────────────────────────────────────────────
# Intent Profiles
# ─────────────────────────────────────────────────────────────────

INTENT_PROFILES: Mapping[SearchIntent, IntentProfile] = MappingProxyType(
    {
        SearchIntent.RESEARCH: IntentProfile(
            name="research",
            description="in-depth analysis",
            instruction=RESEARCH_INSTRUCTION,
        ),
        SearchIntent.TROUBLESHOOT: IntentProfile(
            name="troubleshoot",
            description="problem-solving",
            instruction=TROUBLESHOOT_INSTRUCTION,
        ),
        SearchIntent.UPDATE: IntentProfile(
            name="update",
            description="latest changes",
            instruction=UPDATE_INSTRUCTION,
        ),
    }
)

# ─────────────────────────────────────────────────────────────────
# Model Bindings
# ─────────────────────────────────────────────────────────────────

# Escalation order, cheapest first
COMPLEXITY_LADDER: tuple[Complexity, ...] = (
    Complexity.LOW,
    Complexity.MEDIUM,
    Complexity.HIGH,
)

MODEL_BINDINGS: Mapping[Complexity, str] = MappingProxyType(
    {
        Complexity.LOW: "llama-3.1-sonar-small-128k-online",
        Complexity.MEDIUM: "llama-3.1-sonar-large-128k-online",
        Complexity.HIGH: "llama-3.1-sonar-huge-128k-online",
    }
)

DEFAULT_INTENT = SearchIntent.RESEARCH
DEFAULT_COMPLEXITY = Complexity.MEDIUM


def _coerce_intent(intent: SearchIntent | str | None) -> SearchIntent:
    if intent is None:
        return DEFAULT_INTENT
    if isinstance(intent, SearchIntent):
        return intent
    try:
        return SearchIntent(intent)
    except ValueError as e:
        valid = [i.value for i in SearchIntent]
        raise ValueError(f"Invalid intent '{intent}'. Valid intents: {valid}") from e


def _coerce_complexity(complexity: Complexity | str | None) -> Complexity:
    if complexity is None:
        return DEFAULT_COMPLEXITY
    if isinstance(complexity, Complexity):
        return complexity
    try:
        return Complexity(complexity)
    except ValueError as e:
        valid = [c.value for c in Complexity]
        raise ValueError(f"Invalid complexity '{complexity}'. Valid levels: {valid}") from e


def get_intent_profile(intent: SearchIntent | str | None = None) -> IntentProfile:
    """Get the profile for a search intent.

    Args:
        intent: The search intent. Defaults to research if None.

    Returns:
        IntentProfile for the specified intent.
    """
    return INTENT_PROFILES[_coerce_intent(intent)]


def instruction_for(intent: SearchIntent | str | None = None) -> str:
    """Get the system instruction for a search intent (research if None)."""
    return get_intent_profile(intent).instruction


def model_for(complexity: Complexity | str | None = None) -> str:
    """Get the Perplexity model bound to a complexity tier (medium if None)."""
    return MODEL_BINDINGS[_coerce_complexity(complexity)]
