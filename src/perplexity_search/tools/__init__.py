"""search_web building blocks: validation, answer heuristics and escalation."""

from perplexity_search.tools.dispatcher import EscalatingDispatcher
from perplexity_search.tools.heuristics import AnswerHeuristic
from perplexity_search.tools.validation import (
    is_valid_search_arguments,
    validate_search_arguments,
)

__all__ = [
    "AnswerHeuristic",
    "EscalatingDispatcher",
    "is_valid_search_arguments",
    "validate_search_arguments",
]
