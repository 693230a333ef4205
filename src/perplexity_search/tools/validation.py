"""Argument validation for search_web tool calls."""

from typing import Any

from pydantic import ValidationError

from perplexity_search.utils.exceptions import InvalidSearchArgumentsError
from perplexity_search.utils.models import SearchRequest

INVALID_ARGUMENTS_MESSAGE = (
    "Invalid search arguments. Must provide a query string and optional intent/complexity."
)


def validate_search_arguments(arguments: Any) -> SearchRequest:
    """Check an untyped tool payload and return the typed request.

    Accepts a mapping with a non-empty string ``query``, an optional ``intent``
    (research, troubleshoot or update) and an optional ``complexity`` (low,
    medium or high). Other keys are ignored.

    Raises:
        InvalidSearchArgumentsError: If the payload has any other shape
    """
    try:
        return SearchRequest.model_validate(arguments)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidSearchArgumentsError(INVALID_ARGUMENTS_MESSAGE, errors=errors) from e


def is_valid_search_arguments(arguments: Any) -> bool:
    """Return True if ``arguments`` would pass validate_search_arguments."""
    try:
        validate_search_arguments(arguments)
    except InvalidSearchArgumentsError:
        return False
    return True
