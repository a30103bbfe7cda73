"""
Input validation utilities.

This module provides validation functions for user inputs coming from
slash-command options and modal fields.
"""

from moviebot.core.constants import (
    MAX_MOVIE_QUERY_LENGTH,
    MAX_QUALITY_INPUT_LENGTH,
    MIN_AUTOCOMPLETE_QUERY_LENGTH,
    QUALITY_4K,
)
from moviebot.core.exceptions import ValidationError


def validate_movie_id(raw: str | int) -> int:
    """
    Validate a TMDB movie id coming from an autocomplete choice.

    Args:
        raw: The option value (autocomplete choices carry the id as text)

    Returns:
        The movie id as an int

    Raises:
        ValidationError: If the value is not a positive integer
    """
    try:
        movie_id = int(str(raw).strip())
    except (TypeError, ValueError):
        raise ValidationError(
            f"Invalid movie id {raw!r}",
            user_message="❌ Pick a movie from the suggestions list.",
        ) from None

    if movie_id <= 0:
        raise ValidationError(
            f"Invalid movie id {raw!r}",
            user_message="❌ Pick a movie from the suggestions list.",
        )

    return movie_id


def normalize_search_query(query: str | None) -> str | None:
    """
    Normalize an autocomplete query.

    Returns None when the query is too short to be worth a TMDB search,
    and truncates overly long input instead of rejecting it.
    """
    if query is None:
        return None

    query = query.strip()
    if len(query) < MIN_AUTOCOMPLETE_QUERY_LENGTH:
        return None

    return query[:MAX_MOVIE_QUERY_LENGTH]


def parse_quality_input(value: str | None) -> bool:
    """
    Parse the quality field of the request modal.

    Returns True for a 4K request, False for the default quality.
    """
    if value is None:
        return False

    value = value.strip().lower()
    if len(value) > MAX_QUALITY_INPUT_LENGTH:
        raise ValidationError(
            f"Quality input too long ({len(value)} chars)",
            user_message="❌ Type '4k' for 4K or leave the field empty.",
        )

    return value == QUALITY_4K
