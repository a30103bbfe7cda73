from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# "{action}:{author_id}:{movie_id}"
MOVIE_ACTIONS = frozenset({
    "watched",
    "watchlist",
    "watch_party",
    "delete",
    "request",
    "request_modal",
    "quick_request_modal",
})

# "{action}:{user_id}"
USER_ACTIONS = frozenset({"confirm_delete", "cancel_delete"})

SEPARATOR = ":"


@dataclass(frozen=True)
class ParsedCustomId:
    action: str
    user_id: int
    movie_id: Optional[int] = None


def make_custom_id(action: str, user_id: int, movie_id: int | None = None) -> str:
    if action in MOVIE_ACTIONS:
        if movie_id is None:
            raise ValueError(f"{action} needs a movie id")
        return f"{action}{SEPARATOR}{user_id}{SEPARATOR}{movie_id}"
    if action in USER_ACTIONS:
        return f"{action}{SEPARATOR}{user_id}"
    raise ValueError(f"unknown custom id action: {action}")


def _to_int(raw: str) -> Optional[int]:
    if not raw.isdigit():
        return None
    return int(raw)


def parse_custom_id(custom_id: str) -> Optional[ParsedCustomId]:
    """
    Supports:
    - watched:123:550
    - confirm_delete:123
    Anything else (unknown action, wrong arity, non-numeric ids) -> None.
    """
    parts = (custom_id or "").split(SEPARATOR)
    action = parts[0]

    if action in MOVIE_ACTIONS and len(parts) == 3:
        user_id = _to_int(parts[1])
        movie_id = _to_int(parts[2])
        if user_id is None or movie_id is None:
            return None
        return ParsedCustomId(action=action, user_id=user_id, movie_id=movie_id)

    if action in USER_ACTIONS and len(parts) == 2:
        user_id = _to_int(parts[1])
        if user_id is None:
            return None
        return ParsedCustomId(action=action, user_id=user_id)

    return None
