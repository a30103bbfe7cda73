"""
Custom exception hierarchy for the movie bot.

Conflicts and not-found lookups are ordinary return values in this codebase;
these exceptions cover configuration problems, bad input and failures at the
HTTP and database boundaries.
"""


class MovieBotError(Exception):
    """Base exception for all movie bot errors."""

    def __init__(self, message: str, user_message: str | None = None):
        """
        Initialize exception.

        Args:
            message: Internal error message for logging
            user_message: User-friendly message for display (optional)
        """
        super().__init__(message)
        self.user_message = user_message or message


class ConfigurationError(MovieBotError):
    """Raised when application configuration is invalid."""

    pass


class ValidationError(MovieBotError):
    """Raised when user input validation fails."""

    pass


class TMDBError(MovieBotError):
    """Raised when TMDB API operations fail."""

    pass


class OverseerrError(MovieBotError):
    """Raised when Overseerr API operations fail."""

    def __init__(self, message: str, status_code: int | None = None, payload: dict | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}


class DatabaseError(MovieBotError):
    """Raised when database operations fail."""

    pass


class MovieNotFoundError(MovieBotError):
    """Raised when a movie is not found."""

    pass


class AccountNotLinkedError(MovieBotError):
    """Raised when a Discord user has no linked Overseerr account."""

    def __init__(self, user_id: int, user_message: str | None = None):
        super().__init__(f"User {user_id} has no linked Overseerr account", user_message=user_message)
        self.user_id = user_id


class PermissionDeniedError(MovieBotError):
    """Raised when a user lacks the permission a command needs."""

    pass
