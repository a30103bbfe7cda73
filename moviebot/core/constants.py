"""
Application-wide constants.

This module contains constants used throughout the application to avoid
magic numbers and strings scattered in the codebase.
"""

# Watchlist Statuses
STATUS_WATCHED = "watched"
STATUS_WANT_TO_WATCH = "want_to_watch"
WATCHLIST_STATUSES = (STATUS_WATCHED, STATUS_WANT_TO_WATCH)

# Discord Limits
MAX_BUTTONS_PER_ROW = 5
MAX_FORUM_TAGS = 5
MAX_AUTOCOMPLETE_CHOICES = 25
CONFIRM_VIEW_TIMEOUT_SECONDS = 60
MIN_AUTOCOMPLETE_QUERY_LENGTH = 2
MAX_MOVIE_QUERY_LENGTH = 100

# Cooldown ("bullying")
BULLY_STRIKES_BEFORE_PASS = 3
DEFAULT_BULLY_COOLDOWN_MINUTES = 30

# Watch Parties
PLACEHOLDER_EVENT_HOURS = 168  # 7 days to coordinate the real date
EVENT_DURATION_HOURS = 3

# Listing Limits
WATCHLIST_SECTION_LIMIT = 10
REQUESTS_SECTION_LIMIT = 5
REQUESTS_FETCH_LIMIT = 50

# Request Quality
QUALITY_4K = "4k"
MAX_QUALITY_INPUT_LENGTH = 3

# Overseerr media statuses
MEDIA_STATUS_PENDING = 2
MEDIA_STATUS_PROCESSING = 3
MEDIA_STATUS_AVAILABLE = 4
MEDIA_STATUS_PARTIALLY_AVAILABLE = 5

# Overseerr request statuses (as used by /myrequests)
REQUEST_STATUS_PENDING = 2
REQUEST_STATUS_APPROVED = 3
REQUEST_STATUS_AVAILABLE = 4

# Embed
EMBED_COLOR = 0x01D277  # TMDB green

# Emojis
RATING_EMOJIS = ("1️⃣", "2️⃣", "3️⃣", "4️⃣", "5️⃣")
EMOJI_WATCHED = "✅"
EMOJI_WANT_TO_WATCH = "📌"
EMOJI_DELETE = "🗑️"
EMOJI_EXTERNAL_LINK = "⭐"
EMOJI_WATCH_PARTY = "🎉"
EMOJI_REQUEST = "📥"
EMOJI_PENDING = "🟡"
EMOJI_AVAILABLE = "🟢"

# TMDB genre id -> Discord forum tag name
GENRE_TAG_MAPPING = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Sci-Fi",
    10770: "TV",
    53: "Thriller",
    10752: "War",
    37: "Western",
}
