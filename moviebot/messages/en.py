"""All user-facing text in English."""


def _people(count: int, one: str, many: str) -> str:
    return one if count == 1 else many


# Slash command descriptions
COMMAND_MOVIE_DESCRIPTION = "Create a movie discussion post"
COMMAND_MOVIE_TITLE_DESCRIPTION = "Movie title to search for"
COMMAND_WATCHLIST_DESCRIPTION = "View your watched movies and watchlist"
COMMAND_REQUEST_DESCRIPTION = "Request a movie on Plex without creating a post"
COMMAND_REQUEST_TITLE_DESCRIPTION = "Movie title to request"
COMMAND_MYREQUESTS_DESCRIPTION = "View your Overseerr movie requests"
COMMAND_BULLY_DESCRIPTION = "Manage button bullying (Admin only)"
COMMAND_OVERSEERR_DESCRIPTION = "Manage Overseerr integration"

# /movie
MOVIE_CHANNEL_NOT_FOUND = "❌ Movie forum channel not found or is not a forum channel."
MOVIE_NOT_FOUND = "❌ Movie not found. Try searching with a different title."
MOVIE_CREATION_ERROR = "❌ Failed to create movie post. Please try again."


def movie_created(title: str, url: str) -> str:
    return f"✅ Created discussion for **{title}**!\n{url}"


EMBED_RELEASE_YEAR = "📅 Release Year"
EMBED_RATING = "⭐ Rating"
EMBED_RUNTIME = "⏱️ Runtime"
EMBED_CAST = "🎭 Cast"
EMBED_DIRECTOR = "🎬 Director"
EMBED_GENRES = "🎪 Genres"
EMBED_FOOTER_DEFAULT = "Data from TMDB"
EMBED_FOOTER_AVAILABLE = "🟢 Available on Plex | Data from TMDB"
EMBED_FOOTER_PENDING = "🟡 Request Pending | Data from TMDB"

# /mywatchlist
WATCHED_MOVIES_HEADER = "🎬 Watched Movies"
NO_WATCHED_MOVIES = "No movies watched yet."
WATCHLIST_HEADER = "📌 Want to Watch"
NO_WATCHLIST_MOVIES = "No movies in watchlist yet."
WATCHLIST_FETCH_ERROR = "❌ An error occurred while fetching your watchlist."


def watchlist_title(username: str) -> str:
    return f"{username}'s Movie Lists"


def and_more(count: int) -> str:
    return f"_...and {count} more_"


# Delete button
DELETE_ONLY_AUTHOR = "❌ Only the post author can delete this post."
DELETE_CONFIRMATION = "⚠️ Are you sure you want to delete this post? This cannot be undone."
DELETE_CANCELLED = "✅ Delete cancelled."
DELETING_POST = "🗑️ Deleting post..."
DELETE_ERROR = "❌ Failed to delete post. Please try again."


# Watched button
def removed_from_watched(count: int) -> str:
    return f"✅ Removed from watched. ({count} {_people(count, 'person has', 'people have')} watched this)"


def marked_as_watched(count: int) -> str:
    return f"✅ Marked as watched! ({count} {_people(count, 'person has', 'people have')} watched this)"


WATCHED_ERROR = "❌ Failed to update. Please try again."


# Want-to-watch button
def removed_from_watchlist(count: int) -> str:
    return f"📌 Removed from your watchlist. ({count} {_people(count, 'person wants', 'people want')} to watch this)"


def added_to_watchlist(count: int) -> str:
    return f"📌 Added to your watchlist! ({count} {_people(count, 'person wants', 'people want')} to watch this)"


def watch_party_threshold_reached(user_mentions: str, count: int) -> str:
    return (
        f"🎉 {user_mentions} - **{count} {_people(count, 'person wants', 'people want')} to watch this movie!**\n\n"
        'Click the "Organize Watch Party" button above to coordinate a watch party!'
    )


WATCHLIST_ERROR = "❌ Failed to update watchlist. Please try again."

# Watch party button
WATCH_PARTY_ALREADY_EXISTS = "❌ A watch party has already been organized for this movie! Check the thread above."
WATCH_PARTY_EVENT_LOCATION = "Plex / Discord"
WATCH_PARTY_ERROR = "❌ Failed to create watch party. Please try again."


def watch_party_created(movie_title: str, event_url: str) -> str:
    return (
        "🎉 **Watch party organized!**\n\n"
        "Check the thread above for coordination details.\n"
        f"Event created: {event_url}"
    )


def watch_party_coordination(movie_title: str, user_mentions: str) -> str:
    return (
        f"🎉 **Watch Party for {movie_title}**!\n\n"
        f"{user_mentions} have expressed interest!\n\n"
        "**Discuss below:**\n"
        "• When works for everyone?\n"
        "• Plex watch party or Discord screen share?\n"
        "• Any specific preferences?\n\n"
        "React with ✅ when you've confirmed you can make it!"
    )


def watch_party_event_name(movie_title: str) -> str:
    return f"Watch Party: {movie_title}"


def watch_party_event_description(count: int, thread_id: int) -> str:
    return (
        "⚠️ PLACEHOLDER TIME - Edit this event after coordinating in the thread!\n\n"
        f"{count} people want to watch this!\n\n"
        f"Discuss timing in the thread:\n<#{thread_id}>"
    )


# Button labels
BUTTON_WATCHED = "Watched"
BUTTON_WANT_TO_WATCH = "Want to Watch"
BUTTON_DELETE = "Delete Post"
BUTTON_IMDB = "IMDB"
BUTTON_CONFIRM_DELETE = "Yes, Delete"
BUTTON_CANCEL_DELETE = "Cancel"
BUTTON_REQUEST_ON_PLEX = "Request on Plex"
BUTTON_REQUEST_PENDING = "Request Pending"
BUTTON_AVAILABLE_ON_PLEX = "Available on Plex"


def button_watch_party(count: int) -> str:
    return f"Organize Watch Party ({count} interested)"


# Strike messages
def first_press_message(username: str) -> str:
    return f"Everyone, {username} is trying to touch me."


def second_press_message(username: str) -> str:
    return f"{username} still trying to press my buttons."


# Overseerr
NOT_LINKED = "❌ You haven't linked your Plex account yet! Ask an admin to link your account using `/overseerr link`."
LINK_FAILED = "❌ Failed to create link. Please try again."
UNLINK_FAILED = "❌ Failed to remove link. Please try again."
ALREADY_AVAILABLE = "🟢 This movie is already available on Plex!"
ALREADY_REQUESTED = "🟡 This movie has already been requested. It will be added soon!"
NO_REQUESTS = (
    "You haven't requested any movies yet. "
    "Click the 'Request on Plex' button on any movie post to request it!"
)
NOT_CONFIGURED = "❌ Overseerr is not configured. Please set OVERSEERR_URL and OVERSEERR_API_KEY in your .env file."
NO_LINKS = "No users are currently linked to Overseerr accounts."


def not_linked_user(username: str) -> str:
    return f"❌ {username} is not linked to an Overseerr account."


def already_linked(username: str, overseerr_username: str) -> str:
    return f"❌ {username} is already linked to Overseerr account: **{overseerr_username}**"


def link_success(username: str, overseerr_username: str) -> str:
    return f"✅ Successfully linked {username} to Overseerr account: **{overseerr_username}**"


def unlink_success(username: str) -> str:
    return f"✅ Successfully unlinked {username} from Overseerr."


def user_not_found(identifier: str) -> str:
    return (
        f"❌ No Overseerr user found with identifier: **{identifier}**\n\n"
        "Make sure the user has logged into Overseerr at least once."
    )


def request_success(title: str, is_4k: bool) -> str:
    quality = " in 4K" if is_4k else ""
    return f"✅ **{title}** has been requested{quality}! You'll be notified when it's available."


def request_failed(error: str) -> str:
    return f"❌ Failed to request movie: {error}"


def connection_success(version: str) -> str:
    return f"✅ Connected to Overseerr successfully!\n\n**Version:** {version}"


def connection_failed(error: str) -> str:
    return f"❌ Failed to connect to Overseerr:\n{error}"


def linked_accounts_list(count: int) -> str:
    return f"**Linked Overseerr Accounts ({count}):**"


# Request modal
REQUEST_MODAL_TITLE = "Request Movie on Plex"
REQUEST_QUALITY_LABEL = "Quality (type '4k' for 4K, or leave empty)"
REQUEST_QUALITY_PLACEHOLDER = "Leave empty for 1080p, type '4k' for 4K"


def request_modal_title_with_movie(title: str) -> str:
    return f"Request: {title}"


# /myrequests
MYREQUESTS_TITLE = "📥 Your Movie Requests"


def myrequests_linked_as(username: str) -> str:
    return f"Linked as {username}"


def myrequests_pending(count: int) -> str:
    return f"🟡 Pending ({count})"


def myrequests_approved(count: int) -> str:
    return f"🔵 Approved/Processing ({count})"


def myrequests_available(count: int) -> str:
    return f"🟢 Available ({count})"


def myrequests_showing(shown: int, total: int) -> str:
    return f"Showing {shown} of {total} requests"


# /bully
BULLY_NO_PERMISSION = "❌ You need Administrator permission to use this command."
BULLY_NO_TARGET = "❌ No one is currently being bullied."
BULLY_DISABLED = "✅ Bullying disabled. Everyone can use buttons normally now."
BULLY_STATUS_NONE = "ℹ️ No one is currently being bullied."
BULLY_NO_COOLDOWN = "✅ No active cooldown."


def bully_enabled(user_tag: str, user_id: int) -> str:
    return (
        f"🎯 Bullying enabled for {user_tag} ({user_id})\n\n"
        "They will now need to click buttons 3 times before they work! 😈"
    )


def bully_status_active(user_id: int) -> str:
    return f"🎯 Currently bullying: <@{user_id}> ({user_id})"


def bully_cooldown_status(user_id: int, minutes: int) -> str:
    return f"⏱️ Universal cooldown for <@{user_id}>:\n\n⏰ {minutes} minute(s) remaining"


def bully_cooldown_reset(user_id: int) -> str:
    return f"✅ Reset cooldown for <@{user_id}>.\n\nThey will be bullied again on their next button click! 😈"


def bully_no_cooldown_to_reset(user_id: int) -> str:
    return f"ℹ️ No cooldown to reset for <@{user_id}>."


# Generic
GENERIC_ERROR = "❌ An error occurred processing your request."
