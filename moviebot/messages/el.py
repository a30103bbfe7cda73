"""All user-facing text in Greek. Names and signatures mirror en.py."""


def _people(count: int, one: str, many: str) -> str:
    return one if count == 1 else many


# Slash command descriptions
COMMAND_MOVIE_DESCRIPTION = "Φτιάξε ποστ για συζήτηση ταινίας."
COMMAND_MOVIE_TITLE_DESCRIPTION = "Τίτλος ταινίας"
COMMAND_WATCHLIST_DESCRIPTION = "Δες τι έχεις δει και τι θέλεις να δεις."
COMMAND_REQUEST_DESCRIPTION = "Ζήτησε ταινία στο Plex και θα σε φτιάξω."
COMMAND_REQUEST_TITLE_DESCRIPTION = "Τίτλος ταινίας για αίτημα"
COMMAND_MYREQUESTS_DESCRIPTION = "Δες τα αιτήματά σου στο Overseerr"
COMMAND_BULLY_DESCRIPTION = "Διαχείριση bullying κουμπιών (μόνο Admin)"
COMMAND_OVERSEERR_DESCRIPTION = "Διαχείριση ενσωμάτωσης Overseerr"

# /movie
MOVIE_CHANNEL_NOT_FOUND = "❌ Ώπα, που σκατά πήγε το φόρουμ?"
MOVIE_NOT_FOUND = "❌ Δεν βρήκα την ταινία, πάμε πάλι."
MOVIE_CREATION_ERROR = "❌ Έλουσα, πάμε πάλι."


def movie_created(title: str, url: str) -> str:
    return f"✅ Έφτιαξα συζήτηση **{title}**!\n{url}"


EMBED_RELEASE_YEAR = "📅 Έτος Κυκλοφορίας"
EMBED_RATING = "⭐ Βαθμολογία"
EMBED_RUNTIME = "⏱️ Διάρκεια"
EMBED_CAST = "🎭 Ηθοποιοί"
EMBED_DIRECTOR = "🎬 Σκηνοθέτης"
EMBED_GENRES = "🎪 Είδη"
EMBED_FOOTER_DEFAULT = "Δεδομένα από TMDB"
EMBED_FOOTER_AVAILABLE = "🟢 Διαθέσιμο στο Plex | Δεδομένα από TMDB"
EMBED_FOOTER_PENDING = "🟡 Εκκρεμεί Αίτημα | Δεδομένα από TMDB"

# /mywatchlist
WATCHED_MOVIES_HEADER = "🎬 Τι έχεις δει?"
NO_WATCHED_MOVIES = "Δεν έχεις δει τίποτα, ουάου."
WATCHLIST_HEADER = "📌 Θέλω να το δω!"
NO_WATCHLIST_MOVIES = "Δεν έχεις ταινίες στο watchlist ρε στόκε"
WATCHLIST_FETCH_ERROR = "❌ Προέκυψε σφάλμα κατά την ανάκτηση του watchlist σου."


def watchlist_title(username: str) -> str:
    return f"{username}'s Movie Lists"


def and_more(count: int) -> str:
    return f"_...και {count} ακόμα_"


# Delete button
DELETE_ONLY_AUTHOR = "❌ Μην είσαι τέτοιος, δεν είναι δικό σου ποστ."
DELETE_CONFIRMATION = "⚠️ Σίγουρα ρε; Δεν μπορώ να το ξε-κάνω."
DELETE_CANCELLED = "✅ Οκ, δεν στο διαγράφω."
DELETING_POST = "🗑️ Διαγράφω το post..."
DELETE_ERROR = "❌ Έλουσα με την διαγραφή."


# Watched button
def removed_from_watched(count: int) -> str:
    return f"✅ Δεν πειράζει, όλοι κάνουμε λάθη. ({count} {_people(count, 'μάγκας το έχει δει.', 'μάγκες το έχουν δει')})"


def marked_as_watched(count: int) -> str:
    return f"✅ Οκ το έχεις δει, χάρηκες? ({count} {_people(count, 'μάγκας το έχει δει.', 'μάγκες το έχουν δει')})"


WATCHED_ERROR = "❌ Έλουσα με την ενημέρωση, πάμε πάλι."


# Want-to-watch button
def removed_from_watchlist(count: int) -> str:
    return f"📌 Το σούταρα απο το watchlist σου. ({count} {_people(count, 'μάγκας θέλει να το δει', 'μάγκες θέλουν να το δουν.')})"


def added_to_watchlist(count: int) -> str:
    return f"📌 Το έβαλα στο watchlist σου! ({count} {_people(count, 'μάγκας θέλει να το δει!', 'μάγκες θέλουν να το δουν!')})"


def watch_party_threshold_reached(user_mentions: str, count: int) -> str:
    return (
        f"🎉 {user_mentions} - **{count} {_people(count, 'μάγκας θέλει να το δει!', 'μάγκες θελουν να το δουν!')} **\n\n"
        'Κλικ στο "Οργάνωσε Ταινιοπάρτυ" για να φτιάξεις ταινιοπάρτυ!'
    )


WATCHLIST_ERROR = "❌ Έλουσα με την ενημέρωση watchlist. Πάμε πάλι."

# Watch party button
WATCH_PARTY_ALREADY_EXISTS = "❌ Υπάρχει ήδη ταινιοπάρτυ για αυτή την ταινία, τσέκαρε το θρεντ!"
WATCH_PARTY_EVENT_LOCATION = "Plex / Discord"
WATCH_PARTY_ERROR = "❌ Έλουσα με την δημιουργία ταινιοπάρτυ, πάμε πάλι."


def watch_party_created(movie_title: str, event_url: str) -> str:
    return (
        "🎉 **Έφτιαξα ταινιοπάρτυ!**\n\n"
        "Τσέκαρε το θρεντ για λεπτομέρειες.\n"
        f"Ιβεντ: {event_url}"
    )


def watch_party_coordination(movie_title: str, user_mentions: str) -> str:
    return (
        f"🎉 **Ταινιοπάρτυ για {movie_title}**!\n\n"
        f"{user_mentions} θέλουν να το δουν!\n\n"
        "**Έλα, συζητείστε:**\n"
        "• Πότε?\n"
        "• Plex ή Discord Screenshare?\n"
        "• Προτιμήσεις?\n\n"
        "Πάτα ✅ αν θα συμμετέχεις!"
    )


def watch_party_event_name(movie_title: str) -> str:
    return f"Ταινιοπάρτυ: {movie_title}"


def watch_party_event_description(count: int, thread_id: int) -> str:
    return (
        "⚠️ ΠΡΟΣΩΡΙΝΟ - Κάντε έντιτ ανάλογα!\n\n"
        f"{count} μάγκες θέλουν να το δουν!\n\n"
        f"Κανονίστε για την ώρα στο:\n<#{thread_id}>"
    )


# Button labels
BUTTON_WATCHED = "Το έχω δει"
BUTTON_WANT_TO_WATCH = "Θέλω να το δωω"
BUTTON_DELETE = "Διαγραφή"
BUTTON_IMDB = "IMDB"
BUTTON_CONFIRM_DELETE = "ΝΑΙ"
BUTTON_CANCEL_DELETE = "Άκυρο"
BUTTON_REQUEST_ON_PLEX = "Ζήτησε στο Plex"
BUTTON_REQUEST_PENDING = "Έχει ζητηθεί"
BUTTON_AVAILABLE_ON_PLEX = "Διαθέσιμο στο Plex"


def button_watch_party(count: int) -> str:
    return f"Οργάνωσε ταινιοπάρτυ ({count} ενδιαφέρονται)"


# Strike messages
def first_press_message(username: str) -> str:
    return f"{username}, δικέ μου, συγκατάθεση ξέρεις τι σημαίνει;"


def second_press_message(username: str) -> str:
    return f"{username}, δες μία αν έρχομαι ρε!"


# Overseerr
NOT_LINKED = "❌ Δεν έχεις συνδέσει τον λογαριασμό σου στο Plex! Ζήτα από έναν admin να συνδέσει τον λογαριασμό σου."
LINK_FAILED = "❌ Αποτυχία δημιουργίας σύνδεσης. Δοκίμασε ξανά."
UNLINK_FAILED = "❌ Αποτυχία αφαίρεσης σύνδεσης. Δοκίμασε ξανά."
ALREADY_AVAILABLE = "🟢 Αυτή η ταινία είναι ήδη διαθέσιμη στο Plex!"
ALREADY_REQUESTED = "🟡 Αυτή η ταινία έχει ήδη ζητηθεί. Θα προστεθεί σύντομα!"
NO_REQUESTS = (
    "Δεν έχεις ζητήσει καμία ταινία ακόμα. "
    "Κάνε κλικ στο κουμπί 'Ζήτησε στο Plex' σε οποιοδήποτε post ταινίας!"
)
NOT_CONFIGURED = "❌ Το Overseerr δεν είναι ρυθμισμένο. Όρισε τα OVERSEERR_URL και OVERSEERR_API_KEY στο .env αρχείο σου."
NO_LINKS = "Κανένας χρήστης δεν είναι συνδεδεμένος με λογαριασμό Overseerr."


def not_linked_user(username: str) -> str:
    return f"❌ Ο {username} δεν είναι συνδεδεμένος με λογαριασμό στο Overseerr."


def already_linked(username: str, overseerr_username: str) -> str:
    return f"❌ Ο {username} είναι ήδη συνδεδεμένος με τον λογαριασμό Overseerr: **{overseerr_username}**"


def link_success(username: str, overseerr_username: str) -> str:
    return f"✅ Επιτυχής σύνδεση του {username} με τον λογαριασμό Overseerr: **{overseerr_username}**"


def unlink_success(username: str) -> str:
    return f"✅ Επιτυχής αποσύνδεση του {username} από το Overseerr."


def user_not_found(identifier: str) -> str:
    return (
        f"❌ Δεν βρέθηκε χρήστης Overseerr με αναγνωριστικό: **{identifier}**\n\n"
        "Σιγουρέψου ότι ο χρήστης έχει συνδεθεί στο Overseerr τουλάχιστον μία φορά."
    )


def request_success(title: str, is_4k: bool) -> str:
    quality = " σε 4K" if is_4k else ""
    return f"✅ Η ταινία **{title}** ζητήθηκε{quality}! Θα ειδοποιηθείς όταν είναι διαθέσιμη."


def request_failed(error: str) -> str:
    return f"❌ Αποτυχία αιτήματος: {error}"


def connection_success(version: str) -> str:
    return f"✅ Επιτυχής σύνδεση με το Overseerr!\n\n**Έκδοση:** {version}"


def connection_failed(error: str) -> str:
    return f"❌ Αποτυχία σύνδεσης με το Overseerr:\n{error}"


def linked_accounts_list(count: int) -> str:
    return f"**Συνδεδεμένοι Λογαριασμοί Overseerr ({count}):**"


# Request modal
REQUEST_MODAL_TITLE = "Ζήτησε Ταινία στο Plex"
REQUEST_QUALITY_LABEL = "Ποιότητα (γράψε '4k' για 4K, ή άφησε κενό)"
REQUEST_QUALITY_PLACEHOLDER = "Άφησε κενό για 1080p, γράψε '4k' για 4K"


def request_modal_title_with_movie(title: str) -> str:
    return f"Αίτημα: {title}"


# /myrequests
MYREQUESTS_TITLE = "📥 Τα Αιτήματά σου"


def myrequests_linked_as(username: str) -> str:
    return f"Συνδεδεμένος ως {username}"


def myrequests_pending(count: int) -> str:
    return f"🟡 Εκκρεμούν ({count})"


def myrequests_approved(count: int) -> str:
    return f"🔵 Εγκεκριμένα/Επεξεργασία ({count})"


def myrequests_available(count: int) -> str:
    return f"🟢 Διαθέσιμα ({count})"


def myrequests_showing(shown: int, total: int) -> str:
    return f"Εμφανίζονται {shown} από {total} αιτήματα"


# /bully
BULLY_NO_PERMISSION = "❌ Χρειάζεσαι δικαιώματα Administrator για αυτή την εντολή."
BULLY_NO_TARGET = "❌ Κανείς δεν τρώει bullying αυτή τη στιγμή."
BULLY_DISABLED = "✅ Το bullying απενεργοποιήθηκε. Όλα τα κουμπιά δουλεύουν κανονικά."
BULLY_STATUS_NONE = "ℹ️ Κανείς δεν τρώει bullying αυτή τη στιγμή."
BULLY_NO_COOLDOWN = "✅ Δεν υπάρχει ενεργό cooldown."


def bully_enabled(user_tag: str, user_id: int) -> str:
    return (
        f"🎯 Το bullying ενεργοποιήθηκε για τον {user_tag} ({user_id})\n\n"
        "Τώρα θα πρέπει να κάνει κλικ 3 φορές για να δουλέψουν τα κουμπιά! 😈"
    )


def bully_status_active(user_id: int) -> str:
    return f"🎯 Αυτή τη στιγμή τρώει bullying: <@{user_id}> ({user_id})"


def bully_cooldown_status(user_id: int, minutes: int) -> str:
    return f"⏱️ Καθολικό cooldown για τον <@{user_id}>:\n\n⏰ Απομένουν {minutes} λεπτά"


def bully_cooldown_reset(user_id: int) -> str:
    return f"✅ Το cooldown για τον <@{user_id}> μηδενίστηκε.\n\nΘα φάει bullying ξανά στο επόμενο κλικ! 😈"


def bully_no_cooldown_to_reset(user_id: int) -> str:
    return f"ℹ️ Δεν υπάρχει cooldown για μηδενισμό για τον <@{user_id}>."


# Generic
GENERIC_ERROR = "❌ Προέκυψε σφάλμα κατά την επεξεργασία του αιτήματός σου."
