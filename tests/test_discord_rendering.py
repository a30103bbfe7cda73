"""
Rendering of embeds and button rows, without a Discord connection.
"""
from __future__ import annotations

from types import SimpleNamespace

import discord
import pytest

from moviebot.bot.embeds import NA, movie_embed, movie_from_message, requests_embed, watchlist_embed
from moviebot.bot.keyboards import confirm_delete_view, extract_external_link, movie_buttons_view
from moviebot.core.constants import CONFIRM_VIEW_TIMEOUT_SECONDS
from moviebot.db.models import AccountLink, WatchlistEntry
from moviebot.integrations.overseerr import Availability, MediaRequest
from moviebot.integrations.tmdb import MovieDetails
from moviebot.services.buttons import reconcile_buttons

IMDB = "https://www.imdb.com/title/tt0137523"

FIGHT_CLUB = MovieDetails(
    movie_id=550,
    title="Fight Club",
    year="1999",
    rating=8.4,
    plot="An insomniac office worker...",
    genres=["Drama"],
    genre_ids=[18],
    cast=["Edward Norton", "Brad Pitt"],
    director="David Fincher",
    runtime=139,
    poster_url="https://image.tmdb.org/t/p/w500/poster.jpg",
    imdb_url=IMDB,
)

BARE = MovieDetails(movie_id=9000, title="Obscure Short", year=None, rating=None, plot="No plot available.")


def _field(embed, name):
    return next(f.value for f in embed.fields if f.name == name)


class TestMovieEmbed:
    """Tests for the movie post embed."""

    def test_fields(self, texts):
        """Test that details land in the expected fields."""
        embed = movie_embed(FIGHT_CLUB, None, texts)
        assert embed.title == "Fight Club"
        assert _field(embed, texts.EMBED_RELEASE_YEAR) == "1999"
        assert _field(embed, texts.EMBED_RATING) == "8.4/10"
        assert _field(embed, texts.EMBED_RUNTIME) == "139 min"
        assert _field(embed, texts.EMBED_CAST) == "Edward Norton, Brad Pitt"
        assert embed.thumbnail.url == FIGHT_CLUB.poster_url
        assert embed.footer.text == texts.EMBED_FOOTER_DEFAULT

    def test_missing_values(self, texts):
        """Test that missing details show N/A."""
        embed = movie_embed(BARE, None, texts)
        for name in (texts.EMBED_RELEASE_YEAR, texts.EMBED_RATING, texts.EMBED_RUNTIME, texts.EMBED_DIRECTOR):
            assert _field(embed, name) == NA

    @pytest.mark.parametrize(
        ("availability", "footer"),
        [
            (Availability(available=True), "EMBED_FOOTER_AVAILABLE"),
            (Availability(requested=True), "EMBED_FOOTER_PENDING"),
            (Availability(), "EMBED_FOOTER_DEFAULT"),
        ],
    )
    def test_footer_follows_availability(self, texts, availability, footer):
        """Test the availability footer."""
        assert movie_embed(FIGHT_CLUB, availability, texts).footer.text == getattr(texts, footer)

    def test_read_back_from_message(self, texts):
        """Test that title and year can be recovered from a posted embed."""
        message = SimpleNamespace(embeds=[movie_embed(FIGHT_CLUB, None, texts)])
        assert movie_from_message(message, texts) == ("Fight Club", "1999")

        message = SimpleNamespace(embeds=[movie_embed(BARE, None, texts)])
        assert movie_from_message(message, texts) == ("Obscure Short", None)

    def test_read_back_without_embed(self, texts):
        """Test the fallback when the message has no embed."""
        assert movie_from_message(SimpleNamespace(embeds=[]), texts) == ("Unknown", None)
        assert movie_from_message(None, texts) == ("Unknown", None)


class TestListEmbeds:
    """Tests for /mywatchlist and /myrequests embeds."""

    def test_watchlist_sections(self, texts):
        """Test the two sections and the overflow line."""
        watched = [
            WatchlistEntry(user_id=1, movie_id=i, movie_title=f"Movie {i}", movie_year="2000", status="watched")
            for i in range(12)
        ]
        embed = watchlist_embed("bob", None, watched, [], texts)
        watched_text = _field(embed, texts.WATCHED_MOVIES_HEADER)
        assert watched_text.count("•") == 10
        assert texts.and_more(2) in watched_text
        assert _field(embed, texts.WATCHLIST_HEADER) == texts.NO_WATCHLIST_MOVIES

    def test_requests_grouped_by_status(self, texts):
        """Test that requests are grouped into pending, approved and available."""
        requests = [
            MediaRequest(request_id=1, status=2, movie_id=550, title="Fight Club"),
            MediaRequest(request_id=2, status=2, movie_id=603, title=None, is_4k=True),
            MediaRequest(request_id=3, status=3, movie_id=604, title="Reloaded"),
            MediaRequest(request_id=4, status=4, movie_id=605, title="Revolutions"),
        ]
        link = AccountLink(platform_user_id=1, external_user_id=7, external_username="Nikos")
        embed = requests_embed(requests, link, texts)

        assert [f.name for f in embed.fields] == [
            texts.myrequests_pending(2),
            texts.myrequests_approved(1),
            texts.myrequests_available(1),
        ]
        assert "(4K)" in embed.fields[0].value
        assert "Unknown" in embed.fields[0].value
        assert embed.footer.text == texts.myrequests_linked_as("Nikos")
        assert embed.description is None

    def test_requests_overflow(self, texts):
        """Test that hidden requests are counted in the description."""
        requests = [MediaRequest(request_id=i, status=2, movie_id=i, title=f"M{i}") for i in range(8)]
        requests.append(MediaRequest(request_id=99, status=1, movie_id=99, title="Declined"))
        link = AccountLink(platform_user_id=1, external_user_id=7, plex_username="plexy")
        embed = requests_embed(requests, link, texts)
        assert embed.description == texts.myrequests_showing(5, 9)


class TestButtonRows:
    """Tests for rendering reconciled buttons."""

    @pytest.mark.asyncio
    async def test_movie_buttons(self, texts):
        """Test that every spec renders as one button in the same order."""
        specs = reconcile_buttons(
            550, 42,
            external_link_url=IMDB,
            availability=Availability(available=True),
            interest_count=0,
            party_exists=False,
            threshold=3,
            request_integration_active=True,
            texts=texts,
        )
        view = movie_buttons_view(specs)
        buttons = view.children

        assert [b.label for b in buttons] == [s.label for s in specs]
        assert buttons[0].style is discord.ButtonStyle.success
        assert buttons[2].style is discord.ButtonStyle.danger
        assert buttons[3].style is discord.ButtonStyle.link
        assert buttons[3].url == IMDB
        assert buttons[4].disabled is True
        assert buttons[4].style is discord.ButtonStyle.secondary
        assert view.timeout is None

    @pytest.mark.asyncio
    async def test_confirm_delete(self, texts):
        """Test the confirmation buttons carry the requesting user."""
        view = confirm_delete_view(42, texts)
        assert [b.custom_id for b in view.children] == ["confirm_delete:42", "cancel_delete:42"]

    @pytest.mark.asyncio
    async def test_confirm_delete_expires(self, texts):
        """Test that the ephemeral confirmation is not kept for the whole process lifetime."""
        view = confirm_delete_view(42, texts)
        assert view.timeout == CONFIRM_VIEW_TIMEOUT_SECONDS

    def test_extract_external_link(self):
        """Test that the link survives a rebuild by reading it off the message."""
        message = SimpleNamespace(components=[
            SimpleNamespace(children=[
                SimpleNamespace(url=None, custom_id="watched:42:550"),
                SimpleNamespace(url=IMDB, custom_id=None),
            ])
        ])
        assert extract_external_link(message) == IMDB

    def test_extract_external_link_missing(self):
        """Test messages without a link button."""
        assert extract_external_link(None) is None
        assert extract_external_link(SimpleNamespace(components=[])) is None
