"""Unit tests for the movie post button set."""

import itertools

import pytest

from moviebot.integrations.overseerr import Availability
from moviebot.services.buttons import ButtonRole, reconcile_buttons

MOVIE_ID = 550
AUTHOR_ID = 42
IMDB = "https://www.imdb.com/title/tt0137523/"

AVAILABILITIES = [
    None,
    Availability(),
    Availability(available=True),
    Availability(requested=True),
    Availability(requested=True, processing=True),
]


def build(texts, **overrides):
    kwargs = dict(
        external_link_url=IMDB,
        availability=None,
        interest_count=0,
        party_exists=False,
        threshold=3,
        request_integration_active=False,
        texts=texts,
    )
    kwargs.update(overrides)
    return reconcile_buttons(MOVIE_ID, AUTHOR_ID, **kwargs)


def roles(buttons):
    return [b.role for b in buttons]


class TestButtonOrder:
    """Tests for the fixed order of the button row."""

    def test_base_set(self, texts):
        """Test that a fresh post gets the trio plus the IMDB link."""
        buttons = build(texts)
        assert roles(buttons) == [
            ButtonRole.WATCHED,
            ButtonRole.INTEREST,
            ButtonRole.DELETE,
            ButtonRole.EXTERNAL_LINK,
        ]

    def test_without_external_link(self, texts):
        """Test that a movie without an IMDB id has no link button."""
        buttons = build(texts, external_link_url=None)
        assert roles(buttons) == [ButtonRole.WATCHED, ButtonRole.INTEREST, ButtonRole.DELETE]

    def test_custom_ids_carry_author_and_movie(self, texts):
        """Test the custom ids of the action buttons."""
        buttons = build(texts, interest_count=3)
        ids = {b.role: b.custom_id for b in buttons}
        assert ids[ButtonRole.WATCHED] == "watched:42:550"
        assert ids[ButtonRole.INTEREST] == "watchlist:42:550"
        assert ids[ButtonRole.DELETE] == "delete:42:550"
        assert ids[ButtonRole.ORGANIZE_PARTY] == "watch_party:42:550"

    def test_link_button_has_url_only(self, texts):
        """Test that the link button carries a URL and no custom id."""
        link = build(texts)[3]
        assert link.url == IMDB
        assert link.custom_id is None
        assert link.label == texts.BUTTON_IMDB

    def test_result_is_immutable(self, texts):
        """Test that the result is a tuple."""
        assert isinstance(build(texts), tuple)

    def test_same_state_same_buttons(self, texts):
        """Test that rebuilding without a state change gives an identical row."""
        state = dict(interest_count=3, request_integration_active=True, availability=Availability(requested=True))
        assert build(texts, **state) == build(texts, **state)


class TestRequestButton:
    """Tests for the availability / request button."""

    def test_hidden_when_integration_inactive(self, texts):
        """Test that no request button shows without Overseerr."""
        buttons = build(texts, availability=Availability(available=True))
        assert ButtonRole.REQUEST not in roles(buttons)

    def test_hidden_when_availability_unknown(self, texts):
        """Test that no request button shows when status is unknown."""
        buttons = build(texts, request_integration_active=True, availability=None)
        assert ButtonRole.REQUEST not in roles(buttons)

    def test_requestable(self, texts):
        """Test the enabled request button."""
        button = build(texts, request_integration_active=True, availability=Availability())[-1]
        assert button.role is ButtonRole.REQUEST
        assert button.enabled
        assert button.label == texts.BUTTON_REQUEST_ON_PLEX
        assert button.custom_id == "request:42:550"

    def test_available(self, texts):
        """Test the disabled available button."""
        button = build(texts, request_integration_active=True, availability=Availability(available=True))[-1]
        assert button.role is ButtonRole.REQUEST
        assert not button.enabled
        assert button.label == texts.BUTTON_AVAILABLE_ON_PLEX
        assert button.custom_id == "available:550"

    @pytest.mark.parametrize(
        "availability",
        [Availability(requested=True), Availability(processing=True), Availability(requested=True, processing=True)],
    )
    def test_pending(self, texts, availability):
        """Test the disabled pending button."""
        button = build(texts, request_integration_active=True, availability=availability)[-1]
        assert not button.enabled
        assert button.label == texts.BUTTON_REQUEST_PENDING
        assert button.custom_id == "pending:550"

    def test_available_wins_over_requested(self, texts):
        """Test that an available movie never shows as pending."""
        button = build(
            texts,
            request_integration_active=True,
            availability=Availability(available=True, requested=True),
        )[-1]
        assert button.label == texts.BUTTON_AVAILABLE_ON_PLEX


class TestOrganizePartyButton:
    """Tests for the organize-party button."""

    def test_hidden_below_threshold(self, texts):
        """Test that the button needs enough interest."""
        assert ButtonRole.ORGANIZE_PARTY not in roles(build(texts, interest_count=2))

    def test_shown_at_threshold(self, texts):
        """Test that the button appears at the threshold with the count in its label."""
        buttons = build(texts, interest_count=3)
        assert buttons[-1].role is ButtonRole.ORGANIZE_PARTY
        assert buttons[-1].label == texts.button_watch_party(3)

    def test_shown_above_threshold(self, texts):
        """Test that the button stays when interest grows."""
        buttons = build(texts, interest_count=7)
        assert buttons[-1].label == texts.button_watch_party(7)

    def test_hidden_when_party_exists(self, texts):
        """Test that an active party hides the button."""
        assert ButtonRole.ORGANIZE_PARTY not in roles(build(texts, interest_count=5, party_exists=True))

    def test_dropped_when_row_is_full(self, texts):
        """Test that link plus request button leave no room for the party button."""
        buttons = build(texts, interest_count=3, request_integration_active=True, availability=Availability())
        assert roles(buttons) == [
            ButtonRole.WATCHED,
            ButtonRole.INTEREST,
            ButtonRole.DELETE,
            ButtonRole.EXTERNAL_LINK,
            ButtonRole.REQUEST,
        ]

    def test_available_with_link_fills_row(self, texts):
        """Test that the disabled available button also takes the last slot."""
        buttons = build(
            texts,
            interest_count=3,
            request_integration_active=True,
            availability=Availability(available=True),
        )
        assert len(buttons) == 5
        assert buttons[-1].label == texts.BUTTON_AVAILABLE_ON_PLEX

    def test_fits_with_request_and_no_link(self, texts):
        """Test that the party button takes the slot a missing link leaves."""
        buttons = build(
            texts,
            external_link_url=None,
            interest_count=3,
            request_integration_active=True,
            availability=Availability(),
        )
        assert roles(buttons)[3:] == [ButtonRole.REQUEST, ButtonRole.ORGANIZE_PARTY]

    def test_fits_with_link_only(self, texts):
        """Test the link and party buttons together without Overseerr."""
        buttons = build(texts, interest_count=3)
        assert roles(buttons)[3:] == [ButtonRole.EXTERNAL_LINK, ButtonRole.ORGANIZE_PARTY]


class TestRowCap:
    """The row never exceeds five buttons."""

    @pytest.mark.parametrize(
        ("link", "availability", "active", "count", "party"),
        list(itertools.product([IMDB, None], AVAILABILITIES, [True, False], [0, 3, 10], [True, False])),
    )
    def test_never_more_than_five(self, texts, link, availability, active, count, party):
        """Test every combination stays within one row and keeps its order."""
        buttons = build(
            texts,
            external_link_url=link,
            availability=availability,
            request_integration_active=active,
            interest_count=count,
            party_exists=party,
        )
        assert 3 <= len(buttons) <= 5
        assert roles(buttons)[:3] == [ButtonRole.WATCHED, ButtonRole.INTEREST, ButtonRole.DELETE]
        order = list(ButtonRole)
        indices = [order.index(r) for r in roles(buttons)]
        assert indices == sorted(indices)
