"""Unit tests for button custom id parsing."""

import pytest

from moviebot.bot.parsing import MOVIE_ACTIONS, USER_ACTIONS, ParsedCustomId, make_custom_id, parse_custom_id


class TestMakeCustomId:
    """Tests for building custom ids."""

    def test_movie_action(self):
        """Test the three-part form."""
        assert make_custom_id("watched", 123, 550) == "watched:123:550"

    def test_user_action(self):
        """Test the two-part form."""
        assert make_custom_id("confirm_delete", 123) == "confirm_delete:123"

    def test_movie_action_needs_movie(self):
        """Test that a movie action without movie id is rejected."""
        with pytest.raises(ValueError):
            make_custom_id("watchlist", 123)

    def test_unknown_action(self):
        """Test that unknown actions are rejected."""
        with pytest.raises(ValueError):
            make_custom_id("explode", 123, 550)

    def test_fits_discord_limit(self):
        """Test that realistic ids stay under Discord's 100-character limit."""
        snowflake = 2**63 - 1
        for action in MOVIE_ACTIONS:
            assert len(make_custom_id(action, snowflake, 99999999)) <= 100


class TestParseCustomId:
    """Tests for reading custom ids back."""

    @pytest.mark.parametrize("action", sorted(MOVIE_ACTIONS))
    def test_movie_actions(self, action):
        """Test every movie action parses."""
        assert parse_custom_id(f"{action}:123:550") == ParsedCustomId(action=action, user_id=123, movie_id=550)

    @pytest.mark.parametrize("action", sorted(USER_ACTIONS))
    def test_user_actions(self, action):
        """Test every user action parses."""
        assert parse_custom_id(f"{action}:123") == ParsedCustomId(action=action, user_id=123)

    @pytest.mark.parametrize(
        "custom_id",
        [
            "",
            "watched",
            "watched:123",
            "watched:123:550:1",
            "watched:abc:550",
            "watched:123:-5",
            "confirm_delete:123:550",
            "confirm_delete:",
            "available:550",
            "pending:550",
            "unknown:1:2",
        ],
    )
    def test_rejects_malformed(self, custom_id):
        """Test that malformed or foreign ids read as None."""
        assert parse_custom_id(custom_id) is None

    def test_none_is_rejected(self):
        """Test that a missing custom id reads as None."""
        assert parse_custom_id(None) is None
