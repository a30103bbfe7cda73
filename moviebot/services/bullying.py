"""
Press tracking for the one user an admin picked with /bully.

The targeted user's button presses are counted across every button type:
the first two are blocked with a joke, the third goes through and opens a
cooldown window during which every press goes through. Expiry is checked
lazily whenever a tracker is read, so there are no timers to clean up.

State lives in memory only and is lost on restart.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from types import ModuleType
from typing import Callable

from moviebot.core.constants import BULLY_STRIKES_BEFORE_PASS, DEFAULT_BULLY_COOLDOWN_MINUTES

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PressTracker:
    count: int = 0
    # None = never in cooldown (or fully reset)
    cooldown_start: datetime | None = None

    def reset(self) -> None:
        self.count = 0
        self.cooldown_start = None


@dataclass(frozen=True)
class CooldownStatus:
    count: int
    remaining: timedelta

    @property
    def remaining_minutes(self) -> int:
        return math.ceil(self.remaining.total_seconds() / 60)


class BullyingService:
    """
    Universal 3-strike press counter for a single targeted user.

    The clock and message catalog are injected so tests can drive time
    directly and each bot instance owns its own state.
    """

    def __init__(
        self,
        window: timedelta = timedelta(minutes=DEFAULT_BULLY_COOLDOWN_MINUTES),
        clock: Callable[[], datetime] = _utcnow,
        texts: ModuleType | None = None,
    ) -> None:
        self.window = window
        self._clock = clock
        self._texts = texts
        self._target: int | None = None
        self._trackers: dict[int, PressTracker] = {}

    @property
    def target(self) -> int | None:
        return self._target

    def set_target(self, user_id: int | None) -> None:
        # Trackers are keyed by user, not by targeting period: a user who is
        # targeted again later picks up whatever state they left behind.
        self._target = user_id
        if user_id is not None:
            logger.info("Bullying target set to %s", user_id)
        else:
            logger.info("Bullying disabled")

    def is_target(self, user_id: int) -> bool:
        return self._target is not None and user_id == self._target

    def has_tracker(self, user_id: int) -> bool:
        return user_id in self._trackers

    def clear(self) -> None:
        self._trackers.clear()

    def _get_tracker(self, user_id: int, now: datetime) -> PressTracker:
        tracker = self._trackers.get(user_id)
        if tracker is None:
            tracker = PressTracker()
            self._trackers[user_id] = tracker

        if tracker.cooldown_start is not None and now - tracker.cooldown_start > self.window:
            tracker.reset()

        return tracker

    def evaluate(
        self,
        user_id: int,
        action_kind: str,
        subject_id: int | str | None,
        display_name: str,
    ) -> str | None:
        """
        Returns a strike message when the press must be blocked, None to let
        the action proceed.
        """
        if not self.is_target(user_id):
            return None

        now = self._clock()
        tracker = self._get_tracker(user_id, now)

        logger.debug(
            "bully press user=%s action=%s subject=%s count=%s cooldown_start=%s",
            user_id, action_kind, subject_id, tracker.count, tracker.cooldown_start,
        )

        # expiry above already handled "> window", so at exactly the window
        # the press still rides the cooldown
        if (
            tracker.count == 0
            and tracker.cooldown_start is not None
            and now - tracker.cooldown_start <= self.window
        ):
            logger.debug("bully press user=%s in cooldown, allowing", user_id)
            return None

        tracker.count += 1

        if tracker.count >= BULLY_STRIKES_BEFORE_PASS:
            tracker.count = 0
            tracker.cooldown_start = now
            logger.debug("bully press user=%s strike %s, allowing and starting cooldown", user_id, BULLY_STRIKES_BEFORE_PASS)
            self._check_invariant(tracker)
            return None

        self._check_invariant(tracker)
        texts = self._messages()
        if tracker.count == 1:
            message = texts.first_press_message(display_name)
        else:
            message = texts.second_press_message(display_name)
        logger.debug("bully press user=%s strike %s, blocking", user_id, tracker.count)
        return message

    def remaining_cooldown(self, user_id: int) -> timedelta:
        tracker = self._trackers.get(user_id)
        if tracker is None or tracker.cooldown_start is None:
            return timedelta(0)

        elapsed = self._clock() - tracker.cooldown_start
        return max(timedelta(0), self.window - elapsed)

    def status_for_target(self) -> CooldownStatus | None:
        """Cooldown details for the current target, None unless a cooldown is running."""
        if self._target is None:
            return None

        tracker = self._trackers.get(self._target)
        if tracker is None or tracker.cooldown_start is None:
            return None

        remaining = self.remaining_cooldown(self._target)
        if remaining <= timedelta(0):
            return None

        return CooldownStatus(count=tracker.count, remaining=remaining)

    def reset_target(self) -> int:
        if self._target is None:
            return 0

        tracker = self._trackers.get(self._target)
        if tracker is None:
            return 0

        tracker.reset()
        logger.info("Cooldown reset for %s", self._target)
        return 1

    def _messages(self) -> ModuleType:
        if self._texts is None:
            from moviebot.messages.catalog import get_messages
            self._texts = get_messages()
        return self._texts

    @staticmethod
    def _check_invariant(tracker: PressTracker) -> None:
        assert 0 <= tracker.count < BULLY_STRIKES_BEFORE_PASS, f"press count out of range: {tracker.count}"
        assert tracker.cooldown_start is None or tracker.count == 0, "strikes counted during cooldown"
