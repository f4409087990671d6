"""Writing streaks and the rewards they unlock."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from .models import StreakReward, StreakStats, parse_date_key

STREAK_REWARDS: tuple[StreakReward, ...] = (
    StreakReward(3, "3-Day Habit", "You've written for 3 days in a row!", "triangle"),
    StreakReward(7, "Weekly Wordsmith", "A full week of consistent writing.", "square"),
    StreakReward(14, "Fortnight Thinker", "Two weeks straight! Your mind must be clear.", "circle"),
    StreakReward(30, "Monthly Maven", "An entire month of dedication. Incredible!", "star"),
)


def longest_run(days: list[date]) -> int:
    """Longest run of consecutive days in an ascending, duplicate-free list."""
    if not days:
        return 0
    longest = run = 1
    for prev, cur in zip(days, days[1:]):
        run = run + 1 if (cur - prev).days == 1 else 1
        longest = max(longest, run)
    return longest


def current_run(days: set[date], today: date) -> int:
    """Consecutive days ending at ``today``; zero when today has no entry."""
    run = 0
    day = today
    while day in days:
        run += 1
        day -= timedelta(days=1)
    return run


def calculate_streaks(date_keys: Iterable[str], today: date | None = None) -> StreakStats:
    """Current and longest streak over a collection of ``YYYY-MM-DD`` keys.

    Args:
        date_keys: Days that have a non-empty entry. Duplicates are ignored.
        today: Day the current streak ends on. Defaults to the local date.

    Raises:
        ValueError: If a key is not a valid ``YYYY-MM-DD`` date.
    """
    days = {parse_date_key(key) for key in date_keys}
    if not days:
        return StreakStats(0, 0)

    today = today or date.today()
    return StreakStats(
        current_streak=current_run(days, today),
        longest_streak=longest_run(sorted(days)),
    )


def unlocked_rewards(longest_streak: int) -> list[StreakReward]:
    return [reward for reward in STREAK_REWARDS if reward.is_unlocked(longest_streak)]


def next_reward(longest_streak: int) -> StreakReward | None:
    """The first reward not yet reached, or None once all are unlocked."""
    for reward in STREAK_REWARDS:
        if not reward.is_unlocked(longest_streak):
            return reward
    return None
