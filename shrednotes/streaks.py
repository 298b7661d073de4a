"""
Practice streaks and heat-maps.

All values are derived from the session history passed in; nothing is stored
between calls. Days are calendar days (a session's datetime is bucketed to
its start of day), and a gap of one day keeps a streak alive.
"""

import logging
from collections import Counter
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .models import (
    PracticeHeatBucket,
    Session,
    SessionInsights,
    StreakResult,
    Trick,
    intensity_band,
)

logger = logging.getLogger(__name__)

MAX_DAY_GAP = 1


def _sessions_with(trick: Trick, sessions: Iterable[Session]) -> List[Session]:
    return [s for s in sessions if s.has_trick(trick)]


def calculate_streak(trick: Trick, sessions: Sequence[Session]) -> StreakResult:
    """
    Current and longest practice streak for a trick.

    The current streak counts sessions from the most recent one backwards
    and stops at the first gap of more than one day. The longest streak is
    the longest such run anywhere in the history. Several sessions on the
    same day each count.

    Args:
        trick: Trick to look for (matched by identity)
        sessions: Full session history, any order

    Returns:
        StreakResult for the trick
    """
    practiced = sorted(_sessions_with(trick, sessions), key=lambda s: s.day, reverse=True)
    if not practiced:
        return StreakResult(current_streak=0, longest_streak=0,
                            last_practiced=None, total_sessions=0)

    current = 0
    previous: Optional[date] = None
    for session in practiced:
        if previous is not None and (previous - session.day).days > MAX_DAY_GAP:
            break
        current += 1
        previous = session.day

    longest = 0
    run = 0
    previous = None
    for session in reversed(practiced):
        if previous is not None and (session.day - previous).days <= MAX_DAY_GAP:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
        previous = session.day
    longest = max(longest, run)

    return StreakResult(
        current_streak=current,
        longest_streak=longest,
        last_practiced=practiced[0].day,
        total_sessions=len(practiced),
    )


def _bucket_days(days: Iterable[date], window_days: int, today: date) -> List[PracticeHeatBucket]:
    if window_days <= 0:
        return []
    start = today - timedelta(days=window_days - 1)
    counts = Counter(d for d in days if start <= d <= today)
    return [
        PracticeHeatBucket(day=day, count=counts.get(day, 0))
        for day in (start + timedelta(days=i) for i in range(window_days))
    ]


def calculate_heatmap(
    trick: Trick,
    sessions: Sequence[Session],
    window_days: int,
    today: Optional[date] = None,
) -> List[PracticeHeatBucket]:
    """
    Per-day practice counts for a trick over a trailing window.

    Args:
        trick: Trick to look for
        sessions: Full session history
        window_days: Number of days, ending today (inclusive)
        today: Last day of the window (default: date.today())

    Returns:
        One bucket per day, oldest first, zero-filled
    """
    today = today or date.today()
    days = (s.day for s in _sessions_with(trick, sessions))
    return _bucket_days(days, window_days, today)


def calculate_session_heatmap(
    sessions: Sequence[Session],
    weeks: int = 12,
    today: Optional[date] = None,
) -> List[PracticeHeatBucket]:
    """Heat-map of all sessions over the trailing `weeks` weeks."""
    today = today or date.today()
    return _bucket_days((s.day for s in sessions), weeks * 7, today)


def heatmap_grid(buckets: Sequence[PracticeHeatBucket], columns: int = 7) -> np.ndarray:
    """
    Lay heat-map intensity bands out as a grid for rendering.

    Buckets fill rows left to right; the last row is padded with zeros.

    Returns:
        Integer array of shape (rows, columns) with values 0..4
    """
    bands = np.array([intensity_band(b.count) for b in buckets], dtype=int)
    rows = -(-len(bands) // columns)
    grid = np.zeros(rows * columns, dtype=int)
    grid[:len(bands)] = bands
    return grid.reshape(rows, columns)


def _longest_run(values: Iterable[int]) -> int:
    """Longest run of consecutive integers in a set of values."""
    ordered = sorted(set(values))
    longest = run = 0
    previous = None
    for value in ordered:
        run = run + 1 if previous is not None and value - previous == 1 else 1
        longest = max(longest, run)
        previous = value
    return longest


def longest_daily_streak(sessions: Sequence[Session]) -> int:
    """Longest run of consecutive calendar days with at least one session."""
    return _longest_run(s.day.toordinal() for s in sessions)


def longest_weekly_streak(sessions: Sequence[Session]) -> int:
    """Longest run of consecutive weeks (Monday start) with at least one session."""
    return _longest_run((s.day.toordinal() - s.day.weekday()) // 7 for s in sessions)


def calculate_session_insights(
    sessions: Sequence[Session],
    today: Optional[date] = None,
    heatmap_weeks: int = 12,
) -> SessionInsights:
    """
    Whole-history statistics for the insights screen.

    Args:
        sessions: Full session history
        today: Reference day for "this month"/"this year" (default: today)
        heatmap_weeks: Weeks covered by the session heat-map

    Returns:
        SessionInsights
    """
    today = today or date.today()
    this_year = [s for s in sessions if s.day.year == today.year]
    this_month = [s for s in this_year if s.day.month == today.month]

    insights = SessionInsights(
        sessions_this_month=len(this_month),
        sessions_this_year=len(this_year),
        seconds_this_month=sum(s.duration_seconds or 0.0 for s in this_month),
        seconds_this_year=sum(s.duration_seconds or 0.0 for s in this_year),
        longest_daily_streak=longest_daily_streak(sessions),
        longest_weekly_streak=longest_weekly_streak(sessions),
        heatmap=calculate_session_heatmap(sessions, heatmap_weeks, today),
    )
    logger.debug("Insights over %d sessions: %s daily / %s weekly streak",
                 len(sessions), insights.longest_daily_streak, insights.longest_weekly_streak)
    return insights
