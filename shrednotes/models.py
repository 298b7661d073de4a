"""
Data model for the Shrednotes trick engine.

Everything here is a read-only value: the catalog and session history are
handed in by the host app, and every result (candidates, streaks, heat-map
buckets) is recomputed on demand and never persisted.

Types:
    TrickType: Trick category enumeration (display strings as values)
    Trick: One catalog entry (name, type, difficulty)
    ScoredCandidate: A catalog trick scored against a note
    Session: One historical skate session
    SummaryInput: Arguments of a single summarization call
    StreakResult: Current/longest streak for a trick
    PracticeHeatBucket: Per-day practice count
    SessionInsights: Whole-history practice statistics
"""

from __future__ import annotations
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class TrickType(Enum):
    """Trick category. Values match the catalog's stored strings."""
    BASIC = "Basic"
    AIR = "Air"
    FLIP = "Flip"
    SHOVE_IT = "Shove It"
    GRIND = "Grind"
    SLIDE = "Slide"
    TRANSITION = "Transition"
    FOOTPLANT = "Footplant"
    BALANCE = "Balance"
    MISC = "Misc"


# Raw spellings seen in stored catalogs, keyed by their squashed form
_TRICK_TYPE_ALIASES: Dict[str, TrickType] = {
    "basic": TrickType.BASIC,
    "air": TrickType.AIR,
    "flip": TrickType.FLIP,
    "shoveit": TrickType.SHOVE_IT,
    "shuvit": TrickType.SHOVE_IT,
    "shuv": TrickType.SHOVE_IT,
    "grind": TrickType.GRIND,
    "slide": TrickType.SLIDE,
    "transition": TrickType.TRANSITION,
    "footplant": TrickType.FOOTPLANT,
    "balance": TrickType.BALANCE,
    "misc": TrickType.MISC,
}


def parse_trick_type(value: Optional[str]) -> Optional[TrickType]:
    """
    Parse a stored trick-type string.

    Exact enum values are accepted first ("Shove It"). Anything else is
    squashed (lowercase, no spaces, dashes or underscores) and looked up in
    the explicit alias table, so "shuvit", "SHOVE_IT" and "shove-it" all map
    to TrickType.SHOVE_IT.

    Args:
        value: Raw type string from a catalog file

    Returns:
        The TrickType, or None when the value is unknown
    """
    if not value:
        return None
    try:
        return TrickType(value)
    except ValueError:
        pass
    squashed = re.sub(r"[\s_\-]+", "", value.lower())
    return _TRICK_TYPE_ALIASES.get(squashed)


@dataclass(frozen=True)
class Trick:
    """A catalog trick. The core only ever reads these."""
    name: str
    type: TrickType
    difficulty: int = 1
    id: Optional[str] = None

    @property
    def key(self) -> str:
        """Identity used for deduplication and session membership."""
        return self.id if self.id else self.name.lower()


@dataclass(frozen=True)
class ScoredCandidate:
    """A catalog trick with its match score for one note."""
    trick: Trick
    score: float

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.trick.name,
            "type": self.trick.type.value,
            "difficulty": self.trick.difficulty,
            "score": round(self.score, 4),
        }


@dataclass(frozen=True)
class Session:
    """
    One skate session from the journal history.

    Attributes:
        date: When the session happened (date or datetime)
        note: Free-text note the skater wrote
        tricks: Tricks practiced in the session
        duration_seconds: Workout duration, if one was recorded
    """
    date: Union[date, datetime]
    note: str = ""
    tricks: Tuple[Trick, ...] = ()
    duration_seconds: Optional[float] = None

    @property
    def day(self) -> date:
        """Calendar day of the session (start-of-day bucket)."""
        if isinstance(self.date, datetime):
            return self.date.date()
        return self.date

    def has_trick(self, trick: Trick) -> bool:
        return any(t.key == trick.key for t in self.tricks)


@dataclass(frozen=True)
class SummaryInput:
    """Arguments of one summarize call."""
    note_text: str
    landed_tricks: Tuple[Trick, ...]
    session_date: date


@dataclass(frozen=True)
class StreakResult:
    """Practice streak for a single trick."""
    current_streak: int
    longest_streak: int
    last_practiced: Optional[date]
    total_sessions: int


def intensity_band(count: int) -> int:
    """Display band for a heat-map cell: 0, 1, 2, 3 or 4 (for 4 and more)."""
    if count <= 0:
        return 0
    return min(count, 4)


@dataclass(frozen=True)
class PracticeHeatBucket:
    """Practice count for one calendar day."""
    day: date
    count: int

    @property
    def intensity(self) -> int:
        return intensity_band(self.count)


@dataclass(frozen=True)
class SessionInsights:
    """Statistics across the whole session history."""
    sessions_this_month: int
    sessions_this_year: int
    seconds_this_month: float
    seconds_this_year: float
    longest_daily_streak: int
    longest_weekly_streak: int
    heatmap: List[PracticeHeatBucket] = field(default_factory=list)
