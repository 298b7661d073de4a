"""
Trick matching and scoring for live suggestions.

Scores every catalog trick against the note the skater is typing and returns
the best few. Runs on each (debounced) keystroke, so it is a plain function
over its inputs with no caching and no shared state.

Scoring per trick:
    1. Normalize note words W and trick-name words T
    2. Directional phrase bonus (+5): name starts with "fs "/"bs " and the
       whole normalized name occurs in the joined note
    3. Per-word matching: each note word (len > 1) consumes the first
       unconsumed equal trick word (+2), with +1 when the match keeps the
       trick's word order relative to the previous match
    4. Direction tokens: a raw "fs"/"bs" followed by the rest of the trick
       name counts as the match for the first trick word. Otherwise it
       consumes the first unconsumed trick word written with the same
       direction ("fs" normalizes to the one-letter "f", which step 3 skips)
    5. Completion bonus (+3) when every trick word matched
    6. Drop zeros, sort by (score desc, shorter name), keep the top 5

Usage:
    candidates = match_tricks("landed some kickflips", catalog)
    for c in candidates:
        print(c.trick.name, c.score)
"""

import logging
from typing import List, Optional, Sequence, Set

from .models import ScoredCandidate, Trick
from .normalizer import normalize_trick_name, normalize_word, tokenize_words

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 5

DIRECTION_PREFIXES = ("fs ", "bs ")
DIRECTION_TOKENS = frozenset({"fs", "bs"})

PHRASE_BONUS = 5
WORD_MATCH_SCORE = 2
ORDER_BONUS = 1
COMPLETION_BONUS = 3


class _WordMatcher:
    """Consumes trick-name words for one (note, trick) pair."""

    def __init__(self, trick_words: List[str], raw_trick_words: List[str]):
        self.trick_words = trick_words
        self.raw_trick_words = raw_trick_words
        self.consumed: Set[int] = set()
        self.last_index: Optional[int] = None
        self.score = 0

    def take(self, index: int) -> None:
        self.score += WORD_MATCH_SCORE
        if self.last_index is not None and index > self.last_index:
            self.score += ORDER_BONUS
        self.consumed.add(index)
        self.last_index = index

    def match_word(self, word: str) -> bool:
        return self._match(word, self.trick_words)

    def match_direction(self, token: str) -> bool:
        """Match "fs"/"bs" against the trick words as written."""
        return self._match(token, self.raw_trick_words)

    def _match(self, word: str, candidates: List[str]) -> bool:
        for index, trick_word in enumerate(candidates):
            if index in self.consumed:
                continue
            if trick_word == word:
                self.take(index)
                return True
        return False

    @property
    def complete(self) -> bool:
        return bool(self.trick_words) and len(self.consumed) == len(self.trick_words)


def score_trick(
    raw_words: Sequence[str],
    note_words: Sequence[str],
    trick: Trick,
) -> int:
    """
    Score one catalog trick against a tokenized note.

    Args:
        raw_words: Note tokens, lowercased but not normalized
        note_words: Normalized note tokens (same length as raw_words)
        trick: Catalog trick to score

    Returns:
        Non-negative integer score (0 means no match)
    """
    trick_words = normalize_trick_name(trick.name)
    if not trick_words:
        return 0

    raw_trick_words = [w.lower() for w in tokenize_words(trick.name)]
    matcher = _WordMatcher(trick_words, raw_trick_words)
    full_name = " ".join(trick_words)

    if trick.name.lower().startswith(DIRECTION_PREFIXES):
        if full_name in " ".join(note_words):
            matcher.score += PHRASE_BONUS

    for i, word in enumerate(note_words):
        if raw_words[i] in DIRECTION_TOKENS:
            window = note_words[i:i + len(trick_words)]
            if 0 not in matcher.consumed and " ".join(window) == full_name:
                matcher.take(0)
                continue
            if matcher.match_direction(raw_words[i]):
                continue
        if len(word) > 1:
            matcher.match_word(word)

    if matcher.complete:
        matcher.score += COMPLETION_BONUS

    return matcher.score


def match_tricks(
    note_text: str,
    catalog: Sequence[Trick],
    limit: int = MAX_CANDIDATES,
) -> List[ScoredCandidate]:
    """
    Rank catalog tricks against a session note.

    Args:
        note_text: Free-text note as typed
        catalog: Read-only catalog snapshot
        limit: Maximum number of candidates to return

    Returns:
        ScoredCandidates sorted by score descending, then by shorter trick
        name; empty when nothing matches

    Examples:
        >>> [c.trick.name for c in match_tricks("landed a kickflip", catalog)]
        ['Kickflip', ...]
    """
    raw_words = [w.lower() for w in tokenize_words(note_text)]
    if not raw_words or not catalog:
        return []
    note_words = [normalize_word(w) for w in raw_words]

    candidates = []
    for trick in catalog:
        score = score_trick(raw_words, note_words, trick)
        if score > 0:
            candidates.append(ScoredCandidate(trick=trick, score=float(score)))

    # sorted() is stable, so equal (score, length) keep catalog order
    candidates = sorted(candidates, key=lambda c: (-c.score, len(c.trick.name)))
    logger.debug("Matched %d of %d tricks for note of %d words",
                 len(candidates), len(catalog), len(note_words))
    return candidates[:limit]
