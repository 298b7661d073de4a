"""
Extractive session summaries.

Builds the one-or-two sentence blurb shown on a session card: the most
telling sentences of the skater's note, plus a templated line about the
tricks they landed.

Pipeline:
    1. Weight words of the note (achievement/emotion words, trick-name words
       scaled by trick difficulty, colloquial phrases), normalized to [0, 1]
    2. Score each sentence by its average word weight, then boost sentences
       that mention achievements, emotions, slang or catalog tricks
    3. Keep the top 2 sentences, in the order they were written
    4. Describe the landed tricks (listed by name, or counted by category
       when there are more than 5)
    5. Lead with the trick line plus the best sentence when that sentence is
       strong (> 0.7), otherwise context first

Usage:
    summary = summarize_session(note, landed_tricks, date.today(), catalog=catalog)
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from .config import Lexicon, default_lexicon
from .models import SummaryInput, Trick, TrickType
from .normalizer import tokenize_sentences, tokenize_words

logger = logging.getLogger(__name__)

SENTENCE_LIMIT = 2
MIN_WORD_LENGTH = 3
STRONG_SENTENCE_SCORE = 0.7
MANY_TRICKS = 5

ACHIEVEMENT_SENTENCE_BOOST = 1.5
EMOTION_SENTENCE_BOOST = 1.3
COLLOQUIAL_SENTENCE_BOOST = 1.2
TRICK_SENTENCE_BOOST = 1.4

ACHIEVEMENT_WORD_WEIGHT = 2.0
EMOTION_WORD_WEIGHT = 1.5


def _join_with_and(items: List[str]) -> str:
    if len(items) > 1:
        return ", ".join(items[:-1]) + " and " + items[-1]
    return items[0] if items else ""


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


class SessionSummarizer:
    """
    Summarizer for one call. Holds the catalog and lexicon it was built with
    and nothing else, so a fresh instance per summary is cheap.

    Args:
        catalog: Tricks to look for in the note text
        lexicon: Lexical tables (default: packaged lexicon.json)
    """

    def __init__(self, catalog: Sequence[Trick] = (), lexicon: Optional[Lexicon] = None):
        self.catalog = list(catalog)
        self.lexicon = lexicon or default_lexicon()

    # ----- weights -----
    def difficulty_boost(self, trick: Trick) -> float:
        name = trick.name.lower()
        for keyword, boost in self.lexicon.difficulty_boosts:
            if keyword in name:
                return boost
        return self.lexicon.default_difficulty_boost

    def _tricks_in(self, text_lower: str) -> List[Trick]:
        return [t for t in self.catalog if t.name.lower() in text_lower]

    def word_frequencies(self, text: str) -> Dict[str, float]:
        """
        Weight the words of a note.

        Returns:
            Word -> weight in [0, 1] (empty dict for empty text)
        """
        text_lower = text.lower()
        freq: Dict[str, float] = defaultdict(float)

        for word in tokenize_words(text_lower):
            if len(word) < MIN_WORD_LENGTH:
                continue
            score = 1.0
            if word in self.lexicon.achievement_words:
                score *= ACHIEVEMENT_WORD_WEIGHT
            if word in self.lexicon.emotion_words:
                score *= EMOTION_WORD_WEIGHT
            freq[word] += score

        for trick in self._tricks_in(text_lower):
            boost = self.difficulty_boost(trick)
            for word in trick.name.lower().split():
                freq[word] *= boost

        for phrase, boost in self.lexicon.colloquial_terms:
            if phrase in text_lower:
                for word in phrase.split():
                    freq[word] *= boost

        max_freq = max(freq.values(), default=0.0) or 1.0
        return {word: weight / max_freq for word, weight in freq.items()}

    def score_sentences(
        self,
        sentences: List[str],
        word_freq: Dict[str, float],
    ) -> List[float]:
        """Score each sentence; the result is parallel to `sentences`."""
        lex = self.lexicon
        scores = []
        for sentence in sentences:
            lower = sentence.lower()
            words = tokenize_words(lower)

            has_achievement = any(w in lower for w in lex.achievement_words)
            has_emotion = any(w in lower for w in lex.emotion_words)
            has_colloquial = any(p in lower for p, _ in lex.colloquial_terms)

            raw = 0.0
            tricks = self._tricks_in(lower)
            if has_achievement:
                raw += sum(self.difficulty_boost(t) for t in tricks)
            raw += sum(word_freq.get(w, 0.0) for w in words)

            score = raw / len(words) if words else 0.0
            if has_achievement:
                score *= ACHIEVEMENT_SENTENCE_BOOST
            if has_emotion:
                score *= EMOTION_SENTENCE_BOOST
            if has_colloquial:
                score *= COLLOQUIAL_SENTENCE_BOOST
            if tricks:
                score *= TRICK_SENTENCE_BOOST
            scores.append(score)
        return scores

    # ----- composition -----
    def trick_summary(self, tricks: Sequence[Trick], session_date: date) -> str:
        """
        Templated line about the landed tricks.

        The opening phrase is picked by day of month so a given session
        always reads the same.
        """
        phrases = self.lexicon.opening_phrases
        text = phrases[session_date.day % len(phrases)]

        if len(tricks) > MANY_TRICKS:
            groups = [
                ("flip trick", "flip tricks",
                 sum(1 for t in tricks if t.type is TrickType.FLIP)),
                ("nollie trick", "nollie tricks",
                 sum(1 for t in tricks if "nollie" in t.name.lower())),
                ("grind", "grinds",
                 sum(1 for t in tricks if t.type is TrickType.GRIND)),
                ("slide", "slides",
                 sum(1 for t in tricks if t.type is TrickType.SLIDE)),
                ("shove it", "shove its",
                 sum(1 for t in tricks if t.type is TrickType.SHOVE_IT)),
            ]
            parts = [_plural(n, one, many) for one, many, n in groups if n]
            if not parts:
                parts = [_plural(len(tricks), "trick", "tricks")]
            return text + _join_with_and(parts) + "."

        return text + _join_with_and([t.name for t in tricks]) + "."

    def summarize(self, note_text: str, landed_tricks: Sequence[Trick],
                  session_date: date) -> str:
        note_text = note_text or ""
        sentences = tokenize_sentences(note_text)
        scores = self.score_sentences(sentences, self.word_frequencies(note_text))

        ranked: List[Tuple[int, float]] = sorted(
            enumerate(scores), key=lambda item: item[1], reverse=True)
        top_indices = sorted(i for i, _ in ranked[:SENTENCE_LIMIT])
        context_summary = " ".join(sentences[i] for i in top_indices)

        if not landed_tricks:
            return context_summary

        trick_summary = self.trick_summary(landed_tricks, session_date)
        if ranked and ranked[0][1] > STRONG_SENTENCE_SCORE:
            return f"{trick_summary} {sentences[ranked[0][0]]}"
        if context_summary:
            return f"{context_summary} {trick_summary}"
        return trick_summary


def summarize_session(
    note_text: str,
    landed_tricks: Sequence[Trick],
    session_date: date,
    catalog: Optional[Sequence[Trick]] = None,
    lexicon: Optional[Lexicon] = None,
) -> str:
    """
    Summarize a session note.

    Args:
        note_text: Free-text note
        landed_tricks: Tricks logged for the session
        session_date: Session date (picks the opening phrase)
        catalog: Tricks to recognize inside the note text (default: the
            landed tricks)
        lexicon: Lexical tables (default: packaged lexicon.json)

    Returns:
        Summary string; "" for an empty note with no landed tricks
    """
    if catalog is None:
        catalog = landed_tricks
    summarizer = SessionSummarizer(catalog, lexicon)
    summary = summarizer.summarize(note_text, landed_tricks, session_date)
    logger.debug("Summarized %d chars into %d chars", len(note_text or ""), len(summary))
    return summary


def summarize_input(summary_input: SummaryInput, catalog: Optional[Sequence[Trick]] = None,
                    lexicon: Optional[Lexicon] = None) -> str:
    """summarize_session() for a SummaryInput value."""
    return summarize_session(summary_input.note_text, summary_input.landed_tricks,
                             summary_input.session_date, catalog, lexicon)
