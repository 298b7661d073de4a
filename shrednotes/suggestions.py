"""Trick suggestions for the add-session screen."""

import logging
import threading
from concurrent.futures import Executor, Future
from typing import Dict, Iterable, List, Optional, Sequence, Set

from .alias_resolver import match_aliases_in_note, resolve_trick_names
from .models import ScoredCandidate, Trick
from .trick_matcher import MAX_CANDIDATES, match_tricks

logger = logging.getLogger(__name__)


def suggest_tricks(
    note_text: str,
    catalog: Sequence[Trick],
    alias_table: Dict[str, str],
    extracted_names: Optional[Iterable[str]] = None,
    limit: int = MAX_CANDIDATES,
) -> List[Trick]:
    """
    Merge every suggestion source into one list.

    Order: scored matches, alias phrases spotted in the note, then names from
    an external extractor (e.g. an on-device language model) resolved through
    the alias resolver. A trick appears once, at its first position.

    Args:
        note_text: Free-text note
        catalog: Read-only catalog snapshot
        alias_table: Normalized phrase -> canonical trick name
        extracted_names: Optional trick names from an external extractor
        limit: Maximum number of scored matches taken from the matcher

    Returns:
        Distinct suggested tricks
    """
    sources: List[List[Trick]] = [
        [c.trick for c in match_tricks(note_text, catalog, limit)],
        match_aliases_in_note(note_text, catalog, alias_table),
    ]
    if extracted_names is not None:
        sources.append(resolve_trick_names(extracted_names, catalog, alias_table))

    merged: List[Trick] = []
    seen: Set[str] = set()
    for source in sources:
        for trick in source:
            if trick.key not in seen:
                seen.add(trick.key)
                merged.append(trick)
    return merged


class SuggestionGate:
    """
    Latest-wins holder for live match results.

    The host calls begin() for every (debounced) edit and complete() when the
    matching work for that edit finishes. A result is applied only if no
    newer request has already been applied, so a slow stale request can never
    overwrite fresher suggestions. Matching is pure, so "cancelling" a request
    just means its result is discarded here.

    Usage:
        gate = SuggestionGate()
        token = gate.begin()
        gate.complete(token, match_tricks(note, catalog))
        gate.latest
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._issued = 0
        self._applied = 0
        self._result: List[ScoredCandidate] = []

    def begin(self) -> int:
        """Issue a token for a new request."""
        with self._lock:
            self._issued += 1
            return self._issued

    def complete(self, token: int, result: List[ScoredCandidate]) -> bool:
        """
        Offer a finished result.

        Returns:
            True if the result was applied, False if it was stale
        """
        with self._lock:
            if token <= self._applied:
                logger.debug("Dropping stale suggestions for request %d", token)
                return False
            self._applied = token
            self._result = list(result)
            return True

    def is_current(self, token: int) -> bool:
        """True while no newer request has been issued."""
        with self._lock:
            return token == self._issued

    @property
    def latest(self) -> List[ScoredCandidate]:
        with self._lock:
            return list(self._result)

    def submit(
        self,
        executor: Executor,
        note_text: str,
        catalog: Sequence[Trick],
    ) -> Future:
        """
        Run match_tricks on an executor and complete the gate with it.

        Returns:
            Future resolving to whether the result was applied
        """
        token = self.begin()

        def run() -> bool:
            return self.complete(token, match_tricks(note_text, catalog))

        return executor.submit(run)
