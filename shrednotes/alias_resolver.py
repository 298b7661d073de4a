"""
Fuzzy alias resolution of free-text trick names.

Trick names that arrive from outside the matcher (an on-device language model,
a share-sheet import, a hand-typed list) rarely match catalog names exactly.
This module maps them onto catalog tricks.

Resolution order per candidate name (first hit wins):
    1. Exact case-insensitive catalog name ("kickflip" -> Kickflip)
    2. Alias table ("bs flip" -> BS 180 Kickflip)
    3. Edit-distance fallback: best catalog name with similarity > 0.80,
       ties broken by shorter name, then alphabetically

A candidate that resolves to nothing is dropped; that is the common case for
words like "warmup" and not an error.

Usage:
    tricks = resolve_trick_names(["kickflp", "bs flip"], catalog, aliases)
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence, Set

import Levenshtein

from .models import Trick
from .normalizer import normalize_phrase

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.80


def levenshtein(a: str, b: str) -> int:
    """
    Unit-cost edit distance (insert/delete/substitute) over code points.

    Examples:
        >>> levenshtein("kickflip", "kickflips")
        1
    """
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Normalized similarity: 1 - distance / longer length.

    Returns:
        1.0 for identical strings (including two empty strings), down to 0.0
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / max_len


def _find_by_name(name: str, catalog: Sequence[Trick]) -> Optional[Trick]:
    wanted = name.strip().lower()
    for trick in catalog:
        if trick.name.lower() == wanted:
            return trick
    return None


def _fuzzy_match(name: str, catalog: Sequence[Trick]) -> Optional[Trick]:
    query = name.strip().lower()
    best: Optional[Trick] = None
    best_key = None
    for trick in catalog:
        score = similarity(query, trick.name.lower())
        if score <= SIMILARITY_THRESHOLD:
            continue
        key = (-score, len(trick.name), trick.name)
        if best_key is None or key < best_key:
            best, best_key = trick, key
    return best


def resolve_trick_name(
    name: str,
    catalog: Sequence[Trick],
    alias_table: Dict[str, str],
) -> Optional[Trick]:
    """
    Resolve a single free-text trick name.

    Args:
        name: Candidate name (e.g. from an external extractor)
        catalog: Read-only catalog snapshot
        alias_table: Normalized phrase -> canonical trick name

    Returns:
        The catalog trick, or None when no stage matches
    """
    if not name or not name.strip():
        return None

    trick = _find_by_name(name, catalog)
    if trick:
        return trick

    target = alias_table.get(normalize_phrase(name))
    if target:
        trick = _find_by_name(target, catalog)
        if trick:
            return trick
        logger.debug("Alias %r points at %r, which is not in the catalog", name, target)

    return _fuzzy_match(name, catalog)


def resolve_trick_names(
    candidate_names: Iterable[str],
    catalog: Sequence[Trick],
    alias_table: Dict[str, str],
) -> List[Trick]:
    """
    Resolve candidate names to distinct catalog tricks.

    Each candidate contributes at most one trick. Synonymous candidates that
    land on the same trick produce it once, at its first position.

    Args:
        candidate_names: Names in extractor order
        catalog: Read-only catalog snapshot
        alias_table: Normalized phrase -> canonical trick name

    Returns:
        Distinct tricks in first-seen order
    """
    resolved: List[Trick] = []
    seen: Set[str] = set()
    for name in candidate_names:
        trick = resolve_trick_name(name, catalog, alias_table)
        if trick is None:
            logger.debug("No catalog trick for %r", name)
            continue
        if trick.key in seen:
            continue
        seen.add(trick.key)
        resolved.append(trick)
    return resolved


def match_aliases_in_note(
    note_text: str,
    catalog: Sequence[Trick],
    alias_table: Dict[str, str],
) -> List[Trick]:
    """
    Find alias phrases written directly in a note.

    Catches shorthand the word matcher cannot see, e.g. "bs flip" in
    "stomped a bs flip down the three" suggests BS 180 Kickflip. Phrases
    match on word boundaries, so "tre" is not found in "street".

    Args:
        note_text: Free-text note
        catalog: Read-only catalog snapshot
        alias_table: Normalized phrase -> canonical trick name

    Returns:
        Distinct target tricks, in alias-table order
    """
    note = normalize_phrase(note_text)
    if not note:
        return []

    found: List[Trick] = []
    seen: Set[str] = set()
    for phrase, target in alias_table.items():
        if not re.search(r"\b" + re.escape(phrase) + r"\b", note):
            continue
        trick = _find_by_name(target, catalog)
        if trick and trick.key not in seen:
            seen.add(trick.key)
            found.append(trick)
    return found
