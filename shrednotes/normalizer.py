"""
Text tokenization and normalization for trick matching.

Session notes are typed quickly on a phone ("landed 3 kickflips, sketchy bs
flip!!"), so both the note and every catalog trick name go through the same
pipeline before they are compared. Matching only ever compares normalized
forms.

Functions:
    tokenize_words(text: str) -> List[str]: Word tokens, punctuation dropped
    tokenize_sentences(text: str) -> List[str]: Sentence tokens, stripped
    normalize_word(word: str) -> str: Lowercase, strip possessive and plural
    normalize_trick_name(name: str) -> List[str]: Normalized words of a name
    normalize_phrase(text: str) -> str: Lookup key for alias tables
"""

import re
from typing import List, Optional


# Letters/digits with optional inner apostrophes ("kickflip's", "don't").
# Hyphens split words, so "50-50" -> ["50", "50"] on both sides of a match.
_WORD_RE = re.compile(r"\w+(?:['’]\w+)*", re.UNICODE)

# Sentence ends: terminal punctuation followed by whitespace, or a line break
_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?…])\s+|[\r\n]+")

_POSSESSIVE_SUFFIXES = ("'s", "’s")


def tokenize_words(text: Optional[str]) -> List[str]:
    """
    Split text into word tokens.

    Punctuation-only and empty tokens never appear in the output.

    Args:
        text: Raw text (None is treated as empty)

    Returns:
        List of word tokens in document order

    Examples:
        >>> tokenize_words("Landed a BS 50-50, finally!")
        ['Landed', 'a', 'BS', '50', '50', 'finally']

        >>> tokenize_words("...")
        []
    """
    if not text:
        return []
    return _WORD_RE.findall(text)


def tokenize_sentences(text: Optional[str]) -> List[str]:
    """
    Split text into sentences.

    Args:
        text: Raw note text

    Returns:
        Stripped sentences that contain at least one word

    Examples:
        >>> tokenize_sentences("Warmed up. Landed a kickflip! So stoked")
        ['Warmed up.', 'Landed a kickflip!', 'So stoked']
    """
    if not text:
        return []
    sentences = []
    for chunk in _SENTENCE_SPLIT_RE.split(text):
        chunk = chunk.strip()
        if chunk and _WORD_RE.search(chunk):
            sentences.append(chunk)
    return sentences


def normalize_word(word: str) -> str:
    """
    Canonicalize a single word for matching.

    Applies:
    1. Lowercase
    2. Strip a trailing possessive "'s"
    3. Strip trailing plural "s" characters, unless the word ends in "bs"
       (keeps the backside abbreviation intact). One-letter words are kept.

    The result is stable: normalize_word(normalize_word(w)) == normalize_word(w).

    Examples:
        >>> normalize_word("Kickflips")
        'kickflip'

        >>> normalize_word("bs")
        'bs'

        >>> normalize_word("Ollie's")
        'ollie'
    """
    word = word.lower()
    for suffix in _POSSESSIVE_SUFFIXES:
        if word.endswith(suffix) and len(word) > len(suffix):
            word = word[:-len(suffix)]
            break
    while len(word) > 1 and word.endswith("s") and not word.endswith("bs"):
        word = word[:-1]
    return word


def normalize_trick_name(name: str) -> List[str]:
    """
    Normalize a trick name into its word list.

    Examples:
        >>> normalize_trick_name("BS 180 Kickflip")
        ['bs', '180', 'kickflip']

        >>> normalize_trick_name("FS Pop Shove It")
        ['f', 'pop', 'shove', 'it']
    """
    return [normalize_word(w) for w in tokenize_words(name)]


def normalize_phrase(text: Optional[str]) -> str:
    """
    Normalize a free-text phrase into an alias-table key.

    Lowercases, trims and collapses whitespace. Word forms are left alone so
    that curated keys like "bs flip" read exactly as written.

    Examples:
        >>> normalize_phrase("  BS   Flip ")
        'bs flip'
    """
    if not text:
        return ""
    return re.sub(r"\s+", " ", text.lower()).strip()
