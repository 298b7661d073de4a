"""Tests for tokenization and normalization."""

import pytest

from shrednotes.normalizer import (
    normalize_phrase,
    normalize_trick_name,
    normalize_word,
    tokenize_sentences,
    tokenize_words,
)


class TestTokenizeWords:
    """Word boundaries and discarded tokens."""

    def test_punctuation_is_dropped(self):
        assert tokenize_words("landed some kickflips, sketchy bs flip!") == [
            "landed", "some", "kickflips", "sketchy", "bs", "flip",
        ]

    def test_hyphen_splits_words(self):
        assert tokenize_words("BS 50-50") == ["BS", "50", "50"]

    def test_keeps_inner_apostrophe(self):
        assert tokenize_words("my friend's tre") == ["my", "friend's", "tre"]

    @pytest.mark.parametrize("text", ["", None, "...", " !? -- "])
    def test_empty_or_punctuation_only(self, text):
        assert tokenize_words(text) == []

    def test_unicode_letters(self):
        assert tokenize_words("Café ollie") == ["Café", "ollie"]


class TestTokenizeSentences:
    """Sentence boundaries."""

    def test_splits_on_terminal_punctuation(self):
        text = "Warmed up on flat. Landed a kickflip! Was it clean? Barely"
        assert tokenize_sentences(text) == [
            "Warmed up on flat.", "Landed a kickflip!", "Was it clean?", "Barely",
        ]

    def test_splits_on_newlines(self):
        assert tokenize_sentences("kickflips\nheelflips") == ["kickflips", "heelflips"]

    def test_drops_punctuation_only_sentences(self):
        assert tokenize_sentences("Landed it. ... !") == ["Landed it."]

    def test_empty(self):
        assert tokenize_sentences("") == []


class TestNormalizeWord:
    """Canonical word forms."""

    @pytest.mark.parametrize("word,expected", [
        ("Kickflips", "kickflip"),
        ("kickflip", "kickflip"),
        ("Ollie's", "ollie"),
        ("ollie’s", "ollie"),
        ("bs", "bs"),
        ("BS", "bs"),
        ("fs", "f"),
        ("ollies", "ollie"),
        ("s", "s"),
    ])
    def test_forms(self, word, expected):
        assert normalize_word(word) == expected

    @pytest.mark.parametrize("word", [
        "Kickflips", "kickflipss", "bs", "bss", "bs's", "ss", "s", "'s",
        "x's's", "Boardslides", "abs", "skaters'", "180s",
    ])
    def test_idempotent(self, word):
        once = normalize_word(word)
        assert normalize_word(once) == once


class TestNormalizeTrickName:
    """Trick names use the same word pipeline as notes."""

    def test_name_words(self):
        assert normalize_trick_name("BS 180 Kickflip") == ["bs", "180", "kickflip"]

    def test_frontside_prefix(self):
        assert normalize_trick_name("FS Pop Shove It") == ["f", "pop", "shove", "it"]

    def test_phrase_key(self):
        assert normalize_phrase("  BS   Flip ") == "bs flip"
        assert normalize_phrase(None) == ""
