"""Tests for the trick matching and scoring engine."""

import pytest

from shrednotes.trick_matcher import MAX_CANDIDATES, match_tricks


def names(candidates):
    return [c.trick.name for c in candidates]


class TestScoring:
    """Individual scoring rules."""

    def test_single_word_trick(self, small_catalog):
        results = match_tricks("landed my first kickflip today, so stoked", small_catalog)
        assert results[0].trick.name == "Kickflip"
        # +2 word match, +3 completion
        assert results[0].score == 5

    def test_plural_in_note_matches(self, small_catalog):
        results = match_tricks("some kickflips and heelflips", small_catalog)
        assert {"Kickflip", "Heelflip"} <= set(names(results))

    def test_directional_phrase(self, small_catalog):
        results = match_tricks("fs 180 kickflip", small_catalog)
        assert results[0].trick.name == "FS 180 Kickflip"
        # +5 phrase, +2 "fs", +3 "180", +3 "kickflip", +3 completion
        assert results[0].score == 16
        assert results[1].trick.name == "FS 180"

    def test_direction_token_rescues_fs(self, small_catalog):
        # "fs" normalizes to a single letter; the direction rule still counts it
        results = {c.trick.name: c.score for c in match_tricks("fs 180", small_catalog)}
        assert results["FS 180"] == 5 + 2 + 3 + 3
        assert results["FS 180"] > results["BS 180"]

    def test_direction_inside_name(self, full_catalog):
        fs = {c.trick.name: c.score for c in match_tricks("switch fs 180", full_catalog)}
        bs = {c.trick.name: c.score for c in match_tricks("switch bs 180", full_catalog)}
        # +2 "switch", +3 "fs"/"bs", +3 "180", +3 completion
        assert fs["Switch FS 180"] == bs["Switch BS 180"] == 11
        assert fs["Switch FS 180"] > fs.get("Switch BS 180", 0)

    def test_direction_without_full_phrase(self, small_catalog):
        results = {c.trick.name: c.score for c in match_tricks("fs kickflip", small_catalog)}
        # "fs" takes trick word 0 even though "180" is missing
        assert results["FS 180 Kickflip"] > results.get("BS 180 Kickflip", 0)

    def test_word_order_bonus(self, small_catalog):
        ordered = {c.trick.name: c.score for c in match_tricks("varial kickflip", small_catalog)}
        reversed_ = {c.trick.name: c.score for c in match_tricks("kickflip varial", small_catalog)}
        assert ordered["Varial Kickflip"] == 8
        assert reversed_["Varial Kickflip"] == 7

    def test_trick_word_matches_once(self, small_catalog):
        once = {c.trick.name: c.score for c in match_tricks("kickflip", small_catalog)}
        twice = {c.trick.name: c.score for c in match_tricks("kickflip kickflip", small_catalog)}
        assert once["Kickflip"] == twice["Kickflip"] == 5

    def test_partial_match_has_no_completion_bonus(self, small_catalog):
        results = {c.trick.name: c.score for c in match_tricks("kickflip", small_catalog)}
        assert results["Varial Kickflip"] == 2


class TestRanking:
    """Ordering, truncation and determinism."""

    def test_truncated_to_five(self, small_catalog):
        results = match_tricks("kickflip heelflip bs fs 180 ollie nollie", small_catalog)
        assert len(results) == MAX_CANDIDATES

    def test_sorted_by_score_then_name_length(self, full_catalog):
        results = match_tricks("bs flip, sketchy nollie heelflip and a 50-50", full_catalog)
        keys = [(-c.score, len(c.trick.name)) for c in results]
        assert keys == sorted(keys)
        assert len(results) <= MAX_CANDIDATES

    def test_shorter_name_wins_ties(self, small_catalog):
        results = match_tricks("180", small_catalog)
        assert names(results)[:2] == ["FS 180", "BS 180"]

    def test_deterministic(self, full_catalog):
        note = "landed some kickflips, sketchy bs flip"
        first = match_tricks(note, full_catalog)
        second = match_tricks(note, full_catalog)
        assert first == second

    def test_scores_positive(self, full_catalog):
        for candidate in match_tricks("pop shove it into manual", full_catalog):
            assert candidate.score > 0


class TestNoCandidates:
    """Degenerate input returns an empty list."""

    @pytest.mark.parametrize("note", ["", "   ", "!!!", "went to the park"])
    def test_empty(self, small_catalog, note):
        assert match_tricks(note, small_catalog) == []

    def test_empty_catalog(self):
        assert match_tricks("kickflip", []) == []


class TestGoldenNotes:
    """Exact trick names written in a note are always suggested."""

    @pytest.mark.parametrize("note,expected", [
        ("finally got a tre flip", "Tre Flip"),
        ("worked on pop shove it all day", "Pop Shove It"),
        ("long manual across the pad", "Manual"),
        ("bs noseslide on the ledge", "BS Noseslide"),
        ("landed my first kickflip today, so stoked", "Kickflip"),
    ])
    def test_exact_name_is_top(self, full_catalog, note, expected):
        results = match_tricks(note, full_catalog)
        assert results[0].trick.name == expected
        assert results[0].score > 0

    def test_to_dict(self, small_catalog):
        data = match_tricks("kickflip", small_catalog)[0].to_dict()
        assert data == {"name": "Kickflip", "type": "Flip", "difficulty": 3, "score": 5.0}
