"""Tests for merged suggestions and the latest-wins gate."""

from concurrent.futures import ThreadPoolExecutor

from shrednotes.models import ScoredCandidate
from shrednotes.suggestions import SuggestionGate, suggest_tricks
from shrednotes.trick_matcher import match_tricks


class TestSuggestTricks:
    """Merging matcher, alias and extractor sources."""

    def test_sources_in_order(self, small_catalog):
        tricks = suggest_tricks("kickflip", small_catalog, {}, extracted_names=["ollie"])
        names = [t.name for t in tricks]
        assert names[0] == "Kickflip"
        assert names[-1] == "Ollie"
        assert len(names) == 6

    def test_alias_phrase_in_note(self, full_catalog, aliases):
        tricks = suggest_tricks("stomped a bs flip", full_catalog, aliases)
        assert "BS 180 Kickflip" in [t.name for t in tricks]

    def test_no_duplicates(self, full_catalog, aliases):
        tricks = suggest_tricks(
            "bs 180 kickflip, then a bs flip",
            full_catalog,
            aliases,
            extracted_names=["BS 180 Kickflip", "bs flip", "kickflp"],
        )
        keys = [t.key for t in tricks]
        assert len(keys) == len(set(keys))
        assert "Kickflip" in [t.name for t in tricks]

    def test_empty_note(self, small_catalog):
        assert suggest_tricks("", small_catalog, {}) == []


class TestSuggestionGate:
    """Stale results never overwrite fresher ones."""

    def test_stale_result_dropped(self, kickflip):
        gate = SuggestionGate()
        first = gate.begin()
        second = gate.begin()
        fresh = [ScoredCandidate(kickflip, 5)]

        assert gate.complete(second, fresh) is True
        assert gate.complete(first, []) is False
        assert gate.latest == fresh

    def test_in_order_results_applied(self, kickflip):
        gate = SuggestionGate()
        first = gate.begin()
        assert gate.complete(first, []) is True
        second = gate.begin()
        assert gate.complete(second, [ScoredCandidate(kickflip, 5)]) is True
        assert len(gate.latest) == 1

    def test_is_current(self):
        gate = SuggestionGate()
        first = gate.begin()
        assert gate.is_current(first)
        second = gate.begin()
        assert not gate.is_current(first)
        assert gate.is_current(second)

    def test_latest_is_a_copy(self, kickflip):
        gate = SuggestionGate()
        gate.complete(gate.begin(), [ScoredCandidate(kickflip, 5)])
        gate.latest.clear()
        assert len(gate.latest) == 1

    def test_submit(self, small_catalog):
        gate = SuggestionGate()
        with ThreadPoolExecutor(max_workers=2) as executor:
            applied = gate.submit(executor, "landed a kickflip", small_catalog).result()
        assert applied is True
        assert gate.latest == match_tricks("landed a kickflip", small_catalog)
        assert gate.latest[0].trick.name == "Kickflip"

    def test_tokens_unique_across_threads(self):
        gate = SuggestionGate()
        with ThreadPoolExecutor(max_workers=8) as executor:
            tokens = list(executor.map(lambda _: gate.begin(), range(200)))
        assert sorted(tokens) == list(range(1, 201))
        assert gate.is_current(200)
