"""
Shrednotes trick engine

Free-text trick recognition and session analytics for a skateboarding
journal.

Main Components:
    - normalizer: Word/sentence tokenization and word normalization
    - trick_matcher: Scored catalog matching for live suggestions
    - alias_resolver: Exact/alias/edit-distance resolution of trick names
    - summarizer: Extractive session summaries
    - streaks: Practice streaks, heat-maps and session insights
    - suggestions: Merged suggestions and a latest-wins result gate

Quick Start:
    from shrednotes import load_catalog, load_alias_table, match_tricks

    catalog = load_catalog()
    candidates = match_tricks("landed some kickflips, sketchy bs flip", catalog)
"""

__version__ = "0.1.0"

from .models import (
    PracticeHeatBucket,
    ScoredCandidate,
    Session,
    SessionInsights,
    StreakResult,
    SummaryInput,
    Trick,
    TrickType,
    intensity_band,
    parse_trick_type,
)
from .normalizer import (
    normalize_phrase,
    normalize_trick_name,
    normalize_word,
    tokenize_sentences,
    tokenize_words,
)
from .config import (
    ConfigError,
    Lexicon,
    configure_logging,
    load_alias_table,
    load_catalog,
    load_lexicon,
)
from .trick_matcher import match_tricks
from .alias_resolver import (
    levenshtein,
    match_aliases_in_note,
    resolve_trick_name,
    resolve_trick_names,
    similarity,
)
from .summarizer import SessionSummarizer, summarize_input, summarize_session
from .streaks import (
    calculate_heatmap,
    calculate_session_heatmap,
    calculate_session_insights,
    calculate_streak,
    heatmap_grid,
)
from .suggestions import SuggestionGate, suggest_tricks

__all__ = [
    "Trick",
    "TrickType",
    "parse_trick_type",
    "ScoredCandidate",
    "Session",
    "SummaryInput",
    "StreakResult",
    "PracticeHeatBucket",
    "SessionInsights",
    "intensity_band",
    "tokenize_words",
    "tokenize_sentences",
    "normalize_word",
    "normalize_trick_name",
    "normalize_phrase",
    "ConfigError",
    "Lexicon",
    "configure_logging",
    "load_catalog",
    "load_alias_table",
    "load_lexicon",
    "match_tricks",
    "levenshtein",
    "similarity",
    "resolve_trick_name",
    "resolve_trick_names",
    "match_aliases_in_note",
    "SessionSummarizer",
    "summarize_session",
    "summarize_input",
    "calculate_streak",
    "calculate_heatmap",
    "calculate_session_heatmap",
    "calculate_session_insights",
    "heatmap_grid",
    "SuggestionGate",
    "suggest_tricks",
]
