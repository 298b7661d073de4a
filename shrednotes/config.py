"""
Configuration and data-file loading.

Loads environment variables (via .env) and the static tables the engine is
driven by. Nothing here is cached across calls except the packaged lexicon.

Environment:
    SHREDNOTES_DATA_DIR: Directory with catalog.json, aliases.json and
        lexicon.json (default: the data/ folder shipped with the package)
    SHREDNOTES_LOG_LEVEL: Level used by configure_logging() (default WARNING)

Data files:
    catalog.json: {"tricks": [{"name", "type", "difficulty", "id"?}, ...]}
    aliases.json: {"bs flip": "BS 180 Kickflip", ...}
    lexicon.json: achievement/emotion words, colloquial boosts,
        difficulty boosts, opening phrases
"""

import json
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, FrozenSet, List, Optional, Tuple

from dotenv import load_dotenv

from .models import Trick, parse_trick_type
from .normalizer import normalize_phrase

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(levelname)s: %(message)s'


class ConfigError(RuntimeError):
    """A data file is missing or malformed."""


@dataclass(frozen=True)
class Lexicon:
    """Lexical weight tables used by the summarizer."""
    achievement_words: FrozenSet[str]
    emotion_words: FrozenSet[str]
    colloquial_terms: Tuple[Tuple[str, float], ...]
    difficulty_boosts: Tuple[Tuple[str, float], ...]
    default_difficulty_boost: float
    opening_phrases: Tuple[str, ...]


# ----- paths -----
def _package_data_dir() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


def data_dir() -> str:
    return os.getenv("SHREDNOTES_DATA_DIR") or _package_data_dir()


def _data_path(filename: str) -> str:
    return os.path.join(data_dir(), filename)


# ----- logging -----
def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for scripts and host apps that have none."""
    level = level or os.getenv("SHREDNOTES_LOG_LEVEL", "WARNING")
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


# ----- loaders -----
def _load_json(path: str):
    if not os.path.exists(path):
        raise ConfigError(f"config: missing data file at {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"config: {path} is not valid JSON ({e})") from e


def parse_catalog(entries: List[dict]) -> List[Trick]:
    """
    Build Trick values from raw catalog records.

    Records without a name or with an unknown type are skipped with a
    warning. A missing or non-integer difficulty defaults to 1.

    Args:
        entries: Raw dicts as stored in catalog.json

    Returns:
        Tricks in file order
    """
    tricks: List[Trick] = []
    for entry in entries:
        name = str(entry.get("name") or "").strip()
        if not name:
            logger.warning("Skipping catalog entry without a name: %r", entry)
            continue
        trick_type = parse_trick_type(entry.get("type"))
        if trick_type is None:
            logger.warning("Skipping %r: unknown trick type %r", name, entry.get("type"))
            continue
        try:
            difficulty = int(entry.get("difficulty", 1))
        except (TypeError, ValueError):
            difficulty = 1
        tricks.append(Trick(name=name, type=trick_type,
                            difficulty=difficulty, id=entry.get("id")))
    return tricks


def load_catalog(path: Optional[str] = None) -> List[Trick]:
    """Load the trick catalog (default: the app's built-in trick list)."""
    path = path or _data_path("catalog.json")
    data = _load_json(path)
    if not isinstance(data, dict) or not isinstance(data.get("tricks"), list):
        raise ConfigError(f"config: {path} has no 'tricks' list")
    tricks = parse_catalog(data["tricks"])
    logger.debug("Loaded %d tricks from %s", len(tricks), path)
    return tricks


def load_alias_table(path: Optional[str] = None) -> Dict[str, str]:
    """Load the alias table with keys in normalize_phrase() form."""
    path = path or _data_path("aliases.json")
    data = _load_json(path)
    if not isinstance(data, dict):
        raise ConfigError(f"config: {path} must map alias phrases to trick names")
    aliases = {}
    for phrase, target in data.items():
        key = normalize_phrase(phrase)
        if key and target:
            aliases[key] = str(target)
    logger.debug("Loaded %d aliases from %s", len(aliases), path)
    return aliases


def load_lexicon(path: Optional[str] = None) -> Lexicon:
    """Load the summarizer's lexical tables."""
    path = path or _data_path("lexicon.json")
    data = _load_json(path)
    try:
        if not data["opening_phrases"]:
            raise ValueError("opening_phrases is empty")
        return Lexicon(
            achievement_words=frozenset(w.lower() for w in data["achievement_words"]),
            emotion_words=frozenset(w.lower() for w in data["emotion_words"]),
            colloquial_terms=tuple(
                (phrase.lower(), float(boost))
                for phrase, boost in data["colloquial_terms"].items()
            ),
            difficulty_boosts=tuple(
                (keyword.lower(), float(boost))
                for keyword, boost in data["difficulty_boosts"]
            ),
            default_difficulty_boost=float(data.get("default_difficulty_boost", 1.5)),
            opening_phrases=tuple(data["opening_phrases"]),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ConfigError(f"config: {path} is not a valid lexicon ({e})") from e


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """Lexicon from the configured data dir, loaded once per process."""
    return load_lexicon()
