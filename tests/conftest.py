"""Pytest fixtures for the Shrednotes trick engine tests."""

import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from shrednotes.config import load_alias_table, load_catalog
from shrednotes.models import Session, Trick, TrickType


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def small_catalog():
    """A handful of tricks covering every scoring path."""
    return [
        Trick("Ollie", TrickType.BASIC, 1),
        Trick("Kickflip", TrickType.FLIP, 3),
        Trick("Heelflip", TrickType.FLIP, 3),
        Trick("Pop Shove It", TrickType.SHOVE_IT, 3),
        Trick("Varial Kickflip", TrickType.FLIP, 4),
        Trick("FS 180", TrickType.BASIC, 2),
        Trick("BS 180", TrickType.BASIC, 2),
        Trick("FS 180 Kickflip", TrickType.FLIP, 4),
        Trick("BS 180 Kickflip", TrickType.FLIP, 4),
        Trick("BS Noseslide", TrickType.SLIDE, 3),
        Trick("BS 50-50", TrickType.GRIND, 3),
        Trick("Nollie Kickflip", TrickType.FLIP, 3),
    ]


@pytest.fixture
def full_catalog():
    """The packaged catalog."""
    return load_catalog()


@pytest.fixture
def aliases():
    """The packaged alias table."""
    return load_alias_table()


@pytest.fixture
def kickflip(small_catalog):
    return next(t for t in small_catalog if t.name == "Kickflip")


@pytest.fixture
def today():
    return date(2024, 11, 15)


@pytest.fixture
def make_session():
    """Factory for sessions containing the given tricks."""
    def _make(day, *tricks, note="", duration=None):
        return Session(date=day, note=note, tricks=tuple(tricks), duration_seconds=duration)
    return _make
