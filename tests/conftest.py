"""Test fixtures for tlsearch tests."""

import re
import sys
from pathlib import Path

# Add src to path for imports when the package is not installed
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest  # noqa: E402

from tlsearch.engine import Engine  # noqa: E402

_WORD_RE = re.compile(r"\w+")


def word_segmenter(text: str) -> list[str]:
    """Dictionary-free segmenter: plain word runs."""
    return _WORD_RE.findall(text)


@pytest.fixture
def engine():
    """Engine using the shared SudachiPy analyzer."""
    return Engine()


@pytest.fixture
def word_engine():
    """Engine with a whitespace-language segmenter (no dictionary needed)."""
    return Engine(segmenter=word_segmenter)


@pytest.fixture
def sample_engine(word_engine):
    """Small corpus where 'rust' occurs in two of three documents."""
    word_engine.add("d1", "Rust Guide", "Rust is great for systems programming")
    word_engine.add("d2", "Cooking Tips", "Rust never appears here")
    word_engine.add("d3", "Gardening", "Roses bloom in spring")
    return word_engine
