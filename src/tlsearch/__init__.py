"""Embeddable in-memory full-text search with TF-IDF ranking."""

from tlsearch.analyzer import AnalyzerUnavailableError, initialize
from tlsearch.engine import Engine, LockedEngine
from tlsearch.search import SearchHit, Snippet, TfIdfConfig

__all__ = [
    "AnalyzerUnavailableError",
    "Engine",
    "LockedEngine",
    "SearchHit",
    "Snippet",
    "TfIdfConfig",
    "initialize",
]
