"""
Search Engine Facade

Wires the index, indexer, query engine and suggester behind the
add / remove / search / suggest interface.
"""

import threading
from typing import Any

from tlsearch.analyzer import Segmenter, analyze, initialize
from tlsearch.core.config import settings
from tlsearch.search.index import InvertedIndex
from tlsearch.search.indexer import SearchIndexer
from tlsearch.search.scoring import TfIdfConfig
from tlsearch.search.searcher import SearchEngine, SearchHit
from tlsearch.search.snippet import Snippet, generate_snippet
from tlsearch.search.suggest import TitleSuggester


class Engine:
    """
    In-memory full-text search engine.

    Not thread-safe: calls must be serialized by the caller. Use
    LockedEngine when embedding in a multi-threaded host.
    """

    def __init__(
        self,
        segmenter: Segmenter | None = None,
        scoring: TfIdfConfig | None = None,
        suggest_limit: int | None = None,
    ):
        """
        Initialize an empty engine.

        Args:
            segmenter: Tokenizer function; defaults to the shared SudachiPy
                analyzer, which is loaded here if it is not loaded yet
            scoring: TF-IDF configuration
            suggest_limit: Maximum number of suggestions
        """
        if segmenter is None:
            segmenter = initialize().segment
        if suggest_limit is None:
            suggest_limit = settings.SUGGEST_LIMIT

        self._segment = segmenter
        self.index = InvertedIndex()
        self.indexer = SearchIndexer(self.index, segmenter)
        self.searcher = SearchEngine(self.index, segmenter, scoring)
        self.suggester = TitleSuggester(self.index, suggest_limit)

    def __len__(self) -> int:
        return len(self.index)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self.index

    def add(self, doc_id: str, title: str, body: str) -> None:
        """Index a document, replacing any document with the same id."""
        self.indexer.index_document(doc_id, title, body)

    def remove(self, doc_id: str) -> None:
        """Remove a document; unknown ids are ignored."""
        self.indexer.delete_document(doc_id)

    def search(self, query: str, limit: int | None = None) -> list[SearchHit]:
        if limit is None:
            limit = settings.SEARCH_LIMIT
        return self.searcher.search(query, limit)

    def suggest(self, prefix: str) -> list[str]:
        return self.suggester.suggest(prefix)

    def snippet(
        self,
        hit: SearchHit,
        query: str,
        window_size: int | None = None,
    ) -> Snippet:
        """Render the body of a hit with its matched terms highlighted."""
        if window_size is None:
            window_size = settings.SNIPPET_WINDOW
        document = self.index.get_document(hit.id)
        if document is None:
            return Snippet(text="", plain_text="")
        return generate_snippet(
            document.body,
            hit.positions,
            analyze(query, self._segment),
            window_size,
        )

    def stats(self) -> dict[str, Any]:
        """Get index statistics."""
        return {
            "documents": self.index.doc_count,
            "terms": len(self.index.postings),
            "titles": len(self.index.titles),
        }


class LockedEngine(Engine):
    """Engine whose public calls each run under one exclusive lock."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return super().__contains__(doc_id)

    def add(self, doc_id: str, title: str, body: str) -> None:
        with self._lock:
            super().add(doc_id, title, body)

    def remove(self, doc_id: str) -> None:
        with self._lock:
            super().remove(doc_id)

    def search(self, query: str, limit: int | None = None) -> list[SearchHit]:
        with self._lock:
            return super().search(query, limit)

    def suggest(self, prefix: str) -> list[str]:
        with self._lock:
            return super().suggest(prefix)

    def snippet(
        self,
        hit: SearchHit,
        query: str,
        window_size: int | None = None,
    ) -> Snippet:
        with self._lock:
            return super().snippet(hit, query, window_size)

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return super().stats()
