"""
Query Engine

Ranks documents in the inverted index against a keyword query.
"""

from dataclasses import dataclass

from tlsearch.analyzer import Segmenter, analyze
from tlsearch.search.index import InvertedIndex
from tlsearch.search.scoring import TfIdfConfig, TfIdfScorer


@dataclass
class SearchHit:
    """A single search result."""

    id: str
    title: str
    score: float
    positions: list[int]  # Sorted, deduplicated body character offsets


class SearchEngine:
    """
    Keyword search over the inverted index.

    Query terms are OR-ed: any document holding at least one term is a
    candidate, including documents whose score is 0.0 because the term
    occurs in every document.
    """

    def __init__(
        self,
        index: InvertedIndex,
        segmenter: Segmenter,
        config: TfIdfConfig | None = None,
    ):
        self.index = index
        self._segment = segmenter
        self.scorer = TfIdfScorer(index, config)

    def search(self, query: str, limit: int = 10) -> list[SearchHit]:
        """
        Search documents using OR logic.

        Args:
            query: Search query string
            limit: Maximum number of hits to return

        Returns:
            Hits ordered by descending score
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        if not query or not query.strip():
            return []

        # 1. Tokenize query
        terms = self.tokenize(query)
        if not terms:
            return []

        # 2. Score candidates
        scores, highlights = self.scorer.score_batch(terms)

        # 3. Sort by score (descending, stable)
        ranked = sorted(scores.items(), key=lambda x: x[1], reverse=True)

        # 4. Build hits
        hits = []
        for doc_id, score in ranked[:limit]:
            hits.append(
                SearchHit(
                    id=doc_id,
                    title=self.index.documents[doc_id].title,
                    score=score,
                    positions=sorted(set(highlights.get(doc_id, []))),
                )
            )
        return hits

    def tokenize(self, query: str) -> list[str]:
        """Normalize a query the same way document text is normalized."""
        if not query:
            return []
        return analyze(query, self._segment)
