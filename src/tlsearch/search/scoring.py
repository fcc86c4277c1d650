"""
TF-IDF Scoring

Accumulates per-document TF-IDF scores across query terms, with a
multiplicative boost for documents whose title contains the term.
"""

import math
from dataclasses import dataclass

from tlsearch.search.index import InvertedIndex


@dataclass
class TfIdfConfig:
    """TF-IDF parameters."""

    title_boost: float = 2.0  # Multiplier applied when the title contains a term


class TfIdfScorer:
    """
    TF-IDF scoring implementation.

    For each query term t and each document d holding t:
        score(d) += tf(t, d) * IDF(t)
        if t occurs in lower(title(d)): score(d) *= title_boost

    Where:
    - IDF(t) = ln(N / df)
    - N = number of live documents
    - df = number of postings for t
    - tf = occurrences / distinct terms in d

    The boost multiplies the running total at the moment the term is
    processed, so a title matching several terms compounds and the final
    score depends on query term order.
    """

    def __init__(self, index: InvertedIndex, config: TfIdfConfig | None = None):
        self.index = index
        self.config = config or TfIdfConfig()

    def idf(self, term: str) -> float:
        """
        Calculate Inverse Document Frequency.

        IDF = ln(N / df); 0.0 when every document holds the term or the
        term is unknown.
        """
        df = len(self.index.get_postings(term))
        if df == 0:
            return 0.0
        return math.log(self.index.doc_count / df)

    def score_batch(
        self,
        terms: list[str],
    ) -> tuple[dict[str, float], dict[str, list[int]]]:
        """
        Score every document touched by the query terms.

        Returns:
            (scores, highlights): doc id -> score in first-touched order, and
            doc id -> concatenated (unsorted) body positions
        """
        scores: dict[str, float] = {}
        highlights: dict[str, list[int]] = {}
        lowered_titles: dict[str, str] = {}
        boost = self.config.title_boost

        for term in terms:
            postings = self.index.get_postings(term)
            if not postings:
                continue

            idf = self.idf(term)

            for posting in postings:
                doc_id = posting.doc_id
                score = scores.get(doc_id, 0.0) + posting.tf * idf

                title = lowered_titles.get(doc_id)
                if title is None:
                    title = self.index.documents[doc_id].title.lower()
                    lowered_titles[doc_id] = title
                if term in title:
                    score *= boost

                scores[doc_id] = score
                # Highlights are collected regardless of idf
                highlights.setdefault(doc_id, []).extend(posting.positions)

        return scores, highlights
