"""
Search Indexer

Builds postings for a document and maintains the inverted index.
"""

import logging
from collections import Counter

from tlsearch.analyzer import Segmenter, normalize_term
from tlsearch.search.index import Document, InvertedIndex, Posting

logger = logging.getLogger(__name__)


class SearchIndexer:
    """Builds and maintains the inverted index."""

    def __init__(self, index: InvertedIndex, segmenter: Segmenter):
        self.index = index
        self._segment = segmenter

    def index_document(self, doc_id: str, title: str, body: str) -> None:
        """
        Index a document into the in-memory index.

        Re-indexing an existing id replaces the old document: its postings
        are cleared before the new ones are added. The new text is analyzed
        before anything is cleared, so a failure leaves the index unchanged.

        Args:
            doc_id: Document id (primary key)
            title: Document title (weighting and suggestions only)
            body: Document body (weighting and highlight positions)
        """
        freq_map: Counter[str] = Counter()
        pos_map: dict[str, list[int]] = {}

        # 1. Title terms count towards frequency but record no positions
        for token in self._segment(title):
            term = normalize_term(token)
            if term is not None:
                freq_map[term] += 1

        # 2. Body terms, with character offsets of each located occurrence
        self._index_body(body, freq_map, pos_map)

        # 3. Build postings
        distinct = len(freq_map)
        postings = {
            term: Posting(
                doc_id=doc_id,
                tf=freq / distinct,
                positions=pos_map.get(term, []),
            )
            for term, freq in freq_map.items()
        }

        # 4. Clear existing index entries for this document
        if doc_id in self.index:
            self.index.remove_document(doc_id)
            logger.debug("Replacing document: %s", doc_id)

        # 5. Store document metadata
        document = Document(id=doc_id, title=title, body=body, terms=set(freq_map))
        self.index.add_document(document, postings)

        logger.debug("Indexed: %s (%d terms)", doc_id, distinct)

    def delete_document(self, doc_id: str) -> None:
        """Remove a document from the index. Unknown ids are ignored."""
        if self.index.remove_document(doc_id) is not None:
            logger.debug("Removed: %s", doc_id)

    def _index_body(
        self,
        body: str,
        freq_map: Counter[str],
        pos_map: dict[str, list[int]],
    ) -> None:
        """
        Count body terms and recover their positions.

        Tokens are located by searching for the original-case token from a
        cursor that only moves forward. Filtered tokens still move the
        cursor; a token that cannot be found leaves it where it is.
        """
        cursor = 0
        for token in self._segment(body):
            term = normalize_term(token)
            if term is not None:
                freq_map[term] += 1

            pos = body.find(token, cursor)
            if pos == -1:
                continue

            if term is not None:
                pos_map.setdefault(term, []).append(pos)
            cursor = pos + len(token)
