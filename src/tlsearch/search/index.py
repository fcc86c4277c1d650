"""
In-Memory Index Storage

Holds the document store, the term -> postings map, the title suggestion
set and the live document count. Mutated only by SearchIndexer.
"""

from dataclasses import dataclass, field


@dataclass
class Document:
    """A stored document."""

    id: str
    title: str
    body: str
    terms: set[str] = field(default_factory=set)  # Normalized title + body terms


@dataclass
class Posting:
    """One document's entry in a term's posting list."""

    doc_id: str
    tf: float  # Occurrences / distinct terms in the document
    positions: list[int] = field(default_factory=list)  # Body character offsets


class InvertedIndex:
    """
    Term -> postings map plus the documents those postings point at.

    Invariants:
    - a term key exists only while its posting list is non-empty
    - a term has at most one posting per live document
    - doc_count == len(documents)
    """

    def __init__(self):
        self.documents: dict[str, Document] = {}
        self.postings: dict[str, list[Posting]] = {}
        # Lowercased titles in insertion order; removal leaves them in place
        self.titles: dict[str, None] = {}
        self.doc_count = 0

    def __len__(self) -> int:
        return self.doc_count

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self.documents

    def get_document(self, doc_id: str) -> Document | None:
        return self.documents.get(doc_id)

    def get_postings(self, term: str) -> list[Posting]:
        """Postings for a term in insertion order (empty if unknown)."""
        return self.postings.get(term, [])

    def add_document(self, document: Document, postings: dict[str, Posting]) -> None:
        """Store a document and append its postings. The id must not be live."""
        if document.id in self.documents:
            raise ValueError(f"Document already indexed: {document.id}")

        for term, posting in postings.items():
            self.postings.setdefault(term, []).append(posting)

        self.documents[document.id] = document
        self.titles[document.title.lower()] = None
        self.doc_count += 1

    def remove_document(self, doc_id: str) -> Document | None:
        """Delete a document and scrub its postings. None if unknown."""
        document = self.documents.pop(doc_id, None)
        if document is None:
            return None

        for term in document.terms:
            postings = self.postings.get(term)
            if postings is None:
                continue
            remaining = [p for p in postings if p.doc_id != doc_id]
            if remaining:
                self.postings[term] = remaining
            else:
                del self.postings[term]

        self.doc_count -= 1
        return document
