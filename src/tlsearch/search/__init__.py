"""In-memory Full-Text Search Engine."""

from tlsearch.search.index import Document, InvertedIndex, Posting
from tlsearch.search.indexer import SearchIndexer
from tlsearch.search.searcher import SearchEngine, SearchHit
from tlsearch.search.scoring import TfIdfScorer, TfIdfConfig
from tlsearch.search.snippet import generate_snippet, Snippet
from tlsearch.search.suggest import TitleSuggester

__all__ = [
    "Document",
    "InvertedIndex",
    "Posting",
    "SearchIndexer",
    "SearchEngine",
    "SearchHit",
    "TfIdfScorer",
    "TfIdfConfig",
    "generate_snippet",
    "Snippet",
    "TitleSuggester",
]
