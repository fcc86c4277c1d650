"""
Text Analyzer

Segments text into word tokens using SudachiPy for scripts without
whitespace-delimited words, and normalizes tokens into index terms.
Shared by the indexer and the query engine.
"""

import logging
import re
import threading
from typing import Callable

from sudachipy import Dictionary, SplitMode

from tlsearch.core.config import settings
from tlsearch.stopwords import is_stop_word

logger = logging.getLogger(__name__)

# Type alias for segmentation function: text -> tokens in document order
Segmenter = Callable[[str], list[str]]

MIN_TERM_LENGTH = 2

_WORD_RE = re.compile(r"\w+")

# Sudachi rejects input over 49149 bytes; stay below it
MAX_CHUNK_BYTES = 48000

# A sentence: a run up to and including its terminators (or a bare terminator run)
_SENTENCE_RE = re.compile(r"[^。！？!?\n]+[。！？!?\n]*|[。！？!?\n]+")


class AnalyzerUnavailableError(RuntimeError):
    """The tokenizer dictionary could not be loaded."""


class TextAnalyzer:
    def __init__(self, mode: str = "A"):
        try:
            self.tokenizer = Dictionary().create()
        except Exception as e:
            logger.error(f"Failed to load Sudachi dictionary: {e}", exc_info=True)
            raise AnalyzerUnavailableError(
                "Tokenizer dictionary could not be loaded"
            ) from e
        # Mode A: Shortest (High Recall e.g. 東京都 -> 東京, 都)
        # Mode C: Longest (High Precision e.g. 東京都 -> 東京都)
        if mode == "A":
            self.mode = SplitMode.A
        elif mode == "B":
            self.mode = SplitMode.B
        else:
            self.mode = SplitMode.C
        logger.info("Loaded Sudachi dictionary (split mode %s)", mode)

    def segment(self, text: str) -> list[str]:
        """
        Split text into word tokens, in document order.

        Every token is a substring of ``text``; whitespace is dropped.

        Raises:
            Exception: Re-raises tokenization errors after logging
        """
        if not text or not text.strip():
            return []

        # No CJK: plain word runs are enough
        if not self._needs_segmentation(text):
            return _WORD_RE.findall(text)

        try:
            surfaces = []
            for chunk in split_for_tokenizer(text):
                tokens = self.tokenizer.tokenize(chunk, self.mode)
                surfaces.extend(t.surface() for t in tokens if t.surface().strip())
            return surfaces
        except Exception as e:
            logger.error(
                f"Tokenization failed for text (len={len(text)}): {e}",
                exc_info=True,
            )
            raise

    def _needs_segmentation(self, text: str) -> bool:
        # Check for Hiragana, Katakana, or Common CJK Unified Ideographs
        # Hiragana: 3040-309F
        # Katakana: 30A0-30FF
        # Kanji/Hanzi: 4E00-9FFF
        for char in text:
            code = ord(char)
            if (
                (0x3040 <= code <= 0x309F)
                or (0x30A0 <= code <= 0x30FF)
                or (0x4E00 <= code <= 0x9FFF)
            ):
                return True
        return False


def normalize_term(token: str) -> str | None:
    """Lowercase a token; None if it is too short or a stop word."""
    term = token.lower()
    if len(term) < MIN_TERM_LENGTH or is_stop_word(term):
        return None
    return term


def analyze(text: str, segmenter: Segmenter) -> list[str]:
    """Segment and normalize text into index terms, keeping duplicates."""
    terms = []
    for token in segmenter(text):
        term = normalize_term(token)
        if term is not None:
            terms.append(term)
    return terms


def split_for_tokenizer(text: str, limit: int = MAX_CHUNK_BYTES) -> list[str]:
    """
    Split text into consecutive pieces of at most ``limit`` UTF-8 bytes.

    Pieces end at sentence terminators or newlines where possible; a single
    sentence longer than the limit is cut by character count. Joining the
    pieces gives back ``text``.
    """
    chunks: list[str] = []
    current: list[str] = []
    current_bytes = 0

    for match in _SENTENCE_RE.finditer(text):
        sentence = match.group(0)
        size = len(sentence.encode("utf-8"))

        if current and current_bytes + size > limit:
            chunks.append("".join(current))
            current, current_bytes = [], 0

        if size > limit:
            # At most 4 bytes per character in UTF-8
            step = max(1, limit // 4)
            chunks.extend(sentence[i : i + step] for i in range(0, len(sentence), step))
            continue

        current.append(sentence)
        current_bytes += size

    if current:
        chunks.append("".join(current))
    return chunks


# Process-wide instance, created on first use
_analyzer: TextAnalyzer | None = None
_analyzer_lock = threading.Lock()


def get_analyzer() -> TextAnalyzer:
    """Return the shared analyzer, loading the dictionary exactly once."""
    global _analyzer
    if _analyzer is None:
        with _analyzer_lock:
            if _analyzer is None:
                _analyzer = TextAnalyzer(mode=settings.SPLIT_MODE)
    return _analyzer


def initialize() -> TextAnalyzer:
    """Load the tokenizer up front so a missing dictionary aborts startup."""
    return get_analyzer()
