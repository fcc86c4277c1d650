"""
Snippet Generation for Search Results

Generates KWIC (Key Word In Context) snippets around the highlight
positions recorded at index time.
"""

from dataclasses import dataclass


@dataclass
class Snippet:
    """A text snippet with optional highlighting."""

    text: str  # The snippet text (may include HTML <mark> tags)
    plain_text: str  # The snippet without HTML tags


def _head(text: str, window_size: int) -> Snippet:
    plain = text[:window_size] + "..." if len(text) > window_size else text
    return Snippet(text=plain, plain_text=plain)


def match_spans(
    text: str,
    positions: list[int],
    terms: list[str],
) -> list[tuple[int, int]]:
    """
    Resolve highlight positions into (start, end) spans.

    A position becomes a span when the text there equals one of the terms,
    case-insensitively; the longest matching term wins. Overlapping spans
    are dropped.
    """
    by_length = sorted({t for t in terms if t}, key=len, reverse=True)
    spans: list[tuple[int, int]] = []
    last_end = -1
    for pos in sorted(set(positions)):
        if pos < last_end:
            continue
        for term in by_length:
            end = pos + len(term)
            if text[pos:end].lower() == term:
                spans.append((pos, end))
                last_end = end
                break
    return spans


def generate_snippet(
    text: str,
    positions: list[int],
    terms: list[str],
    window_size: int = 150,
    highlight: bool = True,
) -> Snippet:
    """
    Generate a snippet centred on the first highlight position.

    Args:
        text: The original body text.
        positions: Character offsets where matched terms begin.
        terms: Normalized query terms, used to find where each match ends.
        window_size: Approximate size of the snippet window.
        highlight: Whether to add <mark> tags for highlighting.

    Returns:
        Snippet object with text and plain_text
    """
    if not text:
        return Snippet(text="", plain_text="")

    spans = match_spans(text, positions, terms)
    if not spans:
        return _head(text, window_size)

    # 1. Extract context window around the first match
    start_pos = spans[0][0]
    half_window = window_size // 2
    snippet_start = max(0, start_pos - half_window)
    snippet_end = min(len(text), start_pos + half_window)

    # 2. Adjust to avoid cutting words
    if snippet_start > 0:
        space_pos = text.rfind(" ", 0, snippet_start + 20)
        if space_pos != -1 and snippet_start - 20 < space_pos < start_pos:
            snippet_start = space_pos + 1

    if snippet_end < len(text):
        space_pos = text.find(" ", snippet_end - 20)
        if space_pos != -1 and spans[0][1] <= space_pos < snippet_end + 20:
            snippet_end = space_pos

    plain_text = text[snippet_start:snippet_end].strip()

    # 3. Highlight spans falling inside the window
    if highlight:
        parts = []
        cursor = snippet_start
        for start, end in spans:
            if start < snippet_start or end > snippet_end:
                continue
            parts.append(text[cursor:start])
            parts.append(f"<mark>{text[start:end]}</mark>")
            cursor = end
        parts.append(text[cursor:snippet_end])
        snippet = "".join(parts).strip()
    else:
        snippet = plain_text

    # 4. Add ellipsis if needed
    if snippet_start > 0:
        snippet = "..." + snippet
        plain_text = "..." + plain_text
    if snippet_end < len(text):
        snippet = snippet + "..."
        plain_text = plain_text + "..."

    return Snippet(text=snippet, plain_text=plain_text)

