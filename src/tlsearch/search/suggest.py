"""Title suggestions for typeahead."""

from tlsearch.search.index import InvertedIndex


class TitleSuggester:
    """Matches a fragment against every lowercased title ever indexed."""

    def __init__(self, index: InvertedIndex, limit: int = 10):
        self.index = index
        self.limit = limit

    def suggest(self, prefix: str) -> list[str]:
        """
        Titles containing ``prefix`` anywhere, case-insensitively.

        Despite the name, matching is by substring, not by true prefix.
        Titles come back in insertion order, at most ``limit`` of them.
        """
        needle = prefix.lower()
        matches = []
        for title in self.index.titles:
            if len(matches) >= self.limit:
                break
            if needle in title:
                matches.append(title)
        return matches
