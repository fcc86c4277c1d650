"""
Engine Configuration

Settings for the embedded search engine, read once from the environment.
Defaults reproduce the fixed ranking and suggestion behaviour.
"""

import os


VALID_SPLIT_MODES = ("A", "B", "C")


def _get_int(name: str, default: str) -> int:
    """Read a positive integer environment variable."""
    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid {name} value: '{raw}'. Must be an integer.")
    if value <= 0:
        raise RuntimeError(f"Invalid {name} value: '{raw}'. Must be positive.")
    return value


def _get_split_mode() -> str:
    """Get and validate TLSEARCH_SPLIT_MODE."""
    mode = os.getenv("TLSEARCH_SPLIT_MODE", "A").upper()
    if mode not in VALID_SPLIT_MODES:
        raise RuntimeError(
            f"Invalid TLSEARCH_SPLIT_MODE value: '{mode}'. Must be 'A', 'B', or 'C'."
        )
    return mode


class Settings:
    """Engine-level configuration (tokenizer, limits)"""

    # Tokenizer
    # Mode A: Shortest (High Recall), Mode C: Longest (High Precision)
    SPLIT_MODE: str = _get_split_mode()

    # Query defaults
    SEARCH_LIMIT: int = _get_int("TLSEARCH_SEARCH_LIMIT", "10")
    SUGGEST_LIMIT: int = _get_int("TLSEARCH_SUGGEST_LIMIT", "10")

    # Snippets
    SNIPPET_WINDOW: int = _get_int("TLSEARCH_SNIPPET_WINDOW", "150")


settings = Settings()
