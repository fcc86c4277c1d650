"""Fixed stop-word set excluded from indexing and queries."""

STOP_WORDS: frozenset[str] = frozenset(
    [
        # Chinese (most frequent function words)
        "的", "了", "和", "是", "在", "我", "有", "之", "与", "或",
        "这", "那", "个", "你", "他", "她", "它", "我们", "他们", "一个",
        "被", "到", "就", "为", "于", "等", "从", "对", "还", "说", "也",
        "但", "而", "后", "来", "得", "中", "上", "下", "里", "很", "都",
        # English
        "a", "an", "the", "and", "or", "but", "to", "of", "in", "on", "at",
        "for", "with", "by", "from", "as", "is", "was", "are", "were", "be",
        "this", "that", "i", "you", "he", "she", "it", "we", "they",
    ]
)


def is_stop_word(term: str) -> bool:
    """Check a lowercased term against the stop-word set."""
    return term in STOP_WORDS
