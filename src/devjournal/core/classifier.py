"""Classifier for architecture-worthy ticket summaries."""

ARCHITECTURE_KEYWORDS = frozenset({"architecture", "design", "structure", "system"})


class KeywordClassifier:
    """
    Case-insensitive substring match against a fixed vocabulary.

    Implements SummaryClassifier protocol. No tokenization or negation handling:
    "not about architecture" still matches.
    """

    def __init__(self, keywords: frozenset[str] | set[str] = ARCHITECTURE_KEYWORDS):
        self.keywords = frozenset(k.lower() for k in keywords)

    def is_architecture_worthy(self, summary: str) -> bool:
        text = summary.lower()
        return any(keyword in text for keyword in self.keywords)


def is_architecture_worthy(summary: str) -> bool:
    """Check a summary against the default vocabulary."""
    return KeywordClassifier().is_architecture_worthy(summary)
