"""Summary classifier interface."""

from typing import Protocol


class SummaryClassifier(Protocol):
    """Decides whether a ticket summary should be mirrored into decisions."""

    def is_architecture_worthy(self, summary: str) -> bool:
        ...
