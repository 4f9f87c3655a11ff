"""Context store interface."""

from datetime import date
from pathlib import Path
from typing import Protocol

from devjournal.core.categories import Category
from devjournal.core.entries import DEFAULT_TAIL_BLOCKS, JournalEntry


class ContextStore(Protocol):
    """Interface for per-day, per-category journal storage."""

    def path_for(self, category: Category, target_date: date) -> Path:
        """Canonical path for a (category, date) pair."""
        ...

    def exists(self, category: Category, target_date: date) -> bool:
        """Check if the journal file for (category, date) exists."""
        ...

    def ensure_file(self, category: Category, target_date: date) -> tuple[Path, bool]:
        """Create the journal file with its header if absent. Returns (path, created)."""
        ...

    def append(self, path: Path, timestamp: str, text: str) -> None:
        """Append a timestamped entry to a journal file."""
        ...

    def tail(self, path: Path, max_blocks: int = DEFAULT_TAIL_BLOCKS) -> list[JournalEntry] | None:
        """Last entries of a journal file, or None if the file does not exist."""
        ...
