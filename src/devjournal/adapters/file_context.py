"""File-based context store adapter."""

import logging
from datetime import date
from pathlib import Path

from devjournal.core.categories import Category
from devjournal.core.entries import (
    DEFAULT_TAIL_BLOCKS,
    JournalEntry,
    format_entry,
    format_header,
    parse_entries,
)
from devjournal.errors import StorageError

logger = logging.getLogger(__name__)


class FileContextStore:
    """
    File-based context storage.

    Implements ContextStore protocol. Each (category, day) pair gets one markdown
    file at <root>/<category dir>/<DDMMYYYY>_<category>.md. Files are only ever
    created or appended to.

    Known limitations:
    - There is no locking, so concurrent appends from separate processes may
      interleave.
    - Entry text is written verbatim. A line of text that looks like a
      timestamp heading (e.g. "## 23:59:59") is read back by tail() as the
      start of a separate entry.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root).expanduser()

    def path_for(self, category: Category, target_date: date) -> Path:
        """Get the file path for a category on a given date."""
        return self.root / category.dir_name / category.filename(target_date)

    def exists(self, category: Category, target_date: date) -> bool:
        """Check if the journal file exists for a category and date."""
        return self.path_for(category, target_date).is_file()

    def ensure_file(self, category: Category, target_date: date) -> tuple[Path, bool]:
        """
        Create the journal file with its header if it does not exist yet.

        Returns the path and whether the file was created by this call. Existing
        files are never truncated.
        """
        path = self.path_for(category, target_date)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create directory {path.parent}: {e}") from e

        try:
            # "x" fails if another call created the file first, so the header is
            # never written twice.
            with path.open("x", encoding="utf-8") as f:
                f.write(format_header(category, target_date))
        except FileExistsError:
            if not path.is_file():
                raise StorageError(f"Path exists and is not a file: {path}") from None
            return path, False
        except OSError as e:
            raise StorageError(f"Cannot create journal file {path}: {e}") from e

        logger.debug(f"Created journal file {path}")
        return path, True

    def append(self, path: Path, timestamp: str, text: str) -> None:
        """Append a timestamped entry without rewriting existing content."""
        try:
            with Path(path).open("a", encoding="utf-8") as f:
                f.write(format_entry(timestamp, text))
        except OSError as e:
            raise StorageError(f"Cannot append to {path}: {e}") from e
        logger.debug(f"Appended entry at {timestamp} to {path}")

    def tail(self, path: Path, max_blocks: int = DEFAULT_TAIL_BLOCKS) -> list[JournalEntry] | None:
        """Return the last N entries, or None if the file does not exist."""
        path = Path(path)
        if not path.is_file():
            return None
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

        entries = parse_entries(content)
        if max_blocks <= 0:
            return []
        return entries[-max_blocks:]
