"""Journal file text format - headers, entry blocks, and parsing."""

import re
from dataclasses import dataclass
from datetime import date

from .categories import Category

HEADING_PREFIX = "## "
DEFAULT_TAIL_BLOCKS = 5
_TIMESTAMP_RE = re.compile(r"^## (\d{2}:\d{2}:\d{2})\s*$")


@dataclass(frozen=True)
class JournalEntry:
    """A single timestamped block read back from a journal file."""

    timestamp: str
    text: str

    def to_block(self) -> str:
        return f"{HEADING_PREFIX}{self.timestamp}\n{self.text}"


def human_date(target_date: date) -> str:
    """Month Day, Year without zero padding, e.g. 'August 11, 2025'."""
    return f"{target_date.strftime('%B')} {target_date.day}, {target_date.year}"


def format_header(category: Category, target_date: date) -> str:
    """Header line plus one blank line for a new journal file."""
    return f"# {category.title} - {human_date(target_date)}\n\n"


def format_entry(timestamp: str, text: str) -> str:
    """
    Render an entry for appending.

    A blank line, the timestamp sub-heading, then the text with a trailing newline.
    """
    body = text if text.endswith("\n") else f"{text}\n"
    return f"\n{HEADING_PREFIX}{timestamp}\n{body}"


def parse_entries(content: str) -> list[JournalEntry]:
    """Split journal file content into entries, in file order."""
    entries = []
    timestamp = None
    lines: list[str] = []

    for line in content.splitlines():
        match = _TIMESTAMP_RE.match(line)
        if match:
            if timestamp is not None:
                entries.append(JournalEntry(timestamp, "\n".join(lines).strip("\n")))
            timestamp = match.group(1)
            lines = []
        elif timestamp is not None:
            lines.append(line)

    if timestamp is not None:
        entries.append(JournalEntry(timestamp, "\n".join(lines).strip("\n")))

    return entries
