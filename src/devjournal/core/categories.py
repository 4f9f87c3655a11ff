"""Journal categories - the fixed set of journal kinds."""

from datetime import date
from enum import Enum

from devjournal.errors import ConfigurationError


class Category(Enum):
    """One of the three journal categories."""

    NOTE = "note"
    DECISION = "decision"
    ARCHITECTURE = "architecture"

    @property
    def dir_name(self) -> str:
        """Directory holding this category's files."""
        return {
            Category.NOTE: "notes",
            Category.DECISION: "decisions",
            Category.ARCHITECTURE: "architecture",
        }[self]

    @property
    def title(self) -> str:
        """Title used in the file header."""
        return {
            Category.NOTE: "Session Notes",
            Category.DECISION: "Decisions",
            Category.ARCHITECTURE: "Architecture Notes",
        }[self]

    def filename(self, target_date: date) -> str:
        """File name for this category on a date, e.g. 11082025_note.md."""
        return f"{target_date.strftime('%d%m%Y')}_{self.value}.md"

    @classmethod
    def choices(cls) -> list[str]:
        return [c.value for c in cls]

    @classmethod
    def parse(cls, value: str) -> "Category":
        """Resolve a user-supplied category name (case-insensitive)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = ", ".join(cls.choices())
            raise ConfigurationError(
                f"Invalid category '{value}'. Allowed: {allowed}"
            ) from None
