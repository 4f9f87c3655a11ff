"""Functional core - pure journal logic with no I/O."""

from .categories import Category
from .classifier import ARCHITECTURE_KEYWORDS, KeywordClassifier, is_architecture_worthy
from .entries import DEFAULT_TAIL_BLOCKS, JournalEntry, format_entry, format_header, human_date, parse_entries

__all__ = [
    # Categories
    "Category",
    # Classifier
    "ARCHITECTURE_KEYWORDS",
    "KeywordClassifier",
    "is_architecture_worthy",
    # Entries
    "DEFAULT_TAIL_BLOCKS",
    "JournalEntry",
    "format_entry",
    "format_header",
    "human_date",
    "parse_entries",
]
