"""Command workflows - one function per CLI command.

Each function takes a context store and the current time, performs the
command's writes through the store, and returns a confirmation string.
Session state is never cached: "is a session active" is always answered
by checking whether today's note file exists.
"""

import logging
from datetime import datetime

from .core.categories import Category
from .core.classifier import KeywordClassifier
from .core.entries import DEFAULT_TAIL_BLOCKS, JournalEntry
from .errors import StateError
from .ports.classifier import SummaryClassifier
from .ports.context_store import ContextStore

logger = logging.getLogger(__name__)

SESSION_STARTED = "Session started. Ready to pick tickets and log progress."
SESSION_RESUMED = "Session resumed."
NO_SESSION = "No session today. Run 'devjournal start-session' first."


def _timestamp(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def _require_session(store: ContextStore, now: datetime) -> None:
    """Raise StateError unless today's note file exists."""
    if not store.exists(Category.NOTE, now.date()):
        raise StateError("No session started today. Run 'devjournal start-session' first.")


def start_session(store: ContextStore, now: datetime) -> str:
    """Create or resume today's note journal."""
    path, created = store.ensure_file(Category.NOTE, now.date())
    store.append(path, _timestamp(now), SESSION_STARTED if created else SESSION_RESUMED)

    if created:
        logger.info(f"Session started in {path}")
        return f"Session started: {path}"
    logger.info(f"Session resumed in {path}")
    return f"Session resumed: {path}"


def pick_ticket(store: ContextStore, now: datetime, ticket_id: str) -> str:
    """Record the active ticket in today's note journal."""
    _require_session(store, now)
    path = store.path_for(Category.NOTE, now.date())
    store.append(path, _timestamp(now), f"Active Ticket: {ticket_id}")
    logger.info(f"Picked ticket {ticket_id}")
    return f"Active ticket: {ticket_id}"


def update_context(store: ContextStore, now: datetime, category: Category | str, message: str) -> str:
    """Append a message verbatim to today's journal for a category."""
    if not isinstance(category, Category):
        category = Category.parse(category)

    path, _ = store.ensure_file(category, now.date())
    store.append(path, _timestamp(now), message)
    return f"Logged {category.value} entry to {path}"


def finish_ticket(
    store: ContextStore,
    now: datetime,
    ticket_id: str,
    summary: str,
    classifier: SummaryClassifier | None = None,
) -> str:
    """
    Record ticket completion, mirroring architecture-worthy summaries to decisions.

    Requires an active session, the same as pick_ticket.
    """
    _require_session(store, now)
    classifier = classifier or KeywordClassifier()
    timestamp = _timestamp(now)

    note_path = store.path_for(Category.NOTE, now.date())
    store.append(note_path, timestamp, f"Completed Ticket: {ticket_id}\nSummary: {summary}")
    logger.info(f"Finished ticket {ticket_id}")

    lines = [f"Completed ticket: {ticket_id}"]

    if classifier.is_architecture_worthy(summary):
        decision_path, _ = store.ensure_file(Category.DECISION, now.date())
        store.append(decision_path, timestamp, f"Decision from Ticket {ticket_id}\n{summary}")
        logger.info(f"Mirrored ticket {ticket_id} to {decision_path}")
        lines.append(f"Architecture-relevant summary recorded in {decision_path}")

    return "\n".join(lines)


def recent_entries(
    store: ContextStore,
    now: datetime,
    max_blocks: int = DEFAULT_TAIL_BLOCKS,
    category: Category = Category.NOTE,
) -> list[JournalEntry] | None:
    """Last entries of today's journal for a category, or None if absent."""
    return store.tail(store.path_for(category, now.date()), max_blocks)


def status(
    store: ContextStore,
    now: datetime,
    max_blocks: int = DEFAULT_TAIL_BLOCKS,
    category: Category = Category.NOTE,
) -> str:
    """Render recent entries of today's journal. Never writes."""
    entries = recent_entries(store, now, max_blocks, category)

    if entries is None:
        if category is Category.NOTE:
            return NO_SESSION
        return f"No {category.value} entries today."

    heading = f"{category.title} for {now.strftime('%A, %b %d')}"
    if not entries:
        return f"{heading}\n\n(no entries yet)"

    blocks = "\n\n".join(entry.to_block() for entry in entries)
    return f"{heading}\n\n{blocks}"
