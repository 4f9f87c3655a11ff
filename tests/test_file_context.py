"""Tests for the file-based context store."""

from datetime import date

import pytest

from devjournal.adapters.file_context import FileContextStore
from devjournal.core.categories import Category
from devjournal.core.entries import JournalEntry
from devjournal.errors import StorageError


@pytest.fixture
def today():
    return date(2025, 8, 11)


@pytest.fixture
def store(tmp_path):
    return FileContextStore(tmp_path / "context")


class TestPathFor:
    def test_layout(self, store, today):
        assert store.path_for(Category.NOTE, today) == store.root / "notes" / "11082025_note.md"
        assert store.path_for(Category.DECISION, today) == store.root / "decisions" / "11082025_decision.md"
        assert store.path_for(Category.ARCHITECTURE, today) == (
            store.root / "architecture" / "11082025_architecture.md"
        )

    def test_deterministic(self, store, today):
        assert str(store.path_for(Category.NOTE, today)) == str(store.path_for(Category.NOTE, today))

    def test_does_not_touch_disk(self, store, today):
        store.path_for(Category.NOTE, today)
        assert not store.root.exists()


class TestEnsureFile:
    def test_creates_directories_and_header(self, store, today):
        path, created = store.ensure_file(Category.NOTE, today)

        assert created
        assert path.read_text() == "# Session Notes - August 11, 2025\n\n"

    def test_idempotent_header(self, store, today):
        path, _ = store.ensure_file(Category.DECISION, today)
        store.append(path, "09:00:00", "Kept")

        for _ in range(3):
            again, created = store.ensure_file(Category.DECISION, today)
            assert again == path
            assert not created

        content = path.read_text()
        assert content.count("# Decisions - ") == 1
        assert "Kept" in content

    def test_exists(self, store, today):
        assert not store.exists(Category.NOTE, today)
        store.ensure_file(Category.NOTE, today)
        assert store.exists(Category.NOTE, today)
        assert not store.exists(Category.DECISION, today)

    def test_directory_conflict_is_storage_error(self, tmp_path, today):
        root = tmp_path / "context"
        root.mkdir()
        (root / "notes").write_text("not a directory")
        store = FileContextStore(root)

        with pytest.raises(StorageError):
            store.ensure_file(Category.NOTE, today)

    def test_path_is_directory_is_storage_error(self, store, today):
        store.path_for(Category.NOTE, today).mkdir(parents=True)

        with pytest.raises(StorageError):
            store.ensure_file(Category.NOTE, today)


class TestAppend:
    def test_preserves_prior_bytes(self, store, today):
        path, _ = store.ensure_file(Category.NOTE, today)
        store.append(path, "09:00:00", "First")
        before = path.read_bytes()

        store.append(path, "09:05:00", "Second")

        after = path.read_bytes()
        assert after == before + b"\n## 09:05:00\nSecond\n"

    def test_missing_directory_is_storage_error(self, store, tmp_path):
        with pytest.raises(StorageError):
            store.append(tmp_path / "missing" / "x.md", "09:00:00", "text")


class TestTail:
    def test_absent_file_returns_none(self, store, today):
        assert store.tail(store.path_for(Category.NOTE, today)) is None

    def test_header_only_returns_empty(self, store, today):
        path, _ = store.ensure_file(Category.NOTE, today)
        assert store.tail(path) == []

    def test_returns_last_blocks(self, store, today):
        path, _ = store.ensure_file(Category.NOTE, today)
        for i in range(7):
            store.append(path, f"09:00:0{i}", f"Entry {i}")

        entries = store.tail(path)

        assert len(entries) == 5
        assert entries[0] == JournalEntry("09:00:02", "Entry 2")
        assert entries[-1] == JournalEntry("09:00:06", "Entry 6")

    def test_custom_block_count(self, store, today):
        path, _ = store.ensure_file(Category.NOTE, today)
        store.append(path, "09:00:00", "A")
        store.append(path, "09:00:01", "B")

        assert [e.text for e in store.tail(path, 1)] == ["B"]
        assert store.tail(path, 0) == []

    def test_invalid_utf8_is_storage_error(self, store, today):
        path, _ = store.ensure_file(Category.NOTE, today)
        with path.open("ab") as f:
            f.write(b"\n## 10:00:00\n\xff\xfe bad\n")

        with pytest.raises(StorageError, match="Cannot read"):
            store.tail(path)

    def test_heading_like_line_in_text_reads_back_as_new_entry(self, store, today):
        path, _ = store.ensure_file(Category.NOTE, today)
        store.append(path, "09:00:00", "Real\n## 23:59:59\nlooks like an entry")

        entries = store.tail(path)

        assert entries == [
            JournalEntry("09:00:00", "Real"),
            JournalEntry("23:59:59", "looks like an entry"),
        ]
