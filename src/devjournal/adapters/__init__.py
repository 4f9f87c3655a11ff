"""Adapters - I/O implementations of ports."""

from .file_context import FileContextStore

__all__ = [
    "FileContextStore",
]
