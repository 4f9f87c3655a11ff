"""Ports - interfaces/protocols for external dependencies."""

from .classifier import SummaryClassifier
from .context_store import ContextStore

__all__ = [
    "ContextStore",
    "SummaryClassifier",
]
