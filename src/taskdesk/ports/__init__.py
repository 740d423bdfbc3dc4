"""Ports - interfaces/protocols for external dependencies."""

from .snapshot_store import SnapshotStore
from .llm_service import LLMService

__all__ = [
    "SnapshotStore",
    "LLMService",
]
