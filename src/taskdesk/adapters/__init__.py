"""Adapters - I/O implementations of ports."""

from .file_snapshot import FileSnapshotStore, MemorySnapshotStore
from .gemini_api import GeminiAPIService

__all__ = [
    "FileSnapshotStore",
    "MemorySnapshotStore",
    "GeminiAPIService",
]
