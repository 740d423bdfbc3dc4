"""Snapshot storage interface."""

from typing import Protocol


class SnapshotStore(Protocol):
    """Interface for whole-collection key/value persistence."""

    def read(self, key: str) -> str | None:
        """Read the raw snapshot for a key. Returns None if absent."""
        ...

    def write(self, key: str, text: str) -> None:
        """Write/overwrite the raw snapshot for a key."""
        ...
