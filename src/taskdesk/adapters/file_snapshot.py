"""File-based snapshot storage adapters."""

from pathlib import Path


class FileSnapshotStore:
    """
    File-based snapshot storage.

    Implements SnapshotStore protocol. Each key gets a JSON file.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    def _path_for_key(self, key: str) -> Path:
        """Get the file path for a given key."""
        return self.data_dir / f"{key}.json"

    def read(self, key: str) -> str | None:
        """Read the raw snapshot for a key. Returns None if not found."""
        path = self._path_for_key(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, text: str) -> None:
        """Write/overwrite the snapshot, replacing the file in one step."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self._path_for_key(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(path)


class MemorySnapshotStore:
    """In-memory SnapshotStore for tests and dry runs."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.snapshots: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self.snapshots.get(key)

    def write(self, key: str, text: str) -> None:
        self.snapshots[key] = text
