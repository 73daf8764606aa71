"""Local key-value storage backed by a single JSON file."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from calorie_tracker.services.storage import KeyValueStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores string values by key in one JSON object on disk.

    Every write rewrites the whole file. A missing or unreadable file reads
    as an empty store.
    """

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key."""
        entries = self._load()
        entries[key] = value
        self._dump(entries)

    def remove_item(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
        entries = self._load()
        if entries.pop(key, None) is None:
            return
        self._dump(entries)

    def _load(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _logger.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, entries: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(entries, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)
