"""Browser-style key-value storage kept in a single JSON file."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class StorageReadError(ValueError):
    """Persisted data exists but cannot be parsed."""


class MemoryStorage:
    def __init__(self, items: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)


class JsonFileStorage:
    """Same contract as ``localStorage``: string keys, string values.

    The whole file is rewritten on every ``set_item``.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageReadError(f"cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageReadError(f"{self.path} does not hold a JSON object")
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageReadError as e:
            logger.warning("Overwriting unreadable storage file: %s", e)
            data = {}
        data[key] = str(value)
        self._write_all(data)

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
        tmp.replace(self.path)
