"""
Favorites persistence — a tiny key-value layer plus the favorites list on top.

JsonFileStore keeps everything in one JSON document on disk. Swap it for
anything else by implementing the same get/set interface.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


class KeyValueStore:
    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any):
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, data: Dict[str, Any] = None):
        self._data = dict(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any):
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """Values are stored JSON-encoded under their key, like browser localStorage."""

    def __init__(self, path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Could not read %s, starting empty", self.path, exc_info=True)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._read().get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring unreadable value for %r in %s", key, self.path)
            return default

    def set(self, key: str, value: Any):
        data = self._read()
        data[key] = json.dumps(value, ensure_ascii=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


class FavoritesStore:
    """
    Ordered, de-duplicated list of city names.

    Loaded once when constructed; the whole list is written back after
    every add. There is no remove.
    """

    def __init__(self, backend: KeyValueStore):
        self.backend = backend
        self._items = self._load()

    def _load(self) -> List[str]:
        items = self.backend.get(FAVORITES_KEY, [])
        if not isinstance(items, list):
            logger.warning("Favorites value is not a list, ignoring it")
            return []
        return [item for item in items if isinstance(item, str)]

    def add(self, name: str) -> bool:
        """Append name if new. Returns True when the list changed."""
        if not name or not name.strip() or name in self._items:
            return False
        self._items.append(name)
        self.backend.set(FAVORITES_KEY, list(self._items))
        logger.info("Added %r to favorites (%d total)", name, len(self._items))
        return True

    def list(self) -> List[str]:
        return list(self._items)

    get = list

    def __contains__(self, name: str) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)
