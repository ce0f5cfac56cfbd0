"""Local key-value store

Mirrors the browser's localStorage: each key maps to a JSON-encoded string,
and the whole map lives in a single JSON file. Every failure degrades to the
caller's default value (reads) or a False return (writes) and is logged;
nothing here raises into the cart.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class LocalStore:
    """JSON-file backed key-value store. ``path=None`` keeps it in memory."""

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path) if path else None
        self._memory: dict[str, str] = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Read and decode a key, falling back to ``default`` on any failure"""
        try:
            raw = self._read_all().get(key)
            return json.loads(raw) if raw else default
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error reading '{key}' from local store: {e}")
            return default

    def set(self, key: str, value: Any) -> bool:
        """Encode and write a key; returns False if the write failed"""
        try:
            encoded = json.dumps(value)
            items = self._read_all_for_write()
            items[key] = encoded
            self._write_all(items)
            return True
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error writing '{key}' to local store: {e}")
            return False

    def remove(self, key: str) -> bool:
        try:
            items = self._read_all_for_write()
            items.pop(key, None)
            self._write_all(items)
            return True
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error removing '{key}' from local store: {e}")
            return False

    def _read_all(self) -> dict[str, str]:
        if self.path is None:
            return self._memory
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("store file does not hold a JSON object")
        return data

    def _read_all_for_write(self) -> dict[str, str]:
        # A corrupted file is replaced rather than blocking every later write
        try:
            return dict(self._read_all())
        except ValueError as e:
            logger.warning(f"Discarding unreadable local store {self.path}: {e}")
            return {}

    def _write_all(self, items: dict[str, str]) -> None:
        if self.path is None:
            self._memory = items
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(items, f)
        os.replace(tmp_path, self.path)
