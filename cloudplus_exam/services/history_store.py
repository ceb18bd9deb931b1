"""
services/history_store.py

Score history, persisted as one named entry of a small JSON key-value
file (the desktop counterpart of browser local storage).

Every operation fails soft: a missing, unreadable or corrupt file is
treated as empty history and write errors are logged, never raised.
"""

import json
import logging
import os
from typing import Any, Dict, List

from pydantic import NonNegativeInt, TypeAdapter, ValidationError

from config import HISTORY_FILE, HISTORY_KEY

logger = logging.getLogger(__name__)

_SCORES = TypeAdapter(List[NonNegativeInt])


class HistoryStore:
    def __init__(self, path: str = HISTORY_FILE, key: str = HISTORY_KEY):
        self.path = path
        self.key = key

    # ── storage file ─────────────────────────────────────────────────────────

    def _read_storage(self) -> Dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"Score history unreadable, treating as empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Score history storage is not a JSON object, treating as empty")
            return {}
        return data

    def _write_storage(self, data: Dict[str, Any]) -> None:
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            tmp_path = f"{self.path}.tmp"
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(f"Could not save score history to {self.path}: {e}")

    # ── public API ───────────────────────────────────────────────────────────

    def load(self) -> List[int]:
        raw = self._read_storage().get(self.key)
        if raw is None:
            return []
        try:
            return _SCORES.validate_python(raw)
        except ValidationError:
            logger.warning(f"Malformed score history entry '{self.key}', treating as empty")
            return []

    def append(self, score: int) -> List[int]:
        """Append a score and persist. Returns the updated history."""
        history = self.load() + [int(score)]
        data = self._read_storage()
        data[self.key] = history
        self._write_storage(data)
        logger.info(f"Score {score} saved (attempt {len(history)})")
        return history

    def clear(self) -> None:
        data = self._read_storage()
        if self.key not in data:
            return
        del data[self.key]
        self._write_storage(data)
        logger.info("Score history cleared")
