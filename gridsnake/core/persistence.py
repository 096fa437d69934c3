# gridsnake/core/persistence.py
from __future__ import annotations
import json, os, tempfile
from typing import Dict, Optional

class MemoryStore:
    """In-process KeyValueStore (tests, --no-save)."""
    def __init__(self, initial: Optional[Dict[str, int]] = None):
        self.data: Dict[str, int] = dict(initial or {})

    def get(self, key: str) -> Optional[int]:
        return self.data.get(key)

    def set(self, key: str, value: int) -> None:
        self.data[key] = int(value)

class JsonFileStore:
    """KeyValueStore backed by a single JSON object on disk.

    A missing, unreadable or corrupt file reads as empty; write errors propagate.
    """
    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def _load(self) -> Dict[str, object]:
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[int]:
        val = self._load().get(key)
        if isinstance(val, bool):
            return None
        try:
            return int(val) if val is not None else None
        except (TypeError, ValueError):
            return None

    def set(self, key: str, value: int) -> None:
        data = self._load()
        data[key] = int(value)
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        # readers only ever see the old file or the complete new one
        fd, tmp = tempfile.mkstemp(dir=parent or ".", prefix=".best-", suffix=".json")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
