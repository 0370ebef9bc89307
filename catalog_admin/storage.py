"""
Key/value storage backends used for the session token and user preferences.
"""

import os
import json
import logging
from typing import Dict, Optional

logger = logging.getLogger("catalog_admin.storage")


class MemoryStorage:
    """Storage that lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove_item(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileStorage:
    """
    Storage persisted as a JSON object in a file.

    The file is re-read on every access so several processes see the same
    values, and it is deleted once the last key is removed.
    """

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read storage file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: Dict[str, str]) -> None:
        if not data:
            if os.path.exists(self.path):
                os.remove(self.path)
            return
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(data, f)

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)
