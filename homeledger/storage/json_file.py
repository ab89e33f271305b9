"""Mini README: JSON file storage backend.

Structure:
    * JsonFileStorage - keeps every slot as a string inside one JSON object.

The file is rewritten in full on every ``set_item``/``remove_item`` through a
temporary sibling and ``os.replace`` so readers never see a partial write.
A missing file behaves like empty storage.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Optional

from ..errors import StorageError
from ..logging_utils import get_logger
from .base import KeyValueStorage

LOGGER = get_logger(__name__)


class JsonFileStorage(KeyValueStorage):
    """Persist string slots in a JSON document on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_slots(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as error:
            raise StorageError(f"Unable to read storage file {self.path}: {error}") from error
        if not raw.strip():
            return {}
        try:
            slots = json.loads(raw)
        except json.JSONDecodeError as error:
            raise StorageError(f"Storage file {self.path} is not valid JSON") from error
        if not isinstance(slots, dict):
            raise StorageError(f"Storage file {self.path} must contain a JSON object")
        return {
            str(key): value if isinstance(value, str) else json.dumps(value)
            for key, value in slots.items()
        }

    def _write_slots(self, slots: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temporary = self.path.with_name(f".{self.path.name}.tmp")
        try:
            temporary.write_text(json.dumps(slots, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(temporary, self.path)
        except OSError as error:
            raise StorageError(f"Unable to write storage file {self.path}: {error}") from error
        LOGGER.debug("Wrote %s storage slots to %s", len(slots), self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_slots().get(key)

    def set_item(self, key: str, value: str) -> None:
        slots = self._read_slots()
        slots[key] = value
        self._write_slots(slots)

    def remove_item(self, key: str) -> None:
        slots = self._read_slots()
        if slots.pop(key, None) is not None:
            self._write_slots(slots)
