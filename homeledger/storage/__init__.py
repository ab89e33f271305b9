"""Mini README: Durable key-value storage used by the ledger.

The ledger persists a single slot holding a JSON document. ``KeyValueStorage``
captures that contract; ``JsonFileStorage`` keeps slots in one JSON file on
disk and ``InMemoryStorage`` backs tests and throwaway sessions.
"""

from .base import KeyValueStorage
from .json_file import JsonFileStorage
from .memory import InMemoryStorage

__all__ = ["InMemoryStorage", "JsonFileStorage", "KeyValueStorage"]
