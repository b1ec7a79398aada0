from stressless.storage.base import KeyValueStore
from stressless.storage.memory import MemoryStore
from stressless.storage.repository import HistoryRepository

__all__ = ["HistoryRepository", "KeyValueStore", "MemoryStore"]
