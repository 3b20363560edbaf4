"""Query cache keyed by resource, patched by mutation success handlers."""
import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class Resource(Enum):
    USER = "/api/user"
    USERS = "/api/users"
    ROOMS = "/api/rooms"
    PATIENTS = "/api/patients"
    GUARDIANS = "/api/guardians"
    ACCIDENTS = "/api/accidents"
    ENV_LOGS = "/api/env-logs"
    CAMERAS = "/api/cameras"
    MESSAGES = "/api/messages"

    @property
    def path(self) -> str:
        return self.value

    def item_path(self, entity_id: int) -> str:
        return f"{self.value}/{entity_id}"


Updater = Callable[[Optional[Any]], Any]


class QueryCache:
    """Last-known-good results; written by loads and by explicit patches only"""

    def __init__(self):
        self._entries: Dict[Resource, Any] = {}
        self._lock = threading.RLock()

    def has(self, key: Resource) -> bool:
        return key in self._entries

    def get(self, key: Resource, default=None):
        return self._entries.get(key, default)

    def set(self, key: Resource, value):
        with self._lock:
            self._entries[key] = value

    def patch(self, key: Resource, updater: Updater):
        """Replace the entry with ``updater(previous)`` in one step"""
        with self._lock:
            value = updater(self._entries.get(key))
            self._entries[key] = value
        logger.debug(f"Cache patched: {key.path}")
        return value

    def remove(self, key: Resource):
        with self._lock:
            self._entries.pop(key, None)

    def clear(self):
        with self._lock:
            self._entries.clear()

    def fetch(self, key: Resource, loader: Callable[[], Any]):
        if key in self._entries:
            return self._entries[key]
        value = loader()
        self.set(key, value)
        return value


def append(entity) -> Updater:
    def updater(old: Optional[List]) -> List:
        return [*old, entity] if old is not None else [entity]
    return updater


def replace(entity) -> Updater:
    def updater(old: Optional[List]) -> List:
        if old is None:
            return [entity]
        return [entity if item.id == entity.id else item for item in old]
    return updater


def discard(entity_id: int) -> Updater:
    def updater(old: Optional[List]) -> List:
        if old is None:
            return []
        return [item for item in old if item.id != entity_id]
    return updater
