"""
In-Memory Entity Store

Keeps entities in a plain list. There is no locking: requests are handled
one at a time, each running to completion before the next starts.
"""

import logging
from typing import Iterable, List, Optional

from app.services.store.base import BaseStore, T

logger = logging.getLogger(__name__)


class InMemoryStore(BaseStore[T]):
    """
    List-backed store.

    Attributes:
        kind: Entity kind name, used in log messages
    """

    def __init__(self, kind: str, initial: Iterable[T] = ()):
        self.kind = kind
        self._items: List[T] = list(initial)
        logger.debug(f"InMemoryStore[{kind}] initialized with {len(self._items)} item(s)")

    @property
    def provider_name(self) -> str:
        return "memory"

    def list(self) -> List[T]:
        return self._items

    def find_by_id(self, entity_id: str) -> Optional[T]:
        return next((item for item in self._items if item.id == entity_id), None)

    def append(self, entity: T) -> T:
        self._items.append(entity)
        logger.debug(f"{self.kind} {entity.id} appended ({len(self._items)} total)")
        return entity

    def remove(self, entity_id: str) -> Optional[T]:
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                del self._items[index]
                logger.debug(f"{self.kind} {entity_id} removed ({len(self._items)} left)")
                return item
        return None

    def __len__(self) -> int:
        return len(self._items)
