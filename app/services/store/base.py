"""
Entity Store Abstract Base Class

Defines the interface every dish/order store implements. Handlers and guards
only talk to this interface, so the in-memory list used today can be swapped
for any other backing structure without touching the request pipeline.

Design Pattern: Repository
    - One store per entity kind
    - Lookups hand back the canonical object; callers mutate it in place
    - Id uniqueness is the id supplier's job, not the store's
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Protocol, TypeVar


class Identified(Protocol):
    id: str


T = TypeVar("T", bound=Identified)


class BaseStore(ABC, Generic[T]):
    """
    Abstract base class for entity stores.

    Example:
        >>> store = get_dish_store()
        >>> store.append(dish)
        >>> store.find_by_id(dish.id) is dish
        True
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of the backing implementation (e.g. "memory")."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """Return every stored entity in insertion order."""
        pass

    @abstractmethod
    def find_by_id(self, entity_id: str) -> Optional[T]:
        """
        Look up an entity by id.

        Returns:
            The stored object itself, or None when no entity has that id.
        """
        pass

    @abstractmethod
    def append(self, entity: T) -> T:
        """Add a new entity at the end of the collection."""
        pass

    @abstractmethod
    def remove(self, entity_id: str) -> Optional[T]:
        """
        Remove the entity with the given id.

        Returns:
            The removed entity, or None when nothing matched.
        """
        pass

    def __len__(self) -> int:
        return len(self.list())
