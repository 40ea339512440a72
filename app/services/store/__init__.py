"""
Entity Store Factory

Provides a single entry point for obtaining the dish and order stores.
Each store is created once and shared by every request (cached), the same
way the other service factories hand out their instances.

Usage:
    from app.services.store import get_dish_store

    dishes = get_dish_store()
    dish = dishes.find_by_id(dish_id)
"""

import logging
from functools import lru_cache

from app.core.config import get_settings
from app.models import Dish, Order
from app.services.store.base import BaseStore
from app.services.store.ids import next_id
from app.services.store.memory import InMemoryStore
from app.services.store.seed import sample_dishes, sample_orders

logger = logging.getLogger(__name__)


@lru_cache()
def get_dish_store() -> BaseStore[Dish]:
    """
    Get the shared dish store.

    Seeded with sample dishes when ``seed_data`` is enabled.
    """
    settings = get_settings()
    initial = sample_dishes() if settings.seed_data else []
    logger.info(f"Dish Store: Using InMemoryStore ({len(initial)} seeded)")
    return InMemoryStore("Dish", initial)


@lru_cache()
def get_order_store() -> BaseStore[Order]:
    """
    Get the shared order store.

    Seeded with sample orders when ``seed_data`` is enabled.
    """
    settings = get_settings()
    initial = sample_orders() if settings.seed_data else []
    logger.info(f"Order Store: Using InMemoryStore ({len(initial)} seeded)")
    return InMemoryStore("Order", initial)


def reset_stores() -> None:
    """
    Drop the cached stores.

    The next call to a getter creates a fresh store, so every entity held
    so far is discarded.
    """
    get_dish_store.cache_clear()
    get_order_store.cache_clear()
    logger.debug("Entity stores reset")


__all__ = [
    "get_dish_store",
    "get_order_store",
    "reset_stores",
    "next_id",
    "BaseStore",
    "InMemoryStore",
]
