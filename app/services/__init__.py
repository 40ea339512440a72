"""
Services Module

Business logic behind the HTTP routes.

Services:
    - store: In-memory entity stores and the id supplier
    - validation: Guard pipeline run before every handler
    - order_state: Order status workflow
    - dishes / orders: Resource handlers
"""

from functools import lru_cache

from app.services.dishes import DishService
from app.services.orders import OrderService
from app.services.store import get_dish_store, get_order_store


@lru_cache()
def get_dish_service() -> DishService:
    """Dish handlers bound to the shared dish store."""
    return DishService(get_dish_store())


@lru_cache()
def get_order_service() -> OrderService:
    """Order handlers bound to the shared order store."""
    return OrderService(get_order_store())


def reset_services() -> None:
    """Forget the cached handlers so they rebind to fresh stores."""
    get_dish_service.cache_clear()
    get_order_service.cache_clear()


__all__ = [
    "DishService",
    "OrderService",
    "get_dish_service",
    "get_order_service",
    "reset_services",
]
