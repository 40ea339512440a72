"""
Dish Handlers

Terminal operations for the dishes resource and the guard chain each one
runs first. Dishes can be listed, read, created and replaced; they are
never deleted.
"""

import logging
from typing import Callable, List

from app.models import Dish
from app.services.store.base import BaseStore
from app.services.store.ids import next_id
from app.services.validation import (
    EntityExists,
    FieldPresent,
    GuardChain,
    IdMatchesPath,
    PriceIsValid,
    RequestContext,
)

logger = logging.getLogger(__name__)

DISH_FIELDS = ("name", "description", "price", "image_url")


class DishService:
    """
    Dish resource operations.

    Attributes:
        store: Store holding the canonical dishes
        id_factory: Supplier of ids for new dishes
    """

    def __init__(self, store: BaseStore[Dish], id_factory: Callable[[], str] = next_id):
        self.store = store
        self.id_factory = id_factory

        exists = EntityExists("Dish", "dishId", store, bind_as="dish")
        required = [FieldPresent("Dish", name) for name in DISH_FIELDS]

        self.read_guards = GuardChain([exists])
        self.create_guards = GuardChain([*required, PriceIsValid()])
        self.update_guards = GuardChain([
            exists,
            IdMatchesPath("Dish", "dishId"),
            *required,
            PriceIsValid(),
        ])

    def list(self) -> List[Dish]:
        return self.store.list()

    def read(self, ctx: RequestContext) -> Dish:
        self.read_guards.run(ctx)
        return ctx.locals["dish"]

    def create(self, ctx: RequestContext) -> Dish:
        self.create_guards.run(ctx)
        data = ctx.data
        dish = Dish(
            id=self.id_factory(),
            name=data["name"],
            description=data["description"],
            price=data["price"],
            image_url=data["image_url"],
        )
        self.store.append(dish)
        logger.info(f"Dish {dish.id} created: {dish.name}")
        return dish

    def update(self, ctx: RequestContext) -> Dish:
        self.update_guards.run(ctx)
        dish: Dish = ctx.locals["dish"]
        replacement = Dish(id=dish.id, **{name: ctx.data[name] for name in DISH_FIELDS})
        for name in DISH_FIELDS:
            setattr(dish, name, getattr(replacement, name))
        logger.info(f"Dish {dish.id} updated")
        return dish
