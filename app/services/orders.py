"""
Order Handlers

Terminal operations for the orders resource and the guard chain each one
runs first. New orders always start ``pending``; status changes go through
the update guards, and only pending orders may be deleted.
"""

import logging
from typing import Callable, List

from app.models import Order, OrderStatus
from app.services import order_state
from app.services.store.base import BaseStore
from app.services.store.ids import next_id
from app.services.validation import (
    DishesAreValid,
    EntityExists,
    FieldPresent,
    GuardChain,
    IdMatchesPath,
    RequestContext,
    StatusIsPending,
    StatusIsValid,
)

logger = logging.getLogger(__name__)


class OrderService:
    """
    Order resource operations.

    Attributes:
        store: Store holding the canonical orders
        id_factory: Supplier of ids for new orders
    """

    def __init__(self, store: BaseStore[Order], id_factory: Callable[[], str] = next_id):
        self.store = store
        self.id_factory = id_factory

        exists = EntityExists("Order", "orderId", store, bind_as="order")

        self.read_guards = GuardChain([exists])
        self.create_guards = GuardChain([
            FieldPresent("Order", "deliverTo"),
            FieldPresent("Order", "mobileNumber"),
            FieldPresent("Order", "dishes"),
            DishesAreValid(),
        ])
        self.update_guards = GuardChain([
            exists,
            FieldPresent("Order", "deliverTo"),
            FieldPresent("Order", "mobileNumber"),
            FieldPresent("Order", "dishes"),
            FieldPresent("Order", "status"),
            DishesAreValid(),
            IdMatchesPath("Order", "orderId"),
            StatusIsValid(),
        ])
        self.delete_guards = GuardChain([exists, StatusIsPending()])

    def list(self) -> List[Order]:
        return self.store.list()

    def read(self, ctx: RequestContext) -> Order:
        self.read_guards.run(ctx)
        return ctx.locals["order"]

    def create(self, ctx: RequestContext) -> Order:
        self.create_guards.run(ctx)
        data = ctx.data
        order = Order(
            id=self.id_factory(),
            deliver_to=data["deliverTo"],
            mobile_number=data["mobileNumber"],
            status=order_state.INITIAL_STATUS,
            dishes=Order.line_items(data["dishes"]),
        )
        self.store.append(order)
        logger.info(f"Order {order.id} created for {order.deliver_to}")
        return order

    def update(self, ctx: RequestContext) -> Order:
        self.update_guards.run(ctx)
        order: Order = ctx.locals["order"]
        data = ctx.data
        previous = order.status
        replacement = Order(
            id=order.id,
            deliver_to=data["deliverTo"],
            mobile_number=data["mobileNumber"],
            status=OrderStatus(data["status"]),
            dishes=Order.line_items(data["dishes"]),
        )
        order.deliver_to = replacement.deliver_to
        order.mobile_number = replacement.mobile_number
        order.dishes = replacement.dishes
        order.status = replacement.status
        if order.status is not previous:
            logger.info(f"Order {order.id} status {previous.value} -> {order.status.value}")
        logger.info(f"Order {order.id} updated")
        return order

    def destroy(self, ctx: RequestContext) -> None:
        self.delete_guards.run(ctx)
        order: Order = ctx.locals["order"]
        self.store.remove(order.id)
        logger.info(f"Order {order.id} deleted")
