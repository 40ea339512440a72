"""
Domain Models

Dishes and orders are held in process memory. The objects defined here are
the canonical copies owned by the entity stores; handlers mutate them in
place on update.

Author: Khalil Bannouri
Version: 1.0.0
"""

import enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, enum.Enum):
    """Order status workflow."""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"


class Dish(BaseModel):
    """A menu dish. Created and replaced through the API, never deleted."""

    id: str
    name: str
    description: str
    price: int
    image_url: str

    def __repr__(self):
        return f"<Dish {self.id} - {self.name} - {self.price}>"


class OrderLineItem(BaseModel):
    """
    One entry of an order's dish list.

    Clients send the dish they ordered (id, name, price, ...) alongside the
    quantity. Only ``quantity`` is enforced; the remaining reference fields
    are kept exactly as sent.
    """

    model_config = ConfigDict(extra="allow")

    quantity: int


class Order(BaseModel):
    """A delivery order. Deletable only while pending."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    deliver_to: str = Field(alias="deliverTo")
    mobile_number: str = Field(alias="mobileNumber")
    status: OrderStatus = OrderStatus.PENDING
    dishes: List[OrderLineItem]

    @classmethod
    def line_items(cls, raw: List[dict[str, Any]]) -> List[OrderLineItem]:
        """Build line items from an already validated request payload."""
        return [OrderLineItem(**item) for item in raw]

    def __repr__(self):
        return f"<Order {self.id} - {self.deliver_to} - {self.status.value}>"
