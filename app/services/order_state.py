"""
Order Status Workflow

    pending ⇄ preparing ⇄ out-for-delivery        delivered (terminal)

Orders start as ``pending``. Through the update endpoint an order may move
freely between the three open states. ``delivered`` can never be requested
through an update, and an order already stored as ``delivered`` accepts no
further change. Only ``pending`` orders may be deleted.
"""

from typing import Optional

from app.models import OrderStatus

INITIAL_STATUS = OrderStatus.PENDING

UPDATABLE_STATUSES: tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.PREPARING,
    OrderStatus.OUT_FOR_DELIVERY,
)

TERMINAL_STATUSES: frozenset[OrderStatus] = frozenset({OrderStatus.DELIVERED})

DELIVERED_MESSAGE = "A delivered order cannot be changed"
INVALID_STATUS_MESSAGE = (
    "Order must have a status of "
    + ", ".join(status.value for status in UPDATABLE_STATUSES)
)
NOT_PENDING_MESSAGE = "An order cannot be deleted unless it is pending"


def parse_status(value) -> Optional[OrderStatus]:
    """Return the matching OrderStatus, or None for anything unrecognised."""
    if isinstance(value, OrderStatus):
        return value
    if not isinstance(value, str):
        return None
    try:
        return OrderStatus(value)
    except ValueError:
        return None


def is_terminal(status: OrderStatus) -> bool:
    return status in TERMINAL_STATUSES


def transition_error(current: OrderStatus, requested) -> Optional[str]:
    """
    Check a requested status change.

    Args:
        current: Status the order is stored with
        requested: Raw ``status`` value from the request payload

    Returns:
        None when the change is allowed, otherwise the rejection message.
    """
    target = parse_status(requested)
    if target in UPDATABLE_STATUSES:
        if is_terminal(current):
            return DELIVERED_MESSAGE
        return None
    if target is OrderStatus.DELIVERED:
        return DELIVERED_MESSAGE
    return INVALID_STATUS_MESSAGE


def can_delete(current: OrderStatus) -> bool:
    return current is OrderStatus.PENDING
