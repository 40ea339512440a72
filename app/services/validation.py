"""
Request Validation Pipeline

Every mutating (and reading) operation runs an ordered chain of guards
before its handler. A guard either returns, letting the next one run, or
raises an ``ApiError`` subclass. The first raised error ends the request;
later guards and the handler never run, so a rejected request leaves the
stores untouched.

Guards share a ``RequestContext``: the payload's ``data`` object, the path
parameters, and ``locals`` where the existence guard binds the entity it
resolved for the guards and handler that follow.

Usage:
    chain = GuardChain([
        FieldPresent("Dish", "name"),
        PriceIsValid(),
    ])
    chain.run(RequestContext(data=payload["data"]))
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from app.core.exceptions import ApiError, NotFoundError, ValidationError
from app.services import order_state
from app.services.store.base import BaseStore

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """
    State shared by the guards and handler of a single request.

    Attributes:
        data: The ``data`` object of the request body
        params: Path parameters (e.g. ``{"dishId": "..."}``)
        locals: Entities resolved by earlier guards, keyed by name
    """
    data: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)
    locals: Dict[str, Any] = field(default_factory=dict)


# =============================================================================
# PREDICATES
# =============================================================================

def is_blank(value: Any) -> bool:
    """
    True for values a client effectively did not send.

    Missing, null, false, zero, NaN and the empty string count as blank.
    Empty lists and objects do not, so they reach the guard that explains
    what is wrong with them.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def is_positive_integer(value: Any) -> bool:
    """
    True for whole numbers greater than zero.

    JSON numbers with a zero fraction (``12.0``) count; booleans, strings
    and fractional values do not. The entity models turn an accepted float
    into an ``int``.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and value > 0
    return isinstance(value, int) and value > 0


# =============================================================================
# GUARDS
# =============================================================================

class Guard(ABC):
    """A single check run before an operation's handler."""

    @abstractmethod
    def check(self, ctx: RequestContext) -> None:
        """Return to let the request continue, raise ApiError to stop it."""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class FieldPresent(Guard):
    """Fails with 400 when ``data[field_name]`` is missing or blank."""

    def __init__(self, entity: str, field_name: str):
        self.entity = entity
        self.field_name = field_name

    def check(self, ctx: RequestContext) -> None:
        if is_blank(ctx.data.get(self.field_name)):
            raise ValidationError(f"{self.entity} must include a {self.field_name}")

    def __repr__(self) -> str:
        return f"<FieldPresent {self.entity}.{self.field_name}>"


class PriceIsValid(Guard):
    def check(self, ctx: RequestContext) -> None:
        if not is_positive_integer(ctx.data.get("price")):
            raise ValidationError(
                "Dish must have a price that is an integer greater than 0"
            )


class DishesAreValid(Guard):
    """
    Checks an order's line items.

    ``dishes`` must be a non-empty list and every item must carry a positive
    integer quantity. The scan stops at the first offending item and reports
    its index.
    """

    def check(self, ctx: RequestContext) -> None:
        dishes = ctx.data.get("dishes")
        if not isinstance(dishes, list) or not dishes:
            raise ValidationError("Order must include at least one dish")

        for index, item in enumerate(dishes):
            quantity = item.get("quantity") if isinstance(item, dict) else None
            if not is_positive_integer(quantity):
                raise ValidationError(
                    f"Dish {index} must have a quantity that is an integer greater than 0"
                )


class EntityExists(Guard):
    """
    Resolves the path-parameter id against a store.

    On a hit the stored object is bound to ``ctx.locals[bind_as]``;
    on a miss the request fails with 404.
    """

    def __init__(self, kind: str, param: str, store: BaseStore, bind_as: str):
        self.kind = kind
        self.param = param
        self.store = store
        self.bind_as = bind_as

    def check(self, ctx: RequestContext) -> None:
        entity_id = ctx.params.get(self.param)
        found = self.store.find_by_id(entity_id) if entity_id is not None else None
        if found is None:
            raise NotFoundError(f"{self.kind} id not found: {entity_id}")
        ctx.locals[self.bind_as] = found

    def __repr__(self) -> str:
        return f"<EntityExists {self.kind}:{self.param}>"


class IdMatchesPath(Guard):
    """A body id, when given, must equal the path id."""

    def __init__(self, kind: str, param: str):
        self.kind = kind
        self.param = param

    def check(self, ctx: RequestContext) -> None:
        body_id = ctx.data.get("id")
        path_id = ctx.params.get(self.param)
        if is_blank(body_id) or body_id == path_id:
            return
        raise ValidationError(
            f"Data id {body_id} does not match {self.kind.lower()} id {path_id}"
        )


class StatusIsValid(Guard):
    """
    The requested status must be an open one and the stored order must not
    already be delivered. Needs ``locals["order"]`` when it is present;
    without a bound order only the requested value is checked.
    """

    def check(self, ctx: RequestContext) -> None:
        order = ctx.locals.get("order")
        current = order.status if order is not None else order_state.INITIAL_STATUS
        message = order_state.transition_error(current, ctx.data.get("status"))
        if message:
            raise ValidationError(message)


class StatusIsPending(Guard):
    """Delete path: the stored order must still be pending."""

    def check(self, ctx: RequestContext) -> None:
        order = ctx.locals["order"]
        if not order_state.can_delete(order.status):
            raise ValidationError(order_state.NOT_PENDING_MESSAGE)


# =============================================================================
# CHAIN
# =============================================================================

class GuardChain:
    """Ordered guards with short-circuit evaluation."""

    def __init__(self, guards: Iterable[Guard] = ()):
        self.guards: List[Guard] = list(guards)

    def run(self, ctx: RequestContext) -> RequestContext:
        for guard in self.guards:
            try:
                guard.check(ctx)
            except ApiError as e:
                logger.debug(f"{guard!r} rejected request: {e.message}")
                raise
        return ctx
