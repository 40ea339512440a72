"""
Pydantic Schemas for Request/Response Envelopes

Every successful response wraps the entity under a ``data`` key. Request
bodies have no schema: the guard chains in ``app.services`` own every
field check so that each failure carries its own message and the checks
run in a fixed order.

Author: Khalil Bannouri
Version: 1.0.0
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from app.models import Dish, Order


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class DishEnvelope(BaseModel):
    data: Dish


class DishListEnvelope(BaseModel):
    data: List[Dish]


class OrderEnvelope(BaseModel):
    data: Order


class OrderListEnvelope(BaseModel):
    data: List[Order]


class ErrorResponse(BaseModel):
    """Standard error response."""
    status: int
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    environment: str
    dishes: int
    orders: int
    timestamp: datetime
