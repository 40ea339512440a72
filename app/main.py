"""
FastAPI Application Entry Point

Dishes & Orders API - in-memory resource service.

Endpoints:
    - GET/POST /dishes: List or create dishes
    - GET/PUT /dishes/{dishId}: Read or replace a dish
    - GET/POST /orders: List or create orders
    - GET/PUT/DELETE /orders/{orderId}: Read, replace or delete an order
    - GET /health: System health check

Every request body wraps the entity under ``data``; every error answers
``{"status": <code>, "message": <text>}``.

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from datetime import datetime
from typing import Any
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Body, Depends, FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings, setup_logging
from app.core.exceptions import ApiError
from app.models import Dish, Order, OrderLineItem
from app.schemas import (
    DishEnvelope,
    DishListEnvelope,
    ErrorResponse,
    HealthResponse,
    OrderEnvelope,
    OrderListEnvelope,
)
from app.services import DishService, OrderService, get_dish_service, get_order_service
from app.services.validation import RequestContext

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)

# Attribute name -> JSON field name, for error messages
WIRE_NAMES = {
    name: info.alias
    for model in (Dish, Order, OrderLineItem)
    for name, info in model.model_fields.items()
    if info.alias
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    dishes = get_dish_service().store
    orders = get_order_service().store
    logger.info(f"✅ Dish store: {dishes.provider_name}, {len(dishes)} dish(es)")
    logger.info(f"✅ Order store: {orders.provider_name}, {len(orders)} order(s)")

    yield  # Application runs

    logger.info("Shutting down...")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="Dishes and delivery orders, validated by ordered guard chains.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def build_context(body: Any = None, **params: str) -> RequestContext:
    """
    Wrap the request payload and path parameters for the guard chain.

    Anything other than ``{"data": {...}}`` is treated as an empty payload,
    so the guards decide which error the client gets.
    """
    data = body.get("data") if isinstance(body, dict) else None
    return RequestContext(data=data if isinstance(data, dict) else {}, params=params)


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """API root with navigation links."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "health": "/health",
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
async def health_check(
    dishes: DishService = Depends(get_dish_service),
    orders: OrderService = Depends(get_order_service),
) -> HealthResponse:
    """Report store sizes."""
    return HealthResponse(
        status="operational",
        environment=settings.env_mode.value,
        dishes=len(dishes.store),
        orders=len(orders.store),
        timestamp=datetime.now(),
    )


# =============================================================================
# DISH ENDPOINTS
# =============================================================================

@app.get("/dishes", response_model=DishListEnvelope, tags=["Dishes"])
async def list_dishes(service: DishService = Depends(get_dish_service)):
    return {"data": service.list()}


@app.post(
    "/dishes",
    status_code=201,
    response_model=DishEnvelope,
    responses=ERROR_RESPONSES,
    tags=["Dishes"],
)
async def create_dish(
    body: Any = Body(None),
    service: DishService = Depends(get_dish_service),
):
    return {"data": service.create(build_context(body))}


@app.get(
    "/dishes/{dish_id}",
    response_model=DishEnvelope,
    responses=ERROR_RESPONSES,
    tags=["Dishes"],
)
async def read_dish(dish_id: str, service: DishService = Depends(get_dish_service)):
    return {"data": service.read(build_context(dishId=dish_id))}


@app.put(
    "/dishes/{dish_id}",
    response_model=DishEnvelope,
    responses=ERROR_RESPONSES,
    tags=["Dishes"],
)
async def update_dish(
    dish_id: str,
    body: Any = Body(None),
    service: DishService = Depends(get_dish_service),
):
    return {"data": service.update(build_context(body, dishId=dish_id))}


# =============================================================================
# ORDER ENDPOINTS
# =============================================================================

@app.get("/orders", response_model=OrderListEnvelope, tags=["Orders"])
async def list_orders(service: OrderService = Depends(get_order_service)):
    return {"data": service.list()}


@app.post(
    "/orders",
    status_code=201,
    response_model=OrderEnvelope,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
)
async def create_order(
    body: Any = Body(None),
    service: OrderService = Depends(get_order_service),
):
    return {"data": service.create(build_context(body))}


@app.get(
    "/orders/{order_id}",
    response_model=OrderEnvelope,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
)
async def read_order(order_id: str, service: OrderService = Depends(get_order_service)):
    return {"data": service.read(build_context(orderId=order_id))}


@app.put(
    "/orders/{order_id}",
    response_model=OrderEnvelope,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
)
async def update_order(
    order_id: str,
    body: Any = Body(None),
    service: OrderService = Depends(get_order_service),
):
    return {"data": service.update(build_context(body, orderId=order_id))}


@app.delete(
    "/orders/{order_id}",
    status_code=204,
    response_class=Response,
    responses=ERROR_RESPONSES,
    tags=["Orders"],
)
async def delete_order(order_id: str, service: OrderService = Depends(get_order_service)):
    service.destroy(build_context(orderId=order_id))
    return Response(status_code=204)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "message": message},
    )


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Guard failures: 400 / 404 with the guard's message."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown paths and unsupported methods."""
    path = request.url.path
    if exc.status_code == 404:
        return error_response(404, f"Path not found: {path}")
    if exc.status_code == 405:
        return error_response(405, f"{request.method} not allowed for {path}")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Request bodies that are not valid JSON."""
    logger.debug(f"Malformed request body on {request.url.path}: {exc.errors()}")
    return error_response(400, "Request body must be valid JSON")


@app.exception_handler(PydanticValidationError)
async def entity_validation_handler(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    """Field values of the wrong type that passed the presence guards."""
    first = exc.errors()[0]
    field = ".".join(
        WIRE_NAMES.get(part, str(part)) if isinstance(part, str) else str(part)
        for part in first.get("loc", ())
    )
    return error_response(400, f"Invalid value for {field}: {first.get('msg')}")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")
    message = str(exc) if settings.debug else "Something went wrong!"
    return error_response(500, message)


def run() -> None:
    """Start the API server with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development and settings.debug,
    )


if __name__ == "__main__":
    run()
