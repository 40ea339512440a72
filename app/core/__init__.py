"""
Core module initialization.
Exports configuration, logging utilities and error types.
"""

from app.core.config import get_settings, Settings, EnvironmentMode
from app.core.exceptions import ApiError, ValidationError, NotFoundError

__all__ = [
    "get_settings",
    "Settings",
    "EnvironmentMode",
    "ApiError",
    "ValidationError",
    "NotFoundError",
]
