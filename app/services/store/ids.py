"""Unique id supplier for new entities."""

import uuid

from app.core.config import get_settings


def next_id() -> str:
    """Return a new random hex id, ``id_length`` characters long."""
    return uuid.uuid4().hex[: get_settings().id_length]
