"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from stockroom.config import INVENTORY_PATH
from stockroom.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)


def inventory_repository() -> JsonInventoryRepository:
    return JsonInventoryRepository(INVENTORY_PATH)
