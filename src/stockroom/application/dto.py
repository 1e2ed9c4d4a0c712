"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing the mutable aggregate to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from stockroom.domain.model.inventory import InventoryRecord


@dataclass(frozen=True)
class InventoryDTO:
    """Output: one inventory record in its returned shape."""

    id: str
    product_id: str
    available_quantity: int
    status: str
    replenishment_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def from_record(record: InventoryRecord) -> InventoryDTO:
        return InventoryDTO(
            id=record.id,
            product_id=record.product_id,
            available_quantity=record.available_quantity,
            status=record.status.value,
            replenishment_at=record.replenishment_at,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def to_dict(self) -> dict:
        """JSON-ready mapping; timestamps as ISO 8601 strings."""
        return {
            "id": self.id,
            "product_id": self.product_id,
            "available_quantity": self.available_quantity,
            "status": self.status,
            "replenishment_at": (
                self.replenishment_at.isoformat() if self.replenishment_at else None
            ),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
