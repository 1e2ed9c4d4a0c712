"""InventoryRecord aggregate, one stock-tracking row per product.

The record knows how many units are available on hand and carries a
status that is always derived from that quantity. All mutations go through
``InventoryRecord.create()`` and ``adjust()`` so the derived fields never
drift from the quantity they describe.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from stockroom.domain.clock import Clock, utc_now
from stockroom.domain.exceptions import ValidationError


class InventoryStatus(Enum):
    IN_STOCK = "IN_STOCK"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    # Reserved: no rule produces it yet.
    BACKORDERED = "BACKORDERED"

    @staticmethod
    def parse(raw: str) -> InventoryStatus:
        """Case-insensitive lookup, e.g. ``"in_stock"`` -> IN_STOCK."""
        try:
            return InventoryStatus[raw.strip().upper()]
        except KeyError as exc:
            raise ValidationError(f"Invalid inventory status: {raw!r}") from exc


def derive_status(quantity: int) -> InventoryStatus:
    """Status implied by an on-hand quantity. Never yields BACKORDERED."""
    if quantity <= 0:
        return InventoryStatus.OUT_OF_STOCK
    return InventoryStatus.IN_STOCK


@dataclass
class InventoryRecord:
    """Aggregate root for product stock tracking.

    Invariants:
    - ``available_quantity`` is always >= 0
    - ``status`` always equals ``derive_status(available_quantity)``
    - ``id`` and ``created_at`` never change after creation

    Use ``InventoryRecord.create()`` for new records. The ``__init__`` is
    kept plain so repositories can reconstitute stored rows as-is.
    """

    id: str
    product_id: str
    available_quantity: int
    status: InventoryStatus
    created_at: datetime
    updated_at: datetime
    replenishment_at: datetime | None = None

    # --- Factory (used for NEW records only) ----------------------------------

    @staticmethod
    def create(
        product_id: str,
        initial_quantity: int,
        clock: Clock = utc_now,
    ) -> InventoryRecord:
        """Start tracking a freshly onboarded product."""
        if not product_id or not product_id.strip():
            raise ValidationError("productId is required")
        if initial_quantity < 0:
            raise ValidationError(
                f"initialQuantity cannot be negative, got {initial_quantity}"
            )

        now = clock()
        return InventoryRecord(
            id=str(uuid.uuid4()),
            product_id=product_id,
            available_quantity=initial_quantity,
            status=derive_status(initial_quantity),
            created_at=now,
            updated_at=now,
        )

    # --- Mutations ------------------------------------------------------------

    def adjust(self, quantity_delta: int, clock: Clock = utc_now) -> None:
        """Apply a signed change to the on-hand quantity.

        Every check runs before any field is assigned, so a rejected
        adjustment leaves the record exactly as it was.
        """
        if quantity_delta == 0:
            raise ValidationError("quantityDelta must be non-zero")

        new_quantity = self.available_quantity + quantity_delta
        if new_quantity < 0:
            raise ValidationError(
                f"Adjustment would produce negative quantity for product "
                f"{self.product_id} (have {self.available_quantity}, "
                f"delta {quantity_delta})"
            )

        now = clock()
        self.available_quantity = new_quantity
        self.status = derive_status(new_quantity)
        if quantity_delta > 0:
            self.replenishment_at = now
        self.updated_at = now
