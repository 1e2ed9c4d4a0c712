"""Application service: Adjust Inventory use case.

Applies a signed quantity change to a product's on-hand stock. The
reason is required but is not stored on the record; it only travels with
the ``inventory_adjusted`` log event.
"""

from __future__ import annotations

import structlog

from stockroom.application.dto import InventoryDTO
from stockroom.domain.clock import Clock, utc_now
from stockroom.domain.exceptions import EntityNotFoundError, ValidationError
from stockroom.domain.model.inventory import InventoryRecord
from stockroom.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger(__name__)


class AdjustInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._clock = clock

    def handle(self, product_id: str, quantity_delta: int, reason: str) -> InventoryDTO:
        if quantity_delta == 0:
            raise ValidationError("quantityDelta must be non-zero")
        if not reason or not reason.strip():
            raise ValidationError("reason is required")

        with self._inventory_repo.transaction():
            record = self._inventory_repo.get_by_product_id(product_id)
            if record is None:
                raise EntityNotFoundError(f"Inventory not found for product {product_id}")

            record.adjust(quantity_delta, clock=self._clock)
            self._inventory_repo.save(record)

        self._log_adjustment(record, quantity_delta, reason.strip())
        return InventoryDTO.from_record(record)

    @staticmethod
    def _log_adjustment(record: InventoryRecord, quantity_delta: int, reason: str) -> None:
        # The adjustment is already persisted; a broken log pipeline must not undo that.
        try:
            logger.info(
                "inventory_adjusted",
                product_id=record.product_id,
                delta=quantity_delta,
                reason=reason,
                new_quantity=record.available_quantity,
                status=record.status.value,
            )
        except Exception:  # noqa: BLE001
            pass
