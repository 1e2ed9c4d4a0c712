"""Application service: Create Inventory use case."""

from __future__ import annotations

import structlog

from stockroom.application.dto import InventoryDTO
from stockroom.domain.clock import Clock, utc_now
from stockroom.domain.exceptions import EntityAlreadyExistsError
from stockroom.domain.model.inventory import InventoryRecord
from stockroom.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger(__name__)


class CreateInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._clock = clock

    def handle(self, product_id: str, initial_quantity: int) -> InventoryDTO:
        """Start tracking stock for a newly onboarded product."""
        record = InventoryRecord.create(product_id, initial_quantity, clock=self._clock)

        with self._inventory_repo.transaction():
            if self._inventory_repo.exists_by_product_id(record.product_id):
                raise EntityAlreadyExistsError(
                    f"Inventory already exists for product {record.product_id}"
                )
            self._inventory_repo.save(record)

        logger.info(
            "inventory_created",
            product_id=record.product_id,
            quantity=record.available_quantity,
            status=record.status.value,
        )
        return InventoryDTO.from_record(record)
