"""Application service: Delete Inventory use case.

Records are removed by their opaque id, so the product's record is looked
up first. Deleting twice fails the second time with EntityNotFoundError.
"""

from __future__ import annotations

import structlog

from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.repository.inventory_repository import InventoryRepository

logger = structlog.get_logger(__name__)


class DeleteInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, product_id: str) -> None:
        with self._inventory_repo.transaction():
            record = self._inventory_repo.get_by_product_id(product_id)
            if record is None:
                raise EntityNotFoundError(f"Inventory not found for product {product_id}")

            self._inventory_repo.delete_by_id(record.id)

        logger.info("inventory_deleted", product_id=product_id, record_id=record.id)
