"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from stockroom.application.dto import InventoryDTO
from stockroom.domain.exceptions import EntityNotFoundError
from stockroom.domain.repository.inventory_repository import InventoryRepository


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, product_id: str) -> InventoryDTO:
        record = self._inventory_repo.get_by_product_id(product_id)
        if record is None:
            raise EntityNotFoundError(f"Inventory not found for product {product_id}")
        return InventoryDTO.from_record(record)
