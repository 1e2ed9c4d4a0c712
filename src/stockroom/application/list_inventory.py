"""Application service: List Inventory use case (query).

Without a filter every record is returned in store order. A filter is
matched case-insensitively against the status names, so ``in_stock`` and
``IN_STOCK`` select the same rows.
"""

from __future__ import annotations

from stockroom.application.dto import InventoryDTO
from stockroom.domain.model.inventory import InventoryStatus
from stockroom.domain.repository.inventory_repository import InventoryRepository


class ListInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, status: str | None = None) -> list[InventoryDTO]:
        if status and status.strip():
            records = self._inventory_repo.list_by_status(InventoryStatus.parse(status))
        else:
            records = self._inventory_repo.list_all()
        return [InventoryDTO.from_record(record) for record in records]
