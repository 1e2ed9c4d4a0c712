"""Abstract repository for the InventoryRecord aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete stores (JSON, in-memory) live elsewhere and are
expected to enforce one record per ``product_id``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from stockroom.domain.model.inventory import InventoryRecord, InventoryStatus


class InventoryRepository(ABC):

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Hold exclusive write access for a read-validate-write sequence.

        Handlers that read a record and save a change derived from it do
        both inside one ``with repo.transaction():`` block, so two writers
        never base their change on the same stored state.
        """

    @abstractmethod
    def get_by_product_id(self, product_id: str) -> InventoryRecord | None:
        """Return the inventory record for a product, or None."""

    @abstractmethod
    def exists_by_product_id(self, product_id: str) -> bool:
        """Return True if a record is tracked for the product."""

    @abstractmethod
    def list_by_status(self, status: InventoryStatus) -> list[InventoryRecord]:
        """Return every record currently in ``status``."""

    @abstractmethod
    def list_all(self) -> list[InventoryRecord]:
        """Return every inventory record."""

    @abstractmethod
    def save(self, record: InventoryRecord) -> None:
        """Insert or update a record, keyed by its ``id``."""

    @abstractmethod
    def delete_by_id(self, record_id: str) -> None:
        """Remove the record with the given opaque ``id``."""
