"""JSON-file-backed implementation of InventoryRepository.

Writers serialise on a sibling ``.lock`` file, and every write goes to a
temporary file that is then moved over the store with ``os.replace``, so a
reader always sees either the old or the new complete array.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path

from filelock import FileLock

from stockroom.domain.model.inventory import InventoryRecord, InventoryStatus
from stockroom.domain.repository.inventory_repository import InventoryRepository


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = FileLock(str(file_path) + ".lock")
        self._ensure_file()

    # --- InventoryRepository interface ----------------------------------------

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._lock:
            yield

    def get_by_product_id(self, product_id: str) -> InventoryRecord | None:
        for raw in self._load_raw():
            if raw["product_id"] == product_id:
                return self._to_domain(raw)
        return None

    def exists_by_product_id(self, product_id: str) -> bool:
        return any(raw["product_id"] == product_id for raw in self._load_raw())

    def list_by_status(self, status: InventoryStatus) -> list[InventoryRecord]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["status"] == status.value
        ]

    def list_all(self) -> list[InventoryRecord]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, record: InventoryRecord) -> None:
        with self._lock:
            records = self._load_raw()

            # Upsert: replace if exists, otherwise append
            replaced = False
            for i, raw in enumerate(records):
                if raw["id"] == record.id:
                    records[i] = self._to_raw(record)
                    replaced = True
                    break
            if not replaced:
                records.append(self._to_raw(record))
            self._persist_raw(records)

    def delete_by_id(self, record_id: str) -> None:
        with self._lock:
            records = self._load_raw()
            remaining = [raw for raw in records if raw["id"] != record_id]
            if len(remaining) != len(records):
                self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: InventoryRecord) -> dict:
        return {
            "id": record.id,
            "product_id": record.product_id,
            "available_quantity": record.available_quantity,
            "status": record.status.value,
            "replenishment_at": (
                record.replenishment_at.isoformat() if record.replenishment_at else None
            ),
            "created_at": record.created_at.isoformat(),
            "updated_at": record.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryRecord:
        replenishment_at = raw.get("replenishment_at")
        return InventoryRecord(
            id=raw["id"],
            product_id=raw["product_id"],
            available_quantity=raw["available_quantity"],
            status=InventoryStatus(raw["status"]),
            replenishment_at=(
                datetime.fromisoformat(replenishment_at) if replenishment_at else None
            ),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._write_atomic(json.dumps(records, indent=2) + "\n")

    def _write_atomic(self, text: str) -> None:
        # Caller holds self._lock, so a fixed temp name is safe.
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._write_atomic("[]")
