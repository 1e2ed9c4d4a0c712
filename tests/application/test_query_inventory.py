"""Integration tests for the ShowInventory and ListInventory queries."""

import pytest

from stockroom.application.create_inventory import CreateInventoryHandler
from stockroom.application.list_inventory import ListInventoryHandler
from stockroom.application.show_inventory import ShowInventoryHandler
from stockroom.domain.exceptions import EntityNotFoundError, ValidationError
from stockroom.domain.model.inventory import InventoryRecord, InventoryStatus
from tests.fakes import EPOCH, FakeClock, FakeInventoryRepository


def _seeded_repo() -> FakeInventoryRepository:
    repo = FakeInventoryRepository()
    create = CreateInventoryHandler(repo, clock=FakeClock())
    create.handle("widget", 10)
    create.handle("gadget", 0)
    create.handle("gizmo", 3)
    return repo


class TestShowInventory:

    def test_returns_record(self):
        repo = _seeded_repo()
        dto = ShowInventoryHandler(repo).handle("widget")
        assert dto.product_id == "widget"
        assert dto.available_quantity == 10
        assert dto.status == "IN_STOCK"

    def test_unknown_product_rejected(self):
        repo = _seeded_repo()
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowInventoryHandler(repo).handle("missing")


class TestListInventory:

    def test_no_filter_returns_everything(self):
        dtos = ListInventoryHandler(_seeded_repo()).handle()
        assert sorted(d.product_id for d in dtos) == ["gadget", "gizmo", "widget"]

    def test_blank_filter_returns_everything(self):
        dtos = ListInventoryHandler(_seeded_repo()).handle("  ")
        assert len(dtos) == 3

    @pytest.mark.parametrize("raw", ["in_stock", "IN_STOCK", "In_Stock"])
    def test_filter_any_case(self, raw):
        dtos = ListInventoryHandler(_seeded_repo()).handle(raw)
        assert sorted(d.product_id for d in dtos) == ["gizmo", "widget"]
        assert all(d.status == "IN_STOCK" for d in dtos)

    def test_filter_out_of_stock(self):
        dtos = ListInventoryHandler(_seeded_repo()).handle("out_of_stock")
        assert [d.product_id for d in dtos] == ["gadget"]

    def test_filter_backordered_matches_stored_rows(self):
        repo = _seeded_repo()
        repo.save(
            InventoryRecord(
                id="legacy-1",
                product_id="legacy",
                available_quantity=0,
                status=InventoryStatus.BACKORDERED,
                created_at=EPOCH,
                updated_at=EPOCH,
            )
        )
        dtos = ListInventoryHandler(repo).handle("backordered")
        assert [d.product_id for d in dtos] == ["legacy"]

    def test_bogus_filter_rejected(self):
        with pytest.raises(ValidationError, match="Invalid inventory status"):
            ListInventoryHandler(_seeded_repo()).handle("bogus")

    def test_empty_store(self):
        assert ListInventoryHandler(FakeInventoryRepository()).handle() == []
