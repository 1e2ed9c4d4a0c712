"""CLI commands for inventory tracking."""

from __future__ import annotations

import json
from datetime import datetime

import click

from stockroom.application.adjust_inventory import AdjustInventoryHandler
from stockroom.application.create_inventory import CreateInventoryHandler
from stockroom.application.delete_inventory import DeleteInventoryHandler
from stockroom.application.dto import InventoryDTO
from stockroom.application.list_inventory import ListInventoryHandler
from stockroom.application.show_inventory import ShowInventoryHandler
from stockroom.domain.exceptions import (
    DomainException,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from stockroom.infrastructure.bootstrap import inventory_repository


# Exit status per error kind; 1 stays the generic click failure.
EXIT_CODES: dict[type[DomainException], int] = {
    ValidationError: 2,
    EntityNotFoundError: 3,
    EntityAlreadyExistsError: 4,
}


def _command_error(exc: DomainException) -> click.ClickException:
    error = click.ClickException(str(exc))
    for kind, code in EXIT_CODES.items():
        if isinstance(exc, kind):
            error.exit_code = code
            break
    return error


def _format_timestamp(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M UTC") if value else "-"


def _display_record(dto: InventoryDTO) -> None:
    click.echo(f"Product:     {dto.product_id}")
    click.echo(f"Record ID:   {dto.id}")
    click.echo(f"Available:   {dto.available_quantity}")
    click.echo(f"Status:      {dto.status}")
    click.echo(f"Replenished: {_format_timestamp(dto.replenishment_at)}")
    click.echo(f"Created:     {_format_timestamp(dto.created_at)}")
    click.echo(f"Updated:     {_format_timestamp(dto.updated_at)}")


@click.command("create")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option(
    "--quantity",
    required=True,
    type=click.IntRange(min=0),
    help="Initial on-hand quantity.",
)
def inventory_create(product_id: str, quantity: int) -> None:
    """Start tracking inventory for a product."""
    handler = CreateInventoryHandler(inventory_repo=inventory_repository())

    try:
        dto = handler.handle(product_id=product_id, initial_quantity=quantity)
    except DomainException as exc:
        raise _command_error(exc)

    click.echo(f"Inventory for product '{dto.product_id}' created  (status={dto.status})")


@click.command("show")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the record as JSON.")
def inventory_show(product_id: str, as_json: bool) -> None:
    """Show the inventory record of a product."""
    handler = ShowInventoryHandler(inventory_repo=inventory_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise _command_error(exc)

    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
        return
    _display_record(dto)


@click.command("list")
@click.option("--status", default=None, help="Only rows with this status (any case).")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print records as JSON.")
def inventory_list(status: str | None, as_json: bool) -> None:
    """List inventory records, optionally filtered by status."""
    handler = ListInventoryHandler(inventory_repo=inventory_repository())

    try:
        dtos = handler.handle(status)
    except DomainException as exc:
        raise _command_error(exc)

    if as_json:
        click.echo(json.dumps([dto.to_dict() for dto in dtos], indent=2))
        return

    if not dtos:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'Product':<38} {'Available':>10} {'Status':<14} {'Replenished':<20}")
    click.echo("-" * 85)
    for dto in dtos:
        click.echo(
            f"{dto.product_id:<38} {dto.available_quantity:>10} {dto.status:<14} "
            f"{_format_timestamp(dto.replenishment_at):<20}"
        )


@click.command("adjust")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Signed quantity change, e.g. 5 or -2.")
@click.option("--reason", required=True, help="Why stock is changing.")
def inventory_adjust(product_id: str, delta: int, reason: str) -> None:
    """Adjust the on-hand quantity of a product."""
    handler = AdjustInventoryHandler(inventory_repo=inventory_repository())

    try:
        dto = handler.handle(product_id=product_id, quantity_delta=delta, reason=reason)
    except DomainException as exc:
        raise _command_error(exc)

    click.echo(
        f"Inventory for product '{dto.product_id}' adjusted by {delta:+d}, "
        f"now {dto.available_quantity} (status={dto.status})"
    )


@click.command("delete")
@click.option("--product", "product_id", required=True, help="Product ID.")
def inventory_delete(product_id: str) -> None:
    """Stop tracking inventory for a retired product."""
    handler = DeleteInventoryHandler(inventory_repo=inventory_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise _command_error(exc)

    click.echo(f"Inventory for product '{product_id}' deleted.")
