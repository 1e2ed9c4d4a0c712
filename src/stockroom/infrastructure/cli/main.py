import click

from stockroom.infrastructure.cli.inventory_commands import (
    inventory_adjust,
    inventory_create,
    inventory_delete,
    inventory_list,
    inventory_show,
)
from stockroom.infrastructure.logger import configure_logging


@click.group()
def cli() -> None:
    """Stockroom: per-product inventory tracking"""
    configure_logging()


@cli.group()
def inventory() -> None:
    """Manage inventory records."""


# Register subcommands
inventory.add_command(inventory_adjust)
inventory.add_command(inventory_create)
inventory.add_command(inventory_delete)
inventory.add_command(inventory_list)
inventory.add_command(inventory_show)
