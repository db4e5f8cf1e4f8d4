import logging

import click
from pydantic import ValidationError

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.commission_commands import (
    commission_calculate,
    commission_create,
    commission_list,
    commission_show,
    commission_toggle,
    commission_update,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.stock_commands import product_bulk_stock, product_stock


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Storefront: catalog and commission back office"""
    try:
        level = "DEBUG" if verbose else settings().LOG_LEVEL
    except ValidationError as exc:
        raise click.ClickException(f"Invalid settings: {exc}") from exc
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products and their variations."""


@cli.group()
def commission() -> None:
    """Manage restaurant commissions."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
product.add_command(product_stock)
product.add_command(product_bulk_stock)
commission.add_command(commission_calculate)
commission.add_command(commission_create)
commission.add_command(commission_list)
commission.add_command(commission_show)
commission.add_command(commission_toggle)
commission.add_command(commission_update)
