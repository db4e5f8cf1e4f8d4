"""CLI commands for variation stock levels."""

from __future__ import annotations

import click

from storefront.application.bulk_update_stock import BulkUpdateStockHandler
from storefront.application.dto import StockUpdateSpec
from storefront.application.update_stock import UpdateVariationStockHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository, variation_aggregator
from storefront.infrastructure.cli.output import emit, fail, json_option


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--variation", "variation_id", required=True, help="Variation ID.")
@click.option("--stock", type=int, default=None, help="New stock count (0 marks it sold out).")
@click.option("--status", default=None, help="Explicit status: 'Available' or 'Sold out'.")
@json_option
def product_stock(
    product_id: str,
    variation_id: str,
    stock: int | None,
    status: str | None,
    as_json: bool,
) -> None:
    """Update one variation's stock and/or status."""
    handler = UpdateVariationStockHandler(
        product_repo=product_repository(),
        aggregator=variation_aggregator(),
    )

    try:
        product = handler.handle(product_id, variation_id, stock=stock, status=status)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        emit("Stock updated successfully", product)
        return

    variation = next(v for v in product.variations if v.id == variation_id)
    click.echo(
        f"Product #{product.id} variation {variation.id} ({variation.value}): "
        f"stock {variation.stock}, {variation.status}; product stock {product.stock}"
    )


@click.command("bulk-stock")
@click.option(
    "--update",
    "updates",
    type=(str, str, int),
    multiple=True,
    required=True,
    metavar="PRODUCT_ID VARIATION_ID STOCK",
    help="One stock line; repeat for each variation.",
)
@json_option
def product_bulk_stock(updates: tuple[tuple[str, str, int], ...], as_json: bool) -> None:
    """Set stock for several variations at once."""
    handler = BulkUpdateStockHandler(
        product_repo=product_repository(),
        aggregator=variation_aggregator(),
    )
    specs = [StockUpdateSpec(p, v, s) for p, v, s in updates]

    try:
        results = handler.handle(specs)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        emit("Bulk stock update processed", results)
        return

    for r in results:
        outcome = "ok" if r.success else f"FAILED: {r.message}"
        click.echo(f"{r.product_id:<6} {r.variation_id:<6} {outcome}")
