"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.dto import ProductDTO
from storefront.application.show_product import ListProductsHandler, ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository, variation_aggregator
from storefront.infrastructure.cli.output import emit, fail, json_option, parse_json_objects

_VARIATION_HELP = (
    "Variation as a JSON object, e.g. "
    '\'{"title": "500 g", "price": 40, "discPrice": 35, "stock": 10}\'. '
    "Repeat for each variation; the first one sets the list price."
)


def _echo_product(product: ProductDTO) -> None:
    click.echo(
        f"Product #{product.id} '{product.name}'  price {product.price}  "
        f"disc {product.disc_price}  stock {product.stock}"
    )
    click.echo(f"  {'ID':<6} {'Name':<12} {'Value':<16} {'Price':>10} {'Disc':>10} {'Stock':>6}  Status")
    for v in product.variations:
        click.echo(
            f"  {v.id:<6} {v.name:<12} {v.value:<16} {v.price:>10} "
            f"{v.disc_price:>10} {v.stock:>6}  {v.status}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--variation", "variations", multiple=True, required=True, help=_VARIATION_HELP)
@json_option
def product_add(name: str, variations: tuple[str, ...], as_json: bool) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        aggregator=variation_aggregator(),
    )

    try:
        raws = parse_json_objects(variations, "variation")
        product = handler.handle(name=name, variations=raws)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        emit("Product created successfully", product, created=True)
        return
    _echo_product(product)


@click.command("list")
@click.option(
    "--stock",
    type=click.Choice(["all", "in", "out"]),
    default="all",
    show_default=True,
    help="Filter on stock availability.",
)
@json_option
def product_list(stock: str, as_json: bool) -> None:
    """List all products in the catalog."""
    in_stock = {"all": None, "in": True, "out": False}[stock]
    products = ListProductsHandler(product_repo=product_repository()).handle(in_stock)

    if as_json:
        emit("Products retrieved successfully", products)
        return

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Disc':>10} {'Stock':>6}")
    click.echo("-" * 56)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.disc_price:>10} {p.stock:>6}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@json_option
def product_show(product_id: str, as_json: bool) -> None:
    """Show a product with its variations."""
    try:
        product = ShowProductHandler(product_repo=product_repository()).handle(product_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        emit("Product retrieved successfully", product)
        return
    _echo_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New product name.")
@click.option(
    "--variation",
    "variations",
    multiple=True,
    help="Replacement variation (JSON). Giving any replaces the whole list.",
)
@json_option
def product_update(
    product_id: str,
    name: str | None,
    variations: tuple[str, ...],
    as_json: bool,
) -> None:
    """Rename a product or replace its variations."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        aggregator=variation_aggregator(),
    )

    try:
        raws = parse_json_objects(variations, "variation") if variations else None
        product = handler.handle(product_id=product_id, name=name, variations=raws)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        emit("Product updated successfully", product)
        return
    _echo_product(product)
