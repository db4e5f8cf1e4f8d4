"""CLI commands for restaurant commissions."""

from __future__ import annotations

import click

from storefront.application.calculate_commission import CalculateCommissionHandler
from storefront.application.create_commission import CreateCommissionHandler
from storefront.application.dto import CommissionDTO
from storefront.application.show_commission import (
    ListCommissionsHandler,
    ShowCommissionHandler,
)
from storefront.application.toggle_commission import ToggleCommissionHandler
from storefront.application.update_commission import UpdateCommissionHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import commission_repository, settings
from storefront.infrastructure.cli.output import emit, fail, json_option, parse_json_objects

_RULE_HELP = (
    "Order-amount tier as JSON, e.g. "
    '\'{"type": "percentage", "value": 8, "minOrderAmount": 500, "maxOrderAmount": 1000}\'.'
)


def _describe(c: CommissionDTO) -> str:
    unit = "%" if c.type == "percentage" else " flat"
    state = "enabled" if c.status else "disabled"
    return (
        f"Commission #{c.id} for {c.restaurant_name} ({c.restaurant_id}): "
        f"{c.value}{unit}, {state}, {len(c.rules)} tier(s)"
    )


@click.command("create")
@click.option("--restaurant-id", required=True, help="Restaurant ID.")
@click.option("--restaurant-name", required=True, help="Restaurant display name.")
@click.option("--type", "commission_type", required=True, help="'percentage' or 'amount'.")
@click.option("--value", required=True, help="Percentage (0-100) or fixed amount.")
@click.option("--notes", default="", help="Free-text notes.")
@click.option("--disabled", is_flag=True, help="Create the commission switched off.")
@click.option("--rule", "rules", multiple=True, help=_RULE_HELP)
@json_option
def commission_create(
    restaurant_id: str,
    restaurant_name: str,
    commission_type: str,
    value: str,
    notes: str,
    disabled: bool,
    rules: tuple[str, ...],
    as_json: bool,
) -> None:
    """Set up the commission for a restaurant."""
    handler = CreateCommissionHandler(commission_repo=commission_repository())

    try:
        commission = handler.handle(
            restaurant_id=restaurant_id,
            restaurant_name=restaurant_name,
            commission_type=commission_type,
            value=value,
            notes=notes,
            status=not disabled,
            rules=parse_json_objects(rules, "rule"),
        )
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        emit("Restaurant commission created successfully", commission, created=True)
        return
    click.echo(_describe(commission))


@click.command("update")
@click.option("--id", "commission_id", required=True, type=int, help="Commission ID.")
@click.option("--type", "commission_type", default=None, help="'percentage' or 'amount'.")
@click.option("--value", default=None, help="New percentage or amount.")
@click.option("--notes", default=None, help="Replace the notes.")
@click.option("--rule", "rules", multiple=True, help=_RULE_HELP)
@click.option("--clear-rules", is_flag=True, help="Remove every order-amount tier.")
@json_option
def commission_update(
    commission_id: int,
    commission_type: str | None,
    value: str | None,
    notes: str | None,
    rules: tuple[str, ...],
    clear_rules: bool,
    as_json: bool,
) -> None:
    """Change a restaurant's commission."""
    handler = UpdateCommissionHandler(commission_repo=commission_repository())

    try:
        new_rules = parse_json_objects(rules, "rule") if rules or clear_rules else None
        commission = handler.handle(
            commission_id,
            commission_type=commission_type,
            value=value,
            notes=notes,
            rules=new_rules,
        )
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        emit("Restaurant commission updated successfully", commission)
        return
    click.echo(_describe(commission))


@click.command("toggle")
@click.option("--id", "commission_id", required=True, type=int, help="Commission ID.")
@json_option
def commission_toggle(commission_id: int, as_json: bool) -> None:
    """Switch a commission on or off."""
    handler = ToggleCommissionHandler(commission_repo=commission_repository())

    try:
        commission = handler.handle(commission_id)
    except DomainException as exc:
        fail(exc, as_json)

    message = f"Commission {'enabled' if commission.status else 'disabled'} successfully"
    if as_json:
        emit(message, {"id": commission.id, "status": commission.status})
        return
    click.echo(message)


@click.command("calculate")
@click.option("--restaurant-id", required=True, help="Restaurant ID.")
@click.option("--amount", required=True, help="Order amount.")
@json_option
def commission_calculate(restaurant_id: str, amount: str, as_json: bool) -> None:
    """Work out the commission on an order."""
    handler = CalculateCommissionHandler(
        commission_repo=commission_repository(),
        currency=settings().CURRENCY,
    )

    try:
        result = handler.handle(restaurant_id, amount)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        emit("Commission calculated successfully", result)
        return
    click.echo(
        f"Order {result.order_amount}: commission {result.commission}, "
        f"restaurant earns {result.restaurant_earning}"
    )


@click.command("show")
@click.option("--restaurant-id", required=True, help="Restaurant ID.")
@json_option
def commission_show(restaurant_id: str, as_json: bool) -> None:
    """Show the commission set up for a restaurant."""
    try:
        commission = ShowCommissionHandler(commission_repository()).handle(restaurant_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        emit("Restaurant commission retrieved successfully", commission)
        return
    click.echo(_describe(commission))
    for rule in commission.rules:
        upper = rule.max_order_amount or "and above"
        click.echo(f"  {rule.min_order_amount} - {upper}: {rule.value} ({rule.type})")


@click.command("list")
@click.option(
    "--status",
    type=click.Choice(["all", "enabled", "disabled"]),
    default="all",
    show_default=True,
)
@click.option("--search", default=None, help="Match restaurant name or ID.")
@json_option
def commission_list(status: str, search: str | None, as_json: bool) -> None:
    """List restaurant commissions, newest first."""
    wanted = {"all": None, "enabled": True, "disabled": False}[status]
    commissions = ListCommissionsHandler(commission_repository()).handle(wanted, search)

    if as_json:
        emit("Restaurant commissions retrieved successfully", commissions)
        return

    if not commissions:
        click.echo("No commissions found.")
        return

    click.echo(f"{'ID':<5} {'Restaurant':<24} {'Type':<11} {'Value':>8} {'Status':>9}")
    click.echo("-" * 61)
    for c in commissions:
        state = "enabled" if c.status else "disabled"
        click.echo(f"{c.id:<5} {c.restaurant_name:<24} {c.type:<11} {c.value:>8} {state:>9}")
