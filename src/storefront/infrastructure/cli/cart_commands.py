"""CLI commands for the Cart.

Carts are not persisted, so each invocation builds a fresh session
cart from the operations given on the command line and prints it.
"""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.adjust_cart import AdjustCartQuantityHandler
from storefront.application.cart_session import CartSession
from storefront.application.dto import CartDTO
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import CatalogUnavailableError, DomainException, ValidationError
from storefront.domain.model.value_objects import UnitType
from storefront.infrastructure.bootstrap import catalog_repository


def _parse_unit(raw: str) -> UnitType:
    try:
        return UnitType.parse(raw)
    except ValidationError as exc:
        raise click.BadParameter(str(exc))


def _parse_add(raw: str) -> tuple[str, UnitType]:
    """Parse 'ID' or 'ID:dozen' into (product id, unit type)."""
    product_id, _, unit = raw.strip().partition(":")
    if not product_id:
        raise click.BadParameter(f"Invalid item '{raw}'. Expected 'ProductId[:single|dozen]'.")
    return product_id, _parse_unit(unit or "single")


def _parse_adjust(raw: str) -> tuple[str, UnitType, int]:
    """Parse 'ID:UNIT:DELTA', e.g. '7:single:-1'."""
    parts = raw.strip().split(":")
    if len(parts) != 3 or not parts[0]:
        raise click.BadParameter(
            f"Invalid adjustment '{raw}'. Expected 'ProductId:Unit:Delta'."
        )
    product_id, unit, delta_str = parts
    try:
        delta = int(delta_str)
    except ValueError:
        raise click.BadParameter(f"Invalid delta '{delta_str}' for product '{product_id}'.")
    return product_id, _parse_unit(unit), delta


@click.command("quote")
@click.option("--add", "adds", multiple=True, help="Add one unit: 'ProductId[:single|dozen]'. Repeatable.")
@click.option("--adjust", "adjusts", multiple=True, help="Change a line: 'ProductId:Unit:Delta'. Repeatable.")
def cart_quote(adds: tuple[str, ...], adjusts: tuple[str, ...]) -> None:
    """Apply adds, then adjustments, and print the priced cart."""
    parsed_adds = [_parse_add(a) for a in adds]
    parsed_adjusts = [_parse_adjust(a) for a in adjusts]

    session = CartSession()
    add_handler = AddToCartHandler(catalog_repo=catalog_repository(), session=session)
    adjust_handler = AdjustCartQuantityHandler(session=session)

    try:
        for product_id, unit_type in parsed_adds:
            notice = add_handler.handle(product_id, unit_type)
            click.echo(notice.message)
        for product_id, unit_type, delta in parsed_adjusts:
            adjust_handler.handle(product_id, unit_type, delta)
    except CatalogUnavailableError as exc:
        raise click.ClickException(f"Error loading products: {exc}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(ShowCartHandler(session=session).handle())


def _display_cart(dto: CartDTO) -> None:
    click.echo()
    if not dto.lines:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Item':<32} {'Qty':>5} {'Price':>10} {'Total':>11}")
    click.echo(f"  {'-'*61}")
    for line in dto.lines:
        click.echo(
            f"  {line.display_name:<32} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>11}"
        )
    click.echo(f"  {'-'*61}")
    click.echo(f"  {'Subtotal':<38} {dto.subtotal:>22}")
    if dto.has_discount:
        click.echo(f"  {'Discount (5%)':<38} {'-' + dto.discount:>22}")
    click.echo(f"  {'Total':<38} {dto.total:>22}")
    click.echo(f"  ({dto.item_count} item(s))")
