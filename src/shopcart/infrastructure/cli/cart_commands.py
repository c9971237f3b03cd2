"""CLI commands for the Cart aggregate.

There is no persistence, so every command builds a fresh cart from its
``--item`` / ``--remove`` options and then acts on it.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import click

from shopcart.application.add_item import AddItemHandler
from shopcart.application.checkout import CheckoutHandler
from shopcart.application.remove_item import RemoveItemHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.cart import CHECKOUT_DELAY_SECONDS, Cart
from shopcart.infrastructure.bootstrap import cart as build_cart
from shopcart.infrastructure.cli.console_view import ConsoleCartView


@dataclass(frozen=True)
class ItemSpec:
    """Input: one submitted item, price still unparsed."""

    product_id: str
    name: str
    price: str


def _parse_item(raw: str) -> ItemSpec:
    """Parse 'ID:Name:Price' into an ItemSpec.  Names may contain colons."""
    if raw.count(":") < 2:
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'ID:Name:Price'."
        )
    head, price = raw.rsplit(":", 1)
    product_id, name = head.split(":", 1)
    if not product_id.strip():
        raise click.BadParameter(f"Missing product ID in '{raw}'.")
    return ItemSpec(product_id=product_id.strip(), name=name.strip(), price=price.strip())


def _fill_cart(cart: Cart, items: tuple[str, ...], removals: tuple[str, ...]) -> None:
    view = ConsoleCartView(quiet=True)
    add = AddItemHandler(cart, view)
    remove = RemoveItemHandler(cart, view)

    try:
        for spec in (_parse_item(raw) for raw in items):
            add.handle(product_id=spec.product_id, name=spec.name, price=spec.price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for product_id in removals:
        remove.handle(product_id)


def _display_cart(cart: Cart) -> None:
    dto = ShowCartHandler(cart).handle()

    if not dto.items:
        click.echo("Cart is empty.")
    else:
        click.echo(f"  {'ID':<8} {'Product':<20} {'Qty':>5} {'Price':>10}")
        click.echo(f"  {'-'*46}")
        for line in dto.items:
            click.echo(
                f"  {line.product_id:<8} {line.name:<20} {line.quantity:>5} {line.price:>10}"
            )
        click.echo(f"  {'-'*46}")
    click.echo(f"  {'Items':<27} {dto.item_count:>19}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>19}")


_item_option = click.option(
    "--item",
    "items",
    multiple=True,
    help="Item to add as 'ID:Name:Price'. Repeatable.",
)
_remove_option = click.option(
    "--remove",
    "removals",
    multiple=True,
    help="Product ID to remove (every matching item). Repeatable.",
)


@click.command("summary")
@_item_option
@_remove_option
def cart_summary(items: tuple[str, ...], removals: tuple[str, ...]) -> None:
    """Show the cart built from the given items."""
    cart = build_cart()
    _fill_cart(cart, items, removals)
    _display_cart(cart)


@click.command("checkout")
@_item_option
@_remove_option
@click.option(
    "--delay",
    type=click.FloatRange(min=0),
    default=CHECKOUT_DELAY_SECONDS,
    show_default=True,
    help="Simulated payment latency in seconds.",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible outcomes.")
@click.pass_context
def cart_checkout(
    ctx: click.Context,
    items: tuple[str, ...],
    removals: tuple[str, ...],
    delay: float,
    seed: int | None,
) -> None:
    """Check out the cart built from the given items.

    Exits with status 1 when the simulated payment fails.
    """
    cart = build_cart(seed=seed, checkout_delay=delay)
    _fill_cart(cart, items, removals)
    _display_cart(cart)
    click.echo()

    handler = CheckoutHandler(cart, ConsoleCartView())
    receipt = asyncio.run(handler.handle())
    if receipt is None:
        ctx.exit(1)

    click.echo(f"  {'Tax':<27} {receipt.tax_amount:>19}")
    click.echo(f"  {'Shipping':<27} {receipt.shipping_amount:>19}")
    click.echo(f"  {'Total':<27} {receipt.total_amount:>19}")
