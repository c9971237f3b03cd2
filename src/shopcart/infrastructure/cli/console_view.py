"""CartView rendered to the terminal with click."""

from __future__ import annotations

import click

from shopcart.application.cart_view import CartView
from shopcart.application.dto import CartSummaryDTO


class ConsoleCartView(CartView):

    def __init__(self, quiet: bool = False) -> None:
        self._quiet = quiet

    def render_summary(self, summary: CartSummaryDTO) -> None:
        if not self._quiet:
            click.echo(f"Items: {summary.item_count}  Subtotal: {summary.subtotal}")

    def show_loader(self) -> None:
        click.echo("Processing payment...")

    def hide_loader(self) -> None:
        """The console has no spinner to hide; the progress line stays."""

    def show_success_message(self, message: str) -> None:
        click.secho(message, fg="green")

    def show_error_message(self, message: str) -> None:
        click.secho(message, fg="red", err=True)
