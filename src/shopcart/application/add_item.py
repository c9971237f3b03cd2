"""Application service: Add Item use case."""

from __future__ import annotations

import structlog

from shopcart.application.cart_view import CartView
from shopcart.application.dto import CartSummaryDTO, summarize
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.model.value_objects import Money

log = structlog.get_logger(__name__)


class AddItemHandler:

    def __init__(self, cart: Cart, view: CartView) -> None:
        self._cart = cart
        self._view = view

    def handle(self, product_id: str, name: str, price: str) -> CartSummaryDTO:
        """Parse the submitted price, add the item and re-render the summary.

        Raises ValidationError if *price* is not a number.
        """
        item = LineItem.create(product_id, name, Money.of(price).amount)
        self._cart.add_item(item)
        log.debug("item_added", product_id=item.id, price=str(item.price))

        summary = summarize(self._cart)
        self._view.render_summary(summary)
        return summary
