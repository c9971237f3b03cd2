"""Application service: Remove Item use case."""

from __future__ import annotations

import structlog

from shopcart.application.cart_view import CartView
from shopcart.application.dto import CartSummaryDTO, summarize
from shopcart.domain.model.cart import Cart

log = structlog.get_logger(__name__)


class RemoveItemHandler:

    def __init__(self, cart: Cart, view: CartView) -> None:
        self._cart = cart
        self._view = view

    def handle(self, product_id: str) -> CartSummaryDTO:
        before = self._cart.get_item_count()
        self._cart.remove_item(product_id)
        log.debug(
            "item_removed",
            product_id=product_id,
            removed=before - self._cart.get_item_count(),
        )

        summary = summarize(self._cart)
        self._view.render_summary(summary)
        return summary
